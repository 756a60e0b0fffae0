"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    matcher.py                                                                                           *
*        Project: filedup                                                                                              *
*        Version: 0.1.0                                                                                                *
*        Created: 2026-09-29                                                                                           *
*        Author:  Jess Mann                                                                                            *
*        Email:   jess.a.mann@gmail.com                                                                                *
*        Copyright (c) 2026 Jess Mann                                                                                  *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    LAST MODIFIED:                                                                                                    *
*                                                                                                                      *
*        2026-10-17     By Jess Mann                                                                                   *
*                                                                                                                      *
*********************************************************************************************************************"""
from __future__ import annotations
import logging
import os
import re
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Iterable

from filedup.exceptions import InvalidPathError, InvalidPatternError
from filedup.lib.types import StrPath

logger = logging.getLogger(__name__)

# Copy suffix appended by "Save As" dialogs, e.g. "doc (2).pdf"
COPY_SUFFIX = r' \(\d+\)'

SEPARATORS = ('/', os.sep) if os.altsep is None else ('/', os.sep, os.altsep)

def path_text(path : StrPath) -> str:
    """
    Return the text of a path, failing if it cannot be represented as UTF-8.

    Raises:
        InvalidPathError: If the path contains undecodable bytes.
    """
    text = os.fspath(path)
    if isinstance(text, bytes):
        raise InvalidPathError(repr(text), 'Path is not text')
    try:
        text.encode('utf-8')
    except UnicodeEncodeError as e:
        raise InvalidPathError(text, 'Path contains invalid UTF-8') from e
    return text

def file_stem(path : StrPath) -> str:
    """
    The filename of a path without its extension.

    Raises:
        InvalidPathError: If no stem can be derived.
    """
    text = path_text(path)
    stem = PurePath(text).stem
    if not stem:
        raise InvalidPathError(text, 'Invalid file path')
    return stem

def _is_text(path : StrPath) -> bool:
    try:
        path_text(path)
    except InvalidPathError:
        logger.debug('Skipping path that is not valid text: %r', path)
        return False
    return True

def escape_stem(stem : str) -> str:
    return re.escape(stem)

def family_pattern(original : StrPath, extension : str) -> re.Pattern[str]:
    """
    Build the pattern recognizing numbered copies of an original.

    For "doc.pdf" the pattern matches "doc (1).pdf", "doc (27).pdf", etc.

    Raises:
        InvalidPathError: If the original has no stem.
        InvalidPatternError: If the pattern cannot be compiled.
    """
    pattern = f'{escape_stem(file_stem(original))}{COPY_SUFFIX}{re.escape(extension)}'
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, e) from e

def match_family(original : StrPath, extension : str, candidates : Iterable[StrPath]) -> tuple[str, ...]:
    """
    Return the candidates that are numbered copies of the original, in input order.

    The pattern is searched for anywhere in the candidate's path text, not matched against
    the filename alone. A directory named like a copy therefore pulls in everything below it.

    Args:
        original: The original file, e.g. "scans/doc.pdf"
        extension: The extension shared by the original and its copies, including the dot.
        candidates: Every path to consider.

    Returns:
        The matching candidate paths, never including the original itself.
    """
    original_text = path_text(original)
    pattern = family_pattern(original_text, extension)

    members = []
    for candidate in candidates:
        if not _is_text(candidate):
            continue
        text = os.fspath(candidate)
        if text == original_text:
            continue
        if pattern.search(text):
            members.append(text)
    return tuple(members)


@dataclass
class FamilyIndex:
    """
    A read-only lookup from filename stems to the candidates that are copies of them.

    Built once per run so each original's family is found without rescanning every
    candidate. For every place in a candidate where " (<digits>)<ext>" begins, each
    non-empty suffix of the filename text before it is registered. An original's family
    is then the set of candidates registered under its stem, which is exactly what
    match_family() finds.
    """
    extension : str
    candidates : tuple[str, ...] = ()
    _by_stem : dict[str, list[int]] = field(default_factory=dict, repr=False)

    @classmethod
    def build(cls, candidates : Iterable[StrPath], extension : str) -> FamilyIndex:
        texts = tuple(os.fspath(c) for c in candidates)
        # Zero-width so that overlapping suffixes are all found
        suffix_re = re.compile(f'(?={COPY_SUFFIX}{re.escape(extension)})')

        by_stem : dict[str, list[int]] = defaultdict(list)
        for position, text in enumerate(texts):
            if not _is_text(text):
                continue

            stems = set()
            for match in suffix_re.finditer(text):
                prefix = text[:match.start()]
                cut = max(prefix.rfind(sep) for sep in SEPARATORS)
                name = prefix[cut + 1:]
                stems.update(name[i:] for i in range(len(name)))

            for stem in stems:
                by_stem[stem].append(position)

        logger.debug('Indexed %d candidate(s) under %d stem(s)', len(texts), len(by_stem))
        return cls(extension=extension, candidates=texts, _by_stem=dict(by_stem))

    def members(self, original : StrPath) -> tuple[str, ...]:
        """
        Return the family members of an original, in candidate order.

        Raises:
            InvalidPathError: If the original has no stem or is not valid text.
        """
        original_text = path_text(original)
        stem = file_stem(original_text)
        return tuple(
            self.candidates[position]
            for position in self._by_stem.get(stem, ())
            if self.candidates[position] != original_text
        )
