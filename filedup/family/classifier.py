"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    classifier.py                                                                                        *
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
*        2026-10-11     By Jess Mann                                                                                   *
*                                                                                                                      *
*********************************************************************************************************************"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable

from filedup.exceptions import HashFailure
from filedup.lib.types import Digest, HashCapability

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ClassifiedMember:
    path: str
    digest: Digest
    exact: bool

    @property
    def diverged(self) -> bool:
        return not self.exact


@dataclass(frozen=True, slots=True)
class Classification:
    """An original's digest, and each family member labelled against it."""

    original: str
    digest: Digest
    members: tuple[ClassifiedMember, ...]

    @property
    def exact(self) -> tuple[ClassifiedMember, ...]:
        return tuple(m for m in self.members if m.exact)

    @property
    def diverged(self) -> tuple[ClassifiedMember, ...]:
        return tuple(m for m in self.members if m.diverged)


def _digest(path: str, hasher: HashCapability) -> Digest:
    try:
        return hasher(path)
    except OSError as e:
        raise HashFailure(path, e) from e


def classify(original: str, members: Iterable[str], hasher: HashCapability) -> Classification:
    """
    Hash the original once and label each member as an exact duplicate or diverged.

    Fails on the first file that cannot be hashed, so no partial classification is returned.

    Raises:
        HashFailure: If the original or any member cannot be read.
    """
    original_digest = _digest(original, hasher)

    classified = []
    for member in members:
        digest = _digest(member, hasher)
        exact = digest == original_digest
        logger.debug('%s %s (%s)', member, digest, 'exact' if exact else 'diverged')
        classified.append(ClassifiedMember(path=member, digest=digest, exact=exact))

    return Classification(original=original, digest=original_digest, members=tuple(classified))
