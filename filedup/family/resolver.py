"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    resolver.py                                                                                          *
*        Project: filedup                                                                                              *
*        Version: 0.1.0                                                                                                *
*        Created: 2026-09-30                                                                                           *
*        Author:  Jess Mann                                                                                            *
*        Email:   jess.a.mann@gmail.com                                                                                *
*        Copyright (c) 2026 Jess Mann                                                                                  *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    LAST MODIFIED:                                                                                                    *
*                                                                                                                      *
*        2026-10-15     By Jess Mann                                                                                   *
*                                                                                                                      *
*********************************************************************************************************************"""
from __future__ import annotations
import heapq
import logging
from dataclasses import dataclass
from typing import TypeAlias

from filedup.exceptions import TimeFailure
from filedup.family.classifier import Classification
from filedup.lib.types import TimeCapability, Timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NoAction:
    pass


@dataclass(frozen=True, slots=True)
class RemoveExactDuplicatesOnly:
    exact: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ReplaceOriginal:
    """
    The newest diverged copy replaces the original.

    Attributes:
        original: The original path, removed and then overwritten by the survivor.
        exact: Members identical to the original.
        discarded: Diverged members other than the survivor, newest first.
        survivor: The diverged member renamed onto the original's path.
    """
    original: str
    exact: tuple[str, ...]
    discarded: tuple[str, ...]
    survivor: str

    @property
    def remove(self) -> tuple[str, ...]:
        return self.exact + (self.original,) + self.discarded


RetentionDecision : TypeAlias = NoAction | RemoveExactDuplicatesOnly | ReplaceOriginal


@dataclass(frozen=True, slots=True)
class _Newest:
    """Heap entry ordered so that heapq (a min-heap) pops the newest file first."""

    created_at: Timestamp
    path: str

    def __lt__(self, other: _Newest) -> bool:
        return (self.created_at, self.path) > (other.created_at, other.path)


def _created_at(path: str, created_at: TimeCapability) -> Timestamp:
    try:
        return created_at(path)
    except OSError as e:
        raise TimeFailure(path, e) from e


def resolve(classification: Classification, created_at: TimeCapability) -> RetentionDecision:
    """
    Decide what to do with an original and its classified copies.

    Exact duplicates are always removed. If any copy has diverged, the one created most
    recently survives and replaces the original; on equal creation times the greatest path
    wins. Every other diverged copy is removed.

    Raises:
        TimeFailure: If the creation time of a diverged copy cannot be read.
    """
    exact = tuple(member.path for member in classification.exact)

    heap = [
        _Newest(_created_at(member.path, created_at), member.path)
        for member in classification.diverged
    ]

    if not heap:
        if not exact:
            return NoAction()
        return RemoveExactDuplicatesOnly(exact)

    heapq.heapify(heap)
    survivor = heapq.heappop(heap)
    discarded = []
    while heap:
        discarded.append(heapq.heappop(heap).path)

    logger.debug('Keeping %s (created %d) in place of %s', survivor.path, survivor.created_at, classification.original)
    return ReplaceOriginal(
        original=classification.original,
        exact=exact,
        discarded=tuple(discarded),
        survivor=survivor.path,
    )
