"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    hashing.py                                                                                           *
*        Project: filedup                                                                                              *
*        Version: 0.1.0                                                                                                *
*        Created: 2026-09-28                                                                                           *
*        Author:  Jess Mann                                                                                            *
*        Email:   jess.a.mann@gmail.com                                                                                *
*        Copyright (c) 2026 Jess Mann                                                                                  *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    LAST MODIFIED:                                                                                                    *
*                                                                                                                      *
*        2026-10-16     By Jess Mann                                                                                   *
*                                                                                                                      *
*********************************************************************************************************************"""
from __future__ import annotations
import hashlib
import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path

import xxhash
from cachetools import LRUCache

from filedup.lib.types import Digest, HashCapability, Timestamp

logger = logging.getLogger(__name__)

HASH_ALGORITHMS : tuple[str, ...] = ('sha1', 'md5', 'sha256', 'xxhash')

def get_hasher(algorithm : str = 'sha1'):
    """
    Get a hasher object for a given algorithm.

    Args:
        algorithm: The name of the hashing algorithm.

    Returns:
        A hasher object.

    Raises:
        ValueError: If the algorithm is not supported by hashlib.
    """
    match algorithm.lower():
        case 'md5':
            return hashlib.md5()
        case 'sha1':
            return hashlib.sha1()
        case 'sha256':
            return hashlib.sha256()
        case 'xxhash':
            return xxhash.xxh64()
        case _:
            return hashlib.new(algorithm)


@dataclass(frozen=True, slots=True)
class FileHasher:
    """Streaming file hasher. SHA-1 by default."""

    algorithm: str = 'sha1'
    chunk_size_bytes: int = 1024 * 1024

    def checksum(self, path: str | Path) -> Digest:
        hasher = get_hasher(self.algorithm)
        with open(path, 'rb') as file_handle:
            while True:
                chunk = file_handle.read(self.chunk_size_bytes)
                if not chunk:
                    break
                hasher.update(chunk)
        return hasher.hexdigest()

    def __call__(self, path: str) -> Digest:
        return self.checksum(path)


@dataclass(slots=True)
class CachedHasher:
    """
    Wraps a hash capability with a threadsafe LRU cache keyed by path text.

    A file is typically hashed twice per run (once as an original, once as a member of
    its original's family), so caching halves the I/O.
    """

    hasher: HashCapability
    maxsize: int = 10000
    _cache: LRUCache = field(init=False, repr=False)
    _lock: threading.Lock = field(init=False, repr=False, default_factory=threading.Lock)

    def __post_init__(self) -> None:
        self._cache = LRUCache(maxsize=self.maxsize)

    def __call__(self, path: str) -> Digest:
        with self._lock:
            cached = self._cache.get(path)
        if cached is not None:
            return cached

        digest = self.hasher(path)
        logger.debug('Hashed %s: %s', path, digest)

        with self._lock:
            self._cache[path] = digest
        return digest


def creation_time(path: str) -> Timestamp:
    """
    Return the creation time of a file in nanoseconds.

    Uses the birth time where the platform reports one. Linux does not expose it through
    os.stat, so the modification time is used there instead.

    Raises:
        OSError: If the file cannot be stat'ed.
    """
    stat = os.stat(path)

    birthtime_ns = getattr(stat, 'st_birthtime_ns', None)
    if birthtime_ns is not None:
        return birthtime_ns

    birthtime = getattr(stat, 'st_birthtime', None)
    if birthtime is not None:
        return int(birthtime * 1_000_000_000)

    return stat.st_mtime_ns
