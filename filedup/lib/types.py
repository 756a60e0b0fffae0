"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    types.py                                                                                             *
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
*        2026-10-09     By Jess Mann                                                                                   *
*                                                                                                                      *
*********************************************************************************************************************"""
from __future__ import annotations
import os
from typing import Protocol, TypeAlias, runtime_checkable

StrPath : TypeAlias = str | os.PathLike[str]

# Lowercase hex digest of a file's content
Digest : TypeAlias = str

# Nanoseconds since the epoch
Timestamp : TypeAlias = int

@runtime_checkable
class HashCapability(Protocol):
    """
    Returns the digest of a file. Raises OSError if the file cannot be read.
    """
    def __call__(self, path: str) -> Digest:
        ...

@runtime_checkable
class TimeCapability(Protocol):
    """
    Returns the creation time of a file. Raises OSError if it cannot be determined.
    """
    def __call__(self, path: str) -> Timestamp:
        ...

