"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    exceptions.py                                                                                        *
*        Project: filedup                                                                                              *
*        Version: 0.1.0                                                                                                *
*        Created: 2026-09-27                                                                                           *
*        Author:  Jess Mann                                                                                            *
*        Email:   jess.a.mann@gmail.com                                                                                *
*        Copyright (c) 2026 Jess Mann                                                                                  *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    LAST MODIFIED:                                                                                                    *
*                                                                                                                      *
*        2026-10-14     By Jess Mann                                                                                   *
*                                                                                                                      *
*********************************************************************************************************************"""
from __future__ import annotations


class AppError(Exception):
    pass

class ConfigurationError(AppError, ValueError):
    pass

class InvalidPathError(AppError):
    """
    A path has no usable filename stem, or its text cannot be represented as UTF-8.
    """
    def __init__(self, path : str, reason : str = 'invalid file path') -> None:
        self.path = path
        super().__init__(f'{reason}: {path!r}')

class InvalidPatternError(AppError):
    def __init__(self, pattern : str, error : Exception) -> None:
        self.pattern = pattern
        super().__init__(f"Failed to compile pattern '{pattern}': {error}")

class FileAccessError(AppError):
    """
    Reading a file (or its metadata) failed while planning.

    The underlying OSError is chained as __cause__.
    """
    action = 'access'

    def __init__(self, path : str, error : Exception | None = None) -> None:
        self.path = path
        message = f'Failed to {self.action} {path}'
        if error is not None:
            message = f'{message}: {error}'
        super().__init__(message)

class HashFailure(FileAccessError):
    action = 'hash'

class TimeFailure(FileAccessError):
    action = 'get creation time for'
