"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    scan.py                                                                                              *
*        Project: filedup                                                                                              *
*        Version: 0.1.0                                                                                                *
*        Created: 2026-10-02                                                                                           *
*        Author:  Jess Mann                                                                                            *
*        Email:   jess.a.mann@gmail.com                                                                                *
*        Copyright (c) 2026 Jess Mann                                                                                  *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    LAST MODIFIED:                                                                                                    *
*                                                                                                                      *
*        2026-10-13     By Jess Mann                                                                                   *
*                                                                                                                      *
*********************************************************************************************************************"""
from __future__ import annotations
import glob
import logging
import os

from filedup.exceptions import ConfigurationError
from filedup.lib.types import StrPath

logger = logging.getLogger(__name__)

def validate_extension(extension : str) -> str:
    """
    Raises:
        ConfigurationError: If the extension is empty or lacks a leading dot.
    """
    if not extension.startswith('.') or len(extension) < 2:
        raise ConfigurationError(f"File extension must start with a dot (e.g. '.pdf'), got '{extension}'")
    return extension

def files_matching_pattern(directory : StrPath, pattern : str) -> list[str]:
    """
    List the files directly inside a directory whose names match a glob pattern.

    Subdirectories are not searched. Hidden files are included.

    Args:
        directory: The directory to search.
        pattern: A glob pattern for filenames, e.g. "*.pdf"

    Returns:
        The matching paths, sorted.
    """
    glob_pattern = os.path.join(glob.escape(os.fspath(directory)), pattern)
    paths = sorted(
        path
        for path in glob.glob(glob_pattern, include_hidden=True)
        if os.path.isfile(path)
    )
    logger.debug('Glob %s matched %d file(s)', glob_pattern, len(paths))
    return paths

def files_with_extension(directory : StrPath, extension : str) -> list[str]:
    return files_matching_pattern(directory, f'*{glob.escape(validate_extension(extension))}')
