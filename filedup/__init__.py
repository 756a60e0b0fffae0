"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    __init__.py                                                                                          *
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
*        2026-10-12     By Jess Mann                                                                                   *
*                                                                                                                      *
*********************************************************************************************************************"""
from __future__ import annotations
import colorlog
import logging

__version__ = '0.1.0'

SUPPRESS_INFO = False

def setup_logging(verbose : bool = False) -> logging.Logger:
    """
    Configure colored logging on stderr.

    stdout is reserved for the generated plan, so every log record goes to stderr.
    """
    # Define a custom formatter class to supress info level names
    class CustomFormatter(colorlog.ColoredFormatter):

        def format(self, record):
            if SUPPRESS_INFO and record.levelno == logging.INFO:
                # Exclude the level name for INFO messages
                self._style._fmt = '%(message)s'
            else:
                # Include the level name for other levels
                self._style._fmt = '(%(log_color)s%(levelname)s%(reset)s) %(message)s'
            return super().format(record)

    # Configure colored logging with the custom formatter
    handler = colorlog.StreamHandler()
    handler.setFormatter(CustomFormatter(
        # Initial format string (will be overridden in the formatter)
        '',
        log_colors={
            'DEBUG': 'green',
            'INFO': 'blue',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        }))

    root_logger = logging.getLogger()
    root_logger.handlers = []  # Clear existing handlers
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    return root_logger
