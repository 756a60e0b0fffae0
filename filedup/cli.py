"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    cli.py                                                                                               *
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
*        2026-10-18     By Jess Mann                                                                                   *
*                                                                                                                      *
*********************************************************************************************************************"""
from __future__ import annotations
import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from filedup import __version__, setup_logging
from filedup.exceptions import AppError
from filedup.family.runner import DistributorConfig, WorkDistributor
from filedup.lib.hashing import HASH_ALGORITHMS, CachedHasher, FileHasher, creation_time
from filedup.scan import files_with_extension, validate_extension

logger = logging.getLogger(__name__)


class ArgsNamespace(argparse.Namespace):
    dir: str
    filetype: str
    algorithm: str
    max_threads: str
    batch_size: int
    progress: bool
    verbose: bool


def _build_arg_parser() -> argparse.ArgumentParser:
    DEFAULT_DIR = os.getenv('FILEDUP_DIR', '.')
    DEFAULT_FILETYPE = os.getenv('FILEDUP_FILETYPE', '.pdf')
    DEFAULT_THREADS = os.getenv('FILEDUP_MAX_THREADS') or '0'

    parser = argparse.ArgumentParser(
        prog='filedup',
        description='File deduplicator. Prints a plan of rm/mv commands that removes "name (N).ext" copies '
                    'of "name.ext"; nothing is deleted or moved.',
    )
    parser.add_argument('-d', '--dir', default=DEFAULT_DIR, help=f'Directory to search (defaults to env var FILEDUP_DIR, which is "{DEFAULT_DIR}")')
    parser.add_argument('-f', '--filetype', default=DEFAULT_FILETYPE, help=f'File extension to search for, including the dot (default: {DEFAULT_FILETYPE})')
    parser.add_argument('--algorithm', default='sha1', choices=HASH_ALGORITHMS, help='Content hash used to compare files (default: %(default)s)')
    parser.add_argument('--max-threads', default=DEFAULT_THREADS, help='Maximum number of threads to use (0 picks a default from the CPU count)')
    parser.add_argument('--batch-size', type=int, default=16, help='Files planned per worker task (default: %(default)s)')
    parser.add_argument('--progress', action='store_true', help='Show a progress bar on stderr')
    parser.add_argument('-v', '--verbose', action='store_true', help='Increase verbosity')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    args = _build_arg_parser().parse_args(argv, namespace=ArgsNamespace())
    setup_logging(verbose=args.verbose)

    directory = Path(args.dir)
    try:
        extension = validate_extension(args.filetype)
    except AppError as e:
        logger.error('%s', e)
        return 1

    if not directory.exists():
        logger.error('Directory does not exist: %s', directory)
        return 1
    if not directory.is_dir():
        logger.error('Path is not a directory: %s', directory)
        return 1

    try:
        config = DistributorConfig(
            max_threads     = args.max_threads,
            batch_size      = args.batch_size,
            show_progress   = args.progress,
        )
    except ValidationError as e:
        logger.error('Invalid configuration: %s', e)
        return 1

    print(f'# Scanning for files in {directory}...')
    files = files_with_extension(directory, extension)
    print(f'# Processing {len(files)} {extension} files')

    try:
        result = WorkDistributor(config).run(
            files,
            extension,
            hasher      = CachedHasher(FileHasher(algorithm=args.algorithm)),
            created_at  = creation_time,
        )
    except AppError as e:
        logger.error('%s', e)
        return 1
    except KeyboardInterrupt:
        logger.warning("Operation interrupted by user")
        return 1

    if result:
        print(result)
    return 0


if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
