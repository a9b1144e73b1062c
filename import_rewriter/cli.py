"""
Import Rewriter CLI - Command Line Interface

Rewrites matching Go import paths in files, directory trees or stdin while
leaving every other byte untouched.
"""

import argparse
import sys
import time
from typing import Optional

from loguru import logger

from import_rewriter import __version__
from import_rewriter.analyzers.analyzer_factory import AnalyzerFactory
from import_rewriter.config.config import configs
from import_rewriter.exceptions import UsageError
from import_rewriter.models.domain_models import OutputMode
from import_rewriter.rewriter.file_driver import ErrorReporter, FileDriver
from import_rewriter.rewriter.matcher import PathMatcher, validate_replacement

USAGE_EXIT_CODE = 2


def setup_logging(verbose: bool = False) -> None:
    """
    Route log records to stderr; stdout is reserved for rewritten sources and diffs.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = "DEBUG" if verbose else configs.LOG_LEVEL
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}",
    )


def validate_environment(args: argparse.Namespace) -> None:
    """Validate flag combinations and configuration before touching any input."""
    validate_replacement(args.replace, args.find)
    if args.diff:
        try:
            configs.validate_diff_config()
        except ValueError as e:
            raise UsageError(str(e)) from e


def rewrite_command(args: argparse.Namespace) -> int:
    """
    Execute the rewrite over every path argument, or stdin when there are none.

    Returns:
        Exit code (0 for success, 2 if any input failed)
    """
    start_time = time.perf_counter()

    reporter = ErrorReporter()
    driver = FileDriver(
        match=PathMatcher(args.find, args.replace),
        analyzer=AnalyzerFactory.create_analyzer("go"),
        mode=OutputMode(list=args.list, write=args.write, diff=args.diff),
        reporter=reporter,
    )

    if not args.paths:
        driver.process_stdin()
    else:
        for path in args.paths:
            driver.process_path(path)

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Processed {driver.files_processed} file(s), {driver.files_changed} changed, "
        f"{reporter.error_count} error(s) in {elapsed:.2f}s"
    )
    return reporter.exit_code


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='import-rewriter',
        usage='%(prog)s [flags] [path ...]',
        description='Rewrite Go import paths in place, preserving all other bytes',
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'import-rewriter {__version__}'
    )

    parser.add_argument(
        '-l',
        dest='list',
        action='store_true',
        help="list files whose rewrite differs from the input"
    )

    parser.add_argument(
        '-w',
        dest='write',
        action='store_true',
        help='write result to (source) file instead of stdout'
    )

    parser.add_argument(
        '-d',
        dest='diff',
        action='store_true',
        help='display diffs instead of rewriting files'
    )

    parser.add_argument(
        '-f',
        dest='find',
        type=str,
        default='',
        help='import path (or prefix) to find'
    )

    parser.add_argument(
        '-r',
        dest='replace',
        type=str,
        default='',
        help='import path (or prefix) to replace with'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (DEBUG) logging'
    )

    parser.add_argument(
        'paths',
        nargs='*',
        metavar='path',
        help='Go files or directories; reads stdin when omitted'
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        validate_environment(args)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"Usage Error: {e}", file=sys.stderr)
        return USAGE_EXIT_CODE

    return rewrite_command(args)


if __name__ == '__main__':
    sys.exit(main())
