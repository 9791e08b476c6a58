# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""CLI entry point and dispatch for svdcheck commands."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Final

from svdcheck import __version__
from svdcheck._internal.error_codes import error_code_for
from svdcheck._internal.exceptions import SvdcheckError
from svdcheck.cli.commands import check as check_command
from svdcheck.cli.commands import install as install_command
from svdcheck.cli.commands import parse as parse_command
from svdcheck.cli.helpers import echo as _echo
from svdcheck.cli.helpers import register_argument as _register_argument
from svdcheck.logging import LOG_FORMATS, LOG_LEVELS, configure_logging

logger: logging.Logger = logging.getLogger("svdcheck.cli")

SVDCHECK_VERSION: Final[str] = __version__

CommandHandler = Callable[[argparse.Namespace], int]


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the svdcheck command-line interface.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code from the executed command handler (0 for success, non-zero for failure).
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        _echo(f"svdcheck {SVDCHECK_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    _ = configure_logging(args.log_format, log_level=args.log_level)
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    try:
        return handler(args)
    except SvdcheckError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        _echo(f"[svdcheck] {error_code_for(exc)}: {exc}", err=True)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svdcheck",
        description="Validate SVD files with SVDConv and report the results as GitHub annotations.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_argument(
        parser,
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Select logging output format (human-readable text or structured JSON).",
    )
    _register_argument(
        parser,
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Set verbosity of logged events.",
    )
    _register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the svdcheck version and exit.",
    )
    subparsers = parser.add_subparsers(dest="command")

    check_command.register_check_command(subparsers)
    parse_command.register_parse_command(subparsers)
    install_command.register_install_command(subparsers)
    return parser


def _command_handlers() -> Mapping[str, CommandHandler]:
    return {
        "check": check_command.execute_check,
        "parse": parse_command.execute_parse,
        "install": install_command.execute_install,
    }


__all__ = ["main"]
