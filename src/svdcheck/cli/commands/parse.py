# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""``svdcheck parse``: inspect saved SVDConv output without touching GitHub."""

from __future__ import annotations

import argparse
import pathlib
from typing import TYPE_CHECKING

from svdcheck.cli.helpers import echo, register_argument, render_messages
from svdcheck.core.model_types import DataFormat
from svdcheck.parser import aggregate_messages

if TYPE_CHECKING:
    from svdcheck.cli.types import SubparserCollection


def register_parse_command(subparsers: SubparserCollection) -> None:
    """Attach the ``svdcheck parse`` command to the CLI."""
    parse = subparsers.add_parser(
        "parse",
        help="Parse saved SVDConv output and print the messages",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(
        parse,
        "output",
        type=pathlib.Path,
        help="File containing SVDConv's standard output.",
    )
    register_argument(
        parse,
        "--format",
        choices=[fmt.value for fmt in DataFormat],
        default=DataFormat.TABLE.value,
        help="Output format.",
    )


def execute_parse(args: argparse.Namespace) -> int:
    path: pathlib.Path = args.output
    try:
        buffer = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        echo(f"[svdcheck] Unable to read {path}: {exc}", err=True)
        return 1
    result = aggregate_messages(buffer)
    for line in render_messages(result.messages, result.stats, DataFormat.from_str(args.format)):
        echo(line)
    return 0


__all__ = ["execute_parse", "register_parse_command"]
