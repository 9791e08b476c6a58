# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""``svdcheck install``: download SVDConv into the tool cache."""

from __future__ import annotations

import argparse
import pathlib
from typing import TYPE_CHECKING

from svdcheck.cli.helpers import echo, register_argument
from svdcheck.tool_cache import SVDCONV_VERSION, ToolCache, default_cache_root, ensure_svdconv

if TYPE_CHECKING:
    from svdcheck.cli.types import SubparserCollection


def register_install_command(subparsers: SubparserCollection) -> None:
    """Attach the ``svdcheck install`` command to the CLI."""
    install = subparsers.add_parser(
        "install",
        help="Download SVDConv into the tool cache and print its path",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(
        install,
        "--svdconv-version",
        default=SVDCONV_VERSION,
        help="SVDConv version to install.",
    )
    register_argument(
        install,
        "--cache-dir",
        type=pathlib.Path,
        default=None,
        help="Tool cache root (default: $RUNNER_TOOL_CACHE/svdcheck or ~/.cache/svdcheck).",
    )


def execute_install(args: argparse.Namespace) -> int:
    cache = ToolCache(args.cache_dir or default_cache_root())
    path = ensure_svdconv(cache, version=args.svdconv_version)
    echo(str(path))
    return 0


__all__ = ["execute_install", "register_install_command"]
