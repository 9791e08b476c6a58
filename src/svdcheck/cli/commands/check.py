# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""``svdcheck check``: run SVDConv and publish its messages as a check run."""

from __future__ import annotations

import argparse
import logging
import pathlib
from typing import TYPE_CHECKING, Final

from svdcheck._internal.exceptions import SvdcheckValidationError
from svdcheck.cli.helpers import echo, env_default, register_argument
from svdcheck.config import Config, load_config
from svdcheck.core.model_types import CheckConclusion
from svdcheck.github import GitHubChecksClient, GitHubContext
from svdcheck.runner import run_svdconv
from svdcheck.tool_cache import ToolCache, default_cache_root, ensure_svdconv
from svdcheck.upload import publish_annotations

if TYPE_CHECKING:
    from svdcheck.cli.types import SubparserCollection

logger: logging.Logger = logging.getLogger("svdcheck.cli")

PATH_ENV_NAMES: Final[tuple[str, ...]] = ("INPUT_PATH",)
TOKEN_ENV_NAMES: Final[tuple[str, ...]] = ("INPUT_TOKEN", "GITHUB_TOKEN")


def register_check_command(subparsers: SubparserCollection) -> None:
    """Attach the ``svdcheck check`` command to the CLI."""
    check = subparsers.add_parser(
        "check",
        help="Run SVDConv on an SVD file and annotate the commit",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(
        check,
        "path",
        nargs="?",
        default=None,
        help="Path of the SVD file, relative to the repository root (default: $INPUT_PATH).",
    )
    register_argument(
        check,
        "--token",
        default=None,
        help="GitHub token used for the Checks API (default: $INPUT_TOKEN or $GITHUB_TOKEN).",
    )
    register_argument(
        check,
        "--executable",
        type=pathlib.Path,
        default=None,
        help="SVDConv binary to run instead of the cached download.",
    )
    register_argument(
        check,
        "--config",
        type=pathlib.Path,
        default=None,
        help="Explicit svdcheck configuration file.",
    )
    register_argument(
        check,
        "--name",
        default=None,
        help="Check run name (default: from configuration).",
    )


def resolve_executable(explicit: pathlib.Path | None, config: Config) -> pathlib.Path:
    """Pick the SVDConv binary: command line, then configuration, then the tool cache."""
    if explicit is not None:
        return explicit
    if config.executable is not None:
        return config.executable
    cache = ToolCache(config.cache_dir or default_cache_root())
    return ensure_svdconv(cache, version=config.svdconv_version)


def execute_check(args: argparse.Namespace) -> int:
    """Execute the check command.

    Returns:
        ``0`` when the check run completed, ``1`` when it was cancelled.

    Raises:
        SvdcheckError: When configuration, SVDConv, parsing or check-run
            creation fails. Nothing is uploaded in these cases.
    """
    svd_path = args.path or env_default(PATH_ENV_NAMES)
    if not svd_path:
        msg = "An SVD file path is required (argument or $INPUT_PATH)"
        raise SvdcheckValidationError(msg)
    token = args.token or env_default(TOKEN_ENV_NAMES)
    if not token:
        msg = "A GitHub token is required (--token, $INPUT_TOKEN or $GITHUB_TOKEN)"
        raise SvdcheckValidationError(msg)
    config = load_config(args.config)
    context = GitHubContext.from_env()
    executable = resolve_executable(args.executable, config)

    result = run_svdconv(svd_path, executable=executable)

    with GitHubChecksClient(
        token,
        api_url=context.api_url,
        timeout_seconds=config.timeout_seconds,
    ) as client:
        outcome = publish_annotations(
            client,
            context=context,
            svd_path=svd_path,
            result=result,
            name=args.name or config.check_name,
        )
    if outcome.conclusion is not CheckConclusion.NEUTRAL:
        echo(f"[svdcheck] Check run {outcome.check_run_id} was cancelled; see the log above.", err=True)
        return 1
    echo(
        f"[svdcheck] Uploaded {outcome.annotations} annotations in {outcome.batches} "
        f"batches to check run {outcome.check_run_id}",
    )
    return 0


__all__ = ["execute_check", "register_check_command", "resolve_executable"]
