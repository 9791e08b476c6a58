# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

from svdcheck._internal.exceptions import ToolExecutionError
from svdcheck._internal.logging_utils import structured_extra
from svdcheck._internal.utils import run_command
from svdcheck.core.model_types import LogComponent
from svdcheck.core.types import ParseResult
from svdcheck.parser import aggregate_messages

logger: logging.Logger = logging.getLogger("svdcheck.runner")

SVDCONV_TOOL: Final[str] = "SVDConv"


def default_executable(platform: str = sys.platform) -> str:
    return "SVDConv.exe" if platform == "win32" else SVDCONV_TOOL


def run_svdconv(
    svd_path: str | Path,
    *,
    executable: str | Path | None = None,
    cwd: Path | None = None,
) -> ParseResult:
    """Run SVDConv on ``svd_path`` and parse what it printed.

    A non-zero exit code is expected whenever SVDConv reports errors and is not
    treated as a failure. Anything written to standard error is.

    Raises:
        ToolExecutionError: If SVDConv could not be started or wrote to
            standard error.
        MalformedHeaderError: If its output contains an unparseable header.
    """
    command = [str(executable or default_executable()), str(svd_path)]
    logger.info("Running SVDConv (%s)", " ".join(command))
    try:
        result = run_command(command, cwd=cwd)
    except OSError as exc:
        logger.error(
            "Unable to start SVDConv: %s",
            exc,
            extra=structured_extra(
                component=LogComponent.RUNNER,
                tool=SVDCONV_TOOL,
                path=str(svd_path),
            ),
        )
        raise ToolExecutionError(command, str(exc), -1) from exc
    extra = structured_extra(
        component=LogComponent.RUNNER,
        tool=SVDCONV_TOOL,
        path=str(svd_path),
        exit_code=result.exit_code,
        duration_ms=result.duration_ms,
    )
    if result.stderr:
        logger.error("SVDConv wrote to stderr: %s", result.stderr.strip(), extra=extra)
        raise ToolExecutionError(command, result.stderr, result.exit_code)
    logger.debug("SVDConv run completed: exit=%s", result.exit_code, extra=extra)
    return aggregate_messages(result.stdout)


__all__ = ["SVDCONV_TOOL", "default_executable", "run_svdconv"]
