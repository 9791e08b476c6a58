# Copyright (c) 2024 PantherianCodeX

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger: logging.Logger = logging.getLogger("svdcheck.runner")

type Command = list[str]


def consume(value: object | None) -> None:
    """Explicitly mark a value as intentionally unused."""

    _ = value


@dataclass(slots=True)
class CommandOutput:
    args: Command
    stdout: str
    stderr: str
    exit_code: int
    duration_ms: float


def run_command(args: Iterable[str], cwd: Path | None = None) -> CommandOutput:
    """Run a subprocess safely and return its captured output.

    Requires an iterable of string arguments and never uses ``shell=True``.
    Output is decoded as UTF-8; undecodable bytes become U+FFFD.

    Raises:
        OSError: If the executable cannot be started.
    """
    argv: Command = list(args)
    if not argv:
        raise ValueError
    if not all(a for a in argv):
        raise TypeError
    start = time.perf_counter()
    logger.debug("Executing command: %s", " ".join(argv))
    completed = subprocess.run(  # noqa: S603 - command arguments provided by caller
        argv,
        check=False,
        cwd=str(cwd) if cwd else None,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    duration_ms = (time.perf_counter() - start) * 1000
    if completed.returncode != 0:
        logger.warning("Command failed (exit=%s): %s", completed.returncode, " ".join(argv))
    return CommandOutput(
        args=argv,
        stdout=completed.stdout,
        stderr=completed.stderr,
        exit_code=completed.returncode,
        duration_ms=duration_ms,
    )


def normalise_enums_for_json(value: object) -> object:
    """Recursively convert enums (keys and values) into JSON-friendly primitives."""

    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {
            str(normalise_enums_for_json(key)): normalise_enums_for_json(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [normalise_enums_for_json(item) for item in value]
    return value


__all__ = [
    "Command",
    "CommandOutput",
    "consume",
    "normalise_enums_for_json",
    "run_command",
]
