# Copyright (c) 2024 PantherianCodeX
"""Argument parser helpers used across CLI commands."""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from svdcheck._internal.utils import consume


class ArgumentRegistrar(Protocol):
    def add_argument(
        self, *args: Any, **kwargs: Any
    ) -> argparse.Action: ...  # pragma: no cover - stub


def register_argument(
    registrar: ArgumentRegistrar,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Register an argument on a parser/argument group, discarding the action handle."""
    consume(registrar.add_argument(*args, **kwargs))


def env_default(names: Sequence[str], environ: Mapping[str, str] | None = None) -> str | None:
    """Return the first non-empty environment variable among ``names``.

    GitHub Actions exposes ``with:`` inputs as ``INPUT_<NAME>`` variables.
    """
    env = os.environ if environ is None else environ
    for name in names:
        value = env.get(name, "").strip()
        if value:
            return value
    return None


__all__ = ["ArgumentRegistrar", "env_default", "register_argument"]
