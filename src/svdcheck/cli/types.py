# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared CLI type definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import argparse

__all__ = ["SubparserCollection"]


class SubparserCollection(Protocol):
    """Protocol describing the subset of ``argparse._SubParsersAction`` we rely on."""

    def add_parser(
        self,
        name: str,
        **kwargs: Any,  # noqa: ANN401
    ) -> argparse.ArgumentParser:
        ...  # pragma: no cover - Protocol definition
