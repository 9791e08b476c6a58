# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Private infrastructure modules for svdcheck internals."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from types import ModuleType

    error_codes: ModuleType
    exceptions: ModuleType
    logging_utils: ModuleType
    utils: ModuleType

_EXPOSED_MODULES: Final[tuple[str, ...]] = (
    "error_codes",
    "exceptions",
    "logging_utils",
    "utils",
)
__all__ = list(_EXPOSED_MODULES)  # pyright: ignore[reportUnsupportedDunderAll]


def __getattr__(name: str) -> ModuleType:
    if name not in _EXPOSED_MODULES:
        message = f"module 'svdcheck._internal' has no attribute '{name}'"
        raise AttributeError(message)
    module = importlib.import_module(f"{__name__}.{name}")
    globals()[name] = module
    return module


def __dir__() -> list[str]:
    return sorted(_EXPOSED_MODULES)
