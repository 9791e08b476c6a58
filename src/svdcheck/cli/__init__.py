# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""CLI package for svdcheck."""

from __future__ import annotations

from .app import main

__all__ = ["main"]
