# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared helpers for svdcheck CLI commands."""

from __future__ import annotations

from .args import env_default, register_argument
from .formatting import Table, message_rows, render_messages, stringify
from .io import echo

__all__ = [
    "Table",
    "echo",
    "env_default",
    "message_rows",
    "register_argument",
    "render_messages",
    "stringify",
]
