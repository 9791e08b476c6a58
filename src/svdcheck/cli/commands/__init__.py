# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Subcommand implementations for the svdcheck CLI."""

from __future__ import annotations
