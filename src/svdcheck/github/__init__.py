# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""GitHub Checks integration: API client, check-run lifecycle and event context."""

from __future__ import annotations

from .check_run import CheckRun
from .client import DEFAULT_API_URL, CheckRunClient, GitHubChecksClient
from .context import GitHubContext, resolve_head_sha

__all__ = [
    "DEFAULT_API_URL",
    "CheckRun",
    "CheckRunClient",
    "GitHubChecksClient",
    "GitHubContext",
    "resolve_head_sha",
]
