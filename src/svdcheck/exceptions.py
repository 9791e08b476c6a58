# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Public exception types re-exported from the internal package."""

from __future__ import annotations

from svdcheck._internal.exceptions import (
    CheckRunCreateError,
    GitHubApiError,
    GitHubContextError,
    GitHubError,
    MalformedHeaderError,
    ParseError,
    SvdcheckError,
    SvdcheckValidationError,
    ToolCacheError,
    ToolDownloadError,
    ToolExecutionError,
    UnsupportedPlatformError,
)

__all__ = [
    "CheckRunCreateError",
    "GitHubApiError",
    "GitHubContextError",
    "GitHubError",
    "MalformedHeaderError",
    "ParseError",
    "SvdcheckError",
    "SvdcheckValidationError",
    "ToolCacheError",
    "ToolDownloadError",
    "ToolExecutionError",
    "UnsupportedPlatformError",
]
