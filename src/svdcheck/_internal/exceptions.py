# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common exception hierarchy for svdcheck."""

from __future__ import annotations

from collections.abc import Sequence

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


class SvdcheckError(Exception):
    """Base error for all svdcheck exceptions."""


class SvdcheckValidationError(SvdcheckError, ValueError):
    """Raised when input data fails validation checks."""


class ParseError(SvdcheckError):
    """Raised when SVDConv output cannot be parsed."""


class MalformedHeaderError(ParseError):
    """Raised when a line carries the diagnostic marker but not a valid header."""

    def __init__(self, line: str, *, line_number: int | None = None) -> None:
        """Initialize the exception with the offending output line.

        Args:
            line: Raw output line that failed to match the header pattern.
            line_number: 1-based position of the line within the tool output.
        """
        self.line = line
        self.line_number = line_number
        location = f" at output line {line_number}" if line_number is not None else ""
        super().__init__(f"Malformed SVDConv message header{location}: {line!r}")


class ToolExecutionError(SvdcheckError):
    """Raised when SVDConv writes to standard error."""

    def __init__(self, command: Sequence[str], stderr: str, exit_code: int) -> None:
        self.command = list(command)
        self.stderr = stderr
        self.exit_code = exit_code
        first_line = stderr.strip().splitlines()[0] if stderr.strip() else ""
        super().__init__(f"SVDConv run failed (exit={exit_code}): {first_line}")


class ToolCacheError(SvdcheckError):
    """Raised when the SVDConv binary cannot be provided."""


class UnsupportedPlatformError(ToolCacheError):
    """Raised when no SVDConv build exists for the current platform."""

    def __init__(self, platform: str) -> None:
        self.platform = platform
        super().__init__(f"Unsupported platform {platform}")


class ToolDownloadError(ToolCacheError):
    """Raised when downloading SVDConv fails."""

    def __init__(self, url: str, error: Exception) -> None:
        self.url = url
        self.error = error
        super().__init__(f"Unable to download {url}: {error}")


class GitHubError(SvdcheckError):
    """Base error for GitHub interactions."""


class GitHubContextError(GitHubError):
    """Raised when the workflow environment does not describe a commit."""


class GitHubApiError(GitHubError):
    """Raised when the GitHub REST API rejects a request."""

    def __init__(self, method: str, url: str, status_code: int | None, body: str = "") -> None:
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body
        status = status_code if status_code is not None else "no response"
        super().__init__(f"GitHub API {method} {url} failed ({status})")


class CheckRunCreateError(GitHubError):
    """Raised when a check run cannot be created."""
