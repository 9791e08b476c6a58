# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from collections.abc import Mapping
from typing import NewType

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

from ..config import (
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
)

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    SvdcheckError: ErrorCode("SC000"),
    SvdcheckValidationError: ErrorCode("SC100"),
    ConfigValidationError: ErrorCode("SC110"),
    UnsupportedConfigVersionError: ErrorCode("SC111"),
    ConfigReadError: ErrorCode("SC112"),
    InvalidConfigFileError: ErrorCode("SC113"),
    ParseError: ErrorCode("SC200"),
    MalformedHeaderError: ErrorCode("SC201"),
    ToolExecutionError: ErrorCode("SC300"),
    ToolCacheError: ErrorCode("SC310"),
    UnsupportedPlatformError: ErrorCode("SC311"),
    ToolDownloadError: ErrorCode("SC312"),
    GitHubError: ErrorCode("SC400"),
    GitHubContextError: ErrorCode("SC401"),
    GitHubApiError: ErrorCode("SC402"),
    CheckRunCreateError: ErrorCode("SC403"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured svdcheck exception."""

    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("SC000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes."""

    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
