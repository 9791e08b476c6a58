# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Download and cache pinned SVDConv builds.

Binaries are stored as ``<root>/<tool>/<version>/<filename>`` so several
versions can live side by side and repeated runs reuse the same download.
"""

from __future__ import annotations

import logging
import os
import stat
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

import httpx

from svdcheck._internal.exceptions import ToolDownloadError, UnsupportedPlatformError
from svdcheck._internal.logging_utils import structured_extra
from svdcheck.core.model_types import LogComponent
from svdcheck.runner import SVDCONV_TOOL, default_executable

logger: logging.Logger = logging.getLogger("svdcheck.tool_cache")

SVDCONV_VERSION: Final[str] = "3.3.35"
TOOL_CACHE_ENV: Final[str] = "RUNNER_TOOL_CACHE"
DOWNLOAD_TIMEOUT_SECONDS: Final[float] = 120.0

_CMSIS_UTILITIES: Final[str] = (
    "https://github.com/ARM-software/CMSIS_5/raw/"
    "4b069d7bcb9ea77251ae2283db2ee650767f0f50/CMSIS/Utilities"
)
SVDCONV_DOWNLOAD_URLS: Final[dict[str, str]] = {
    "win32": f"{_CMSIS_UTILITIES}/Win32/SVDConv.exe",
    "linux": f"{_CMSIS_UTILITIES}/Linux64/SVDConv",
}


def default_cache_root(environ: Mapping[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    runner_cache = env.get(TOOL_CACHE_ENV)
    if runner_cache:
        return Path(runner_cache) / "svdcheck"
    return Path.home() / ".cache" / "svdcheck"


def svdconv_download_url(platform: str = sys.platform) -> str:
    """Return the pinned SVDConv download URL for ``platform``.

    Raises:
        UnsupportedPlatformError: If no build exists for the platform.
    """
    key = "linux" if platform.startswith("linux") else platform
    try:
        return SVDCONV_DOWNLOAD_URLS[key]
    except KeyError as exc:
        raise UnsupportedPlatformError(platform) from exc


@dataclass(slots=True, frozen=True)
class ToolCache:
    root: Path

    def tool_path(self, tool: str, version: str, filename: str) -> Path:
        return self.root / tool / version / filename

    def find(self, tool: str, version: str, filename: str) -> Path | None:
        candidate = self.tool_path(tool, version, filename)
        return candidate if candidate.is_file() else None

    def store(self, tool: str, version: str, filename: str, content: bytes) -> Path:
        destination = self.tool_path(tool, version, filename)
        destination.parent.mkdir(parents=True, exist_ok=True)
        partial = destination.with_name(f"{destination.name}.partial")
        _ = partial.write_bytes(content)
        _make_executable(partial)
        _ = partial.replace(destination)
        return destination


def _make_executable(path: Path) -> None:
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def _fetch(url: str, client: httpx.Client | None) -> bytes:
    try:
        if client is not None:
            response = client.get(url, follow_redirects=True)
        else:
            with httpx.Client(timeout=httpx.Timeout(DOWNLOAD_TIMEOUT_SECONDS)) as owned:
                response = owned.get(url, follow_redirects=True)
        _ = response.raise_for_status()
    except httpx.HTTPError as exc:
        raise ToolDownloadError(url, exc) from exc
    return response.content


def ensure_svdconv(
    cache: ToolCache,
    *,
    version: str = SVDCONV_VERSION,
    platform: str = sys.platform,
    client: httpx.Client | None = None,
) -> Path:
    """Return a cached SVDConv binary, downloading it on first use.

    Raises:
        UnsupportedPlatformError: If no build exists for ``platform``.
        ToolDownloadError: If the download fails.
    """
    filename = default_executable(platform)
    cached = cache.find(SVDCONV_TOOL, version, filename)
    if cached is not None:
        logger.debug(
            "Using cached SVDConv %s",
            version,
            extra=structured_extra(component=LogComponent.TOOL_CACHE, path=cached),
        )
        return cached
    url = svdconv_download_url(platform)
    logger.info(
        "Downloading SVDConv %s from %s",
        version,
        url,
        extra=structured_extra(component=LogComponent.TOOL_CACHE, tool=SVDCONV_TOOL),
    )
    content = _fetch(url, client)
    path = cache.store(SVDCONV_TOOL, version, filename, content)
    logger.info(
        "Cached SVDConv at %s",
        path,
        extra=structured_extra(component=LogComponent.TOOL_CACHE, path=path),
    )
    return path


__all__ = [
    "SVDCONV_DOWNLOAD_URLS",
    "SVDCONV_VERSION",
    "TOOL_CACHE_ENV",
    "ToolCache",
    "default_cache_root",
    "ensure_svdconv",
    "svdconv_download_url",
]
