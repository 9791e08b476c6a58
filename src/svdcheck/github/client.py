# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Minimal GitHub Checks API client.

Only the two calls svdcheck needs are modelled: creating a check run and
updating it. :class:`CheckRunClient` describes that surface so tests and
alternative transports can substitute their own implementation.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Final, Protocol

import httpx

from svdcheck._internal.exceptions import GitHubApiError
from svdcheck._internal.logging_utils import structured_extra
from svdcheck.core.model_types import CheckStatus, LogComponent

if TYPE_CHECKING:
    from types import TracebackType

logger: logging.Logger = logging.getLogger("svdcheck.github")

DEFAULT_API_URL: Final[str] = "https://api.github.com"
GITHUB_API_VERSION: Final[str] = "2022-11-28"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0


class CheckRunClient(Protocol):
    """The check-run operations svdcheck relies on."""

    def create_check(
        self,
        owner: str,
        repo: str,
        *,
        name: str,
        head_sha: str,
        status: CheckStatus = CheckStatus.IN_PROGRESS,
    ) -> int:
        """Create a check run and return its id."""
        ...

    def update_check(
        self,
        owner: str,
        repo: str,
        check_run_id: int,
        payload: Mapping[str, object],
    ) -> None:
        """Apply ``payload`` to an existing check run."""
        ...


class GitHubChecksClient:
    """httpx-backed :class:`CheckRunClient` for the GitHub REST API.

    Example:
        ```python
        with GitHubChecksClient(token) as client:
            run_id = client.create_check("octo", "chips", name="SVDConv", head_sha=sha)
        ```
    """

    def __init__(
        self,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.Client | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout_seconds))

    @property
    def api_url(self) -> str:
        return self._api_url

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> GitHubChecksClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def _url(self, owner: str, repo: str, *parts: str) -> str:
        suffix = "/".join(("repos", owner, repo, "check-runs", *parts))
        return f"{self._api_url}/{suffix}"

    def _request(self, method: str, url: str, payload: Mapping[str, object]) -> httpx.Response:
        try:
            response = self._client.request(method, url, json=dict(payload), headers=self._headers)
        except httpx.HTTPError as exc:
            raise GitHubApiError(method, url, None, str(exc)) from exc
        if response.is_error:
            logger.debug(
                "GitHub API %s %s returned %s",
                method,
                url,
                response.status_code,
                extra=structured_extra(component=LogComponent.GITHUB),
            )
            raise GitHubApiError(method, url, response.status_code, response.text)
        return response

    def create_check(
        self,
        owner: str,
        repo: str,
        *,
        name: str,
        head_sha: str,
        status: CheckStatus = CheckStatus.IN_PROGRESS,
    ) -> int:
        url = self._url(owner, repo)
        response = self._request(
            "POST",
            url,
            {"name": name, "head_sha": head_sha, "status": status.value},
        )
        try:
            body = response.json()
        except ValueError as exc:
            raise GitHubApiError("POST", url, response.status_code, response.text) from exc
        check_run_id = body.get("id") if isinstance(body, dict) else None
        if not isinstance(check_run_id, int):
            raise GitHubApiError("POST", url, response.status_code, "response carried no check run id")
        return check_run_id

    def update_check(
        self,
        owner: str,
        repo: str,
        check_run_id: int,
        payload: Mapping[str, object],
    ) -> None:
        response = self._request("PATCH", self._url(owner, repo, str(check_run_id)), payload)
        logger.debug(
            "Updated check run %s (%s)",
            check_run_id,
            response.status_code,
            extra=structured_extra(component=LogComponent.GITHUB, check_run_id=check_run_id),
        )


__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "GITHUB_API_VERSION",
    "CheckRunClient",
    "GitHubChecksClient",
]
