# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Resolve the repository and commit a workflow run is checking."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final, cast

from svdcheck._internal.exceptions import GitHubContextError
from svdcheck.github.client import DEFAULT_API_URL

REPOSITORY_ENV: Final[str] = "GITHUB_REPOSITORY"
SHA_ENV: Final[str] = "GITHUB_SHA"
EVENT_PATH_ENV: Final[str] = "GITHUB_EVENT_PATH"
API_URL_ENV: Final[str] = "GITHUB_API_URL"


def resolve_head_sha(event_payload: Mapping[str, object], fallback: str | None) -> str:
    """Prefer the pull request head commit over the workflow commit.

    Pull request workflows run on a merge commit, while annotations must land
    on the commit the author pushed.
    """
    pull_request = event_payload.get("pull_request")
    if isinstance(pull_request, Mapping):
        head = cast("Mapping[str, object]", pull_request).get("head")
        if isinstance(head, Mapping):
            sha = cast("Mapping[str, object]", head).get("sha")
            if isinstance(sha, str) and sha:
                return sha
    if fallback:
        return fallback
    msg = f"No commit SHA available: set {SHA_ENV} or run from a pull_request event"
    raise GitHubContextError(msg)


def load_event_payload(path: Path | None) -> dict[str, object]:
    if path is None or not path.is_file():
        return {}
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Unable to read event payload {path}: {exc}"
        raise GitHubContextError(msg) from exc
    if not isinstance(raw, dict):
        msg = f"Event payload {path} is not a JSON object"
        raise GitHubContextError(msg)
    return cast("dict[str, object]", raw)


@dataclass(slots=True, frozen=True)
class GitHubContext:
    owner: str
    repo: str
    sha: str
    api_url: str = DEFAULT_API_URL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GitHubContext:
        """Build the context from the variables GitHub Actions exports.

        Raises:
            GitHubContextError: If the repository or commit cannot be determined.
        """
        env = os.environ if environ is None else environ
        repository = env.get(REPOSITORY_ENV, "").strip()
        owner, sep, repo = repository.partition("/")
        if not sep or not owner or not repo:
            msg = f"{REPOSITORY_ENV} must be set to 'owner/repo' (got {repository!r})"
            raise GitHubContextError(msg)
        event_path = env.get(EVENT_PATH_ENV)
        payload = load_event_payload(Path(event_path) if event_path else None)
        sha = resolve_head_sha(payload, env.get(SHA_ENV))
        api_url = env.get(API_URL_ENV) or DEFAULT_API_URL
        return cls(owner=owner, repo=repo, sha=sha, api_url=api_url)


__all__ = [
    "API_URL_ENV",
    "EVENT_PATH_ENV",
    "REPOSITORY_ENV",
    "SHA_ENV",
    "GitHubContext",
    "load_event_payload",
    "resolve_head_sha",
]
