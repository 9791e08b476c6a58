# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Lifecycle wrapper around a single GitHub check run."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime

from svdcheck._internal.exceptions import CheckRunCreateError, GitHubError
from svdcheck._internal.logging_utils import structured_extra
from svdcheck.core.model_types import CheckConclusion, CheckStatus, LogComponent
from svdcheck.core.types import Annotation
from svdcheck.github.client import CheckRunClient

logger: logging.Logger = logging.getLogger("svdcheck.github")


def _utc_timestamp() -> str:
    return datetime.now(UTC).replace(microsecond=0).isoformat().replace("+00:00", "Z")


@dataclass(slots=True)
class CheckRun:
    """A check run created through a :class:`CheckRunClient`.

    Attributes:
        client: Client used for every call on this run.
        id: GitHub check run id.
        owner: Repository owner.
        repo: Repository name.
        name: Check name, also used as the output title.
        head_sha: Commit the run is attached to.
        status: Last status sent to GitHub.
        conclusion: Final conclusion once the run is completed.
    """

    client: CheckRunClient
    id: int
    owner: str
    repo: str
    name: str
    head_sha: str
    status: CheckStatus = CheckStatus.IN_PROGRESS
    conclusion: CheckConclusion | None = None
    clock: Callable[[], str] = field(default=_utc_timestamp, repr=False)

    @classmethod
    def create(
        cls,
        client: CheckRunClient,
        *,
        owner: str,
        repo: str,
        name: str,
        head_sha: str,
    ) -> CheckRun:
        """Create an ``in_progress`` check run on ``head_sha``.

        Raises:
            CheckRunCreateError: If GitHub rejects the request.
        """
        try:
            check_run_id = client.create_check(
                owner,
                repo,
                name=name,
                head_sha=head_sha,
                status=CheckStatus.IN_PROGRESS,
            )
        except GitHubError as exc:
            msg = f"Unable to create check run '{name}' for {owner}/{repo}@{head_sha}: {exc}"
            raise CheckRunCreateError(msg) from exc
        logger.info(
            "Created check run %s for %s",
            check_run_id,
            head_sha,
            extra=structured_extra(component=LogComponent.GITHUB, check_run_id=check_run_id),
        )
        return cls(
            client=client,
            id=check_run_id,
            owner=owner,
            repo=repo,
            name=name,
            head_sha=head_sha,
        )

    def _output(
        self,
        summary: str,
        text: str,
        annotations: Sequence[Annotation] | None = None,
    ) -> dict[str, object]:
        output: dict[str, object] = {"title": self.name, "summary": summary, "text": text}
        if annotations is not None:
            output["annotations"] = [annotation.to_payload() for annotation in annotations]
        return output

    def update(
        self,
        *,
        summary: str,
        text: str,
        annotations: Sequence[Annotation] | None = None,
    ) -> None:
        """Send a new output; annotations are appended to those already on the run."""
        self.client.update_check(
            self.owner,
            self.repo,
            self.id,
            {
                "name": self.name,
                "status": CheckStatus.IN_PROGRESS.value,
                "output": self._output(summary, text, annotations),
            },
        )
        self.status = CheckStatus.IN_PROGRESS

    def complete(
        self,
        *,
        summary: str,
        text: str,
        conclusion: CheckConclusion = CheckConclusion.NEUTRAL,
    ) -> None:
        self.client.update_check(
            self.owner,
            self.repo,
            self.id,
            {
                "name": self.name,
                "status": CheckStatus.COMPLETED.value,
                "conclusion": conclusion.value,
                "completed_at": self.clock(),
                "output": self._output(summary, text),
            },
        )
        self.status = CheckStatus.COMPLETED
        self.conclusion = conclusion
        logger.info(
            "Check run %s completed (%s)",
            self.id,
            conclusion,
            extra=structured_extra(component=LogComponent.GITHUB, check_run_id=self.id),
        )

    def cancel(self, *, summary: str, text: str) -> None:
        self.complete(summary=summary, text=text, conclusion=CheckConclusion.CANCELLED)


__all__ = ["CheckRun"]
