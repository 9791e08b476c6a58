# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Publish parsed SVDConv messages as annotations on a GitHub check run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from svdcheck._internal.logging_utils import structured_extra
from svdcheck.annotations import next_annotation_batch
from svdcheck.core.model_types import CheckConclusion, LogComponent
from svdcheck.github.check_run import CheckRun

if TYPE_CHECKING:
    from svdcheck.core.types import ParseResult
    from svdcheck.github.client import CheckRunClient
    from svdcheck.github.context import GitHubContext

logger: logging.Logger = logging.getLogger("svdcheck.upload")

DEFAULT_CHECK_NAME: Final[str] = "SVDConv"
CANCELLED_SUMMARY: Final[str] = "SVDConv annotations could not be uploaded"
CANCELLED_TEXT: Final[str] = (
    "An unexpected error occurred while uploading the SVDConv results. "
    "See the workflow logs for details."
)


@dataclass(slots=True, frozen=True)
class UploadOutcome:
    check_run_id: int
    conclusion: CheckConclusion
    batches: int
    annotations: int


def publish_annotations(
    client: CheckRunClient,
    *,
    context: GitHubContext,
    svd_path: str,
    result: ParseResult,
    name: str = DEFAULT_CHECK_NAME,
) -> UploadOutcome:
    """Create a check run and stream every parsed message onto it.

    ``result.messages`` is drained in the process. Batches are sent exactly
    once, in order; when any update fails the run is cancelled with a fixed
    message and no retry is attempted.

    Args:
        client: Check-run API implementation.
        context: Repository and commit the run is attached to.
        svd_path: Repository path of the SVD file, used for every annotation.
        result: Parsed SVDConv output.
        name: Check run name.

    Returns:
        The run id, final conclusion and how much was uploaded.

    Raises:
        CheckRunCreateError: If the check run could not be created.
    """
    stats = result.stats
    total = result.message_count
    logger.info(
        "SVDConv reported %s",
        stats.describe(),
        extra=structured_extra(
            component=LogComponent.UPLOAD,
            path=svd_path,
            counts=stats.as_counts(),
        ),
    )
    check = CheckRun.create(
        client,
        owner=context.owner,
        repo=context.repo,
        name=name,
        head_sha=context.sha,
    )
    batches = 0
    uploaded = 0
    try:
        while (batch := next_annotation_batch(result.messages, svd_path)) is not None:
            check.update(
                summary=stats.describe(),
                text=f"Uploading annotations ({uploaded + len(batch)}/{total})",
                annotations=batch,
            )
            batches += 1
            uploaded += len(batch)
            logger.debug(
                "Uploaded batch %s with %s annotations",
                batches,
                len(batch),
                extra=structured_extra(
                    component=LogComponent.UPLOAD,
                    check_run_id=check.id,
                    batch=batches,
                ),
            )
        check.complete(
            summary=stats.describe(),
            text=f"SVDConv reported {total} messages for `{svd_path}`.",
            conclusion=CheckConclusion.NEUTRAL,
        )
    except Exception:
        logger.exception(
            "Uploading annotations failed after %s batches; cancelling check run %s",
            batches,
            check.id,
            extra=structured_extra(component=LogComponent.UPLOAD, check_run_id=check.id),
        )
        check.cancel(summary=CANCELLED_SUMMARY, text=CANCELLED_TEXT)
        return UploadOutcome(
            check_run_id=check.id,
            conclusion=CheckConclusion.CANCELLED,
            batches=batches,
            annotations=uploaded,
        )
    return UploadOutcome(
        check_run_id=check.id,
        conclusion=CheckConclusion.NEUTRAL,
        batches=batches,
        annotations=uploaded,
    )


__all__ = [
    "CANCELLED_SUMMARY",
    "CANCELLED_TEXT",
    "DEFAULT_CHECK_NAME",
    "UploadOutcome",
    "publish_annotations",
]
