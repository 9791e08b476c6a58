# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Bounded batching of parsed messages into check-run annotations."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from svdcheck.core.types import Annotation, GroupedMessages

MAX_ANNOTATIONS_PER_REQUEST: Final[int] = 50


def next_annotation_batch(
    messages: GroupedMessages,
    path: str,
    *,
    limit: int = MAX_ANNOTATIONS_PER_REQUEST,
) -> list[Annotation] | None:
    """Drain up to ``limit`` messages from ``messages`` into annotations.

    Messages are popped from the end of each line's list and a line is removed
    from the mapping once its list is empty, so repeated calls drain the
    mapping completely. Lines are visited in mapping order.

    Args:
        messages: Messages grouped by line number. Mutated in place.
        path: Repository path of the SVD file the annotations point at.
        limit: Maximum batch size, at most the GitHub per-request limit.

    Returns:
        The next batch, or ``None`` once ``messages`` is empty.
    """
    if not 1 <= limit <= MAX_ANNOTATIONS_PER_REQUEST:
        msg = f"limit must be between 1 and {MAX_ANNOTATIONS_PER_REQUEST}, got {limit}"
        raise ValueError(msg)
    if not messages:
        return None
    batch: list[Annotation] = []
    for line in list(messages):
        group = messages[line]
        while group and len(batch) < limit:
            batch.append(Annotation.from_message(path, group.pop()))
        if not group:
            del messages[line]
        if len(batch) >= limit:
            break
    return batch


def iter_annotation_batches(
    messages: GroupedMessages,
    path: str,
    *,
    limit: int = MAX_ANNOTATIONS_PER_REQUEST,
) -> Iterator[list[Annotation]]:
    while (batch := next_annotation_batch(messages, path, limit=limit)) is not None:
        yield batch


__all__ = ["MAX_ANNOTATIONS_PER_REQUEST", "iter_annotation_batches", "next_annotation_batch"]
