# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

import pytest

from svdcheck.annotations import (
    MAX_ANNOTATIONS_PER_REQUEST,
    iter_annotation_batches,
    next_annotation_batch,
)
from svdcheck.core.model_types import AnnotationLevel, MessageLevel
from svdcheck.core.types import Annotation, GroupedMessages, Message
from svdcheck.parser import aggregate_messages
from tests.fixtures.checks import diagnostic_block

pytestmark = pytest.mark.unit

SVD_PATH = "devices/ARMCM3.svd"


def _message(line: int, code: str = "M305", level: MessageLevel = MessageLevel.WARNING) -> Message:
    return Message(level=level, code=code, line=line, message=f"problem on {line}")


def test_annotation_from_message() -> None:
    message = Message(
        level=MessageLevel.WARNING,
        code="M305",
        line=12,
        message="Field size exceeds register width.",
    )

    annotation = Annotation.from_message(SVD_PATH, message)

    assert annotation.to_payload() == {
        "path": SVD_PATH,
        "start_line": 12,
        "end_line": 12,
        "annotation_level": "warning",
        "message": "M305: Field size exceeds register width.",
    }


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (MessageLevel.INFO, AnnotationLevel.NOTICE),
        (MessageLevel.WARNING, AnnotationLevel.WARNING),
        (MessageLevel.ERROR, AnnotationLevel.FAILURE),
        ("unexpected", AnnotationLevel.FAILURE),
    ],
)
def test_annotation_level_mapping(level: MessageLevel | str, expected: AnnotationLevel) -> None:
    assert AnnotationLevel.for_message_level(level) is expected


def test_next_batch_on_empty_mapping_returns_none() -> None:
    messages: GroupedMessages = {}

    assert next_annotation_batch(messages, SVD_PATH) is None


def test_next_batch_pops_from_end_and_removes_empty_lines() -> None:
    messages: GroupedMessages = {
        3: [_message(3, "M1"), _message(3, "M2")],
        0: [_message(0, "M3", MessageLevel.INFO)],
    }

    batch = next_annotation_batch(messages, SVD_PATH)

    assert batch is not None
    assert [annotation.message.split(":")[0] for annotation in batch] == ["M2", "M1", "M3"]
    assert batch[2].start_line == 0
    assert batch[2].annotation_level is AnnotationLevel.NOTICE
    assert messages == {}


def test_next_batch_leaves_partial_group_in_place() -> None:
    messages: GroupedMessages = {7: [_message(7, f"M{index}") for index in range(60)]}

    batch = next_annotation_batch(messages, SVD_PATH)

    assert batch is not None
    assert len(batch) == MAX_ANNOTATIONS_PER_REQUEST
    assert len(messages[7]) == 10
    assert [message.code for message in messages[7]] == [f"M{index}" for index in range(10)]


def test_120_messages_drain_in_three_batches() -> None:
    buffer = "".join(
        diagnostic_block("ERROR", f"M{line}", f"issue {line}", line=line) for line in range(1, 121)
    )
    result = aggregate_messages(buffer)

    sizes: list[int] = []
    seen: set[str] = set()
    while (batch := next_annotation_batch(result.messages, SVD_PATH)) is not None:
        sizes.append(len(batch))
        seen.update(annotation.message for annotation in batch)

    assert sizes == [50, 50, 20]
    assert len(seen) == 120
    assert result.messages == {}


def test_iter_annotation_batches_respects_custom_limit() -> None:
    messages: GroupedMessages = {line: [_message(line)] for line in range(7)}

    sizes = [len(batch) for batch in iter_annotation_batches(messages, SVD_PATH, limit=3)]

    assert sizes == [3, 3, 1]


@pytest.mark.parametrize("limit", [0, MAX_ANNOTATIONS_PER_REQUEST + 1])
def test_next_batch_rejects_out_of_range_limit(limit: int) -> None:
    with pytest.raises(ValueError, match="limit must be between"):
        _ = next_annotation_batch({1: [_message(1)]}, SVD_PATH, limit=limit)
