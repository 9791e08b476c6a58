# Copyright (c) 2024 PantherianCodeX

"""svdcheck - SVDConv results as GitHub check-run annotations.

Runs ARM's SVDConv against an SVD file, parses its two-line diagnostics into
messages grouped by source line and uploads them to a GitHub check run in
batches the Checks API accepts.
"""

from __future__ import annotations

__version__ = "0.1.0"

from svdcheck._internal.exceptions import (
    MalformedHeaderError,
    SvdcheckError,
    SvdcheckValidationError,
    ToolExecutionError,
)

from .annotations import MAX_ANNOTATIONS_PER_REQUEST, iter_annotation_batches, next_annotation_batch
from .config import Config, load_config
from .core.types import Annotation, GroupedMessages, Message, ParseResult, Stats
from .parser import aggregate_messages, transition
from .runner import run_svdconv
from .upload import UploadOutcome, publish_annotations

__all__ = [
    "MAX_ANNOTATIONS_PER_REQUEST",
    "Annotation",
    "Config",
    "GroupedMessages",
    "MalformedHeaderError",
    "Message",
    "ParseResult",
    "Stats",
    "SvdcheckError",
    "SvdcheckValidationError",
    "ToolExecutionError",
    "UploadOutcome",
    "__version__",
    "aggregate_messages",
    "iter_annotation_batches",
    "load_config",
    "next_annotation_batch",
    "publish_annotations",
    "run_svdconv",
    "transition",
]
