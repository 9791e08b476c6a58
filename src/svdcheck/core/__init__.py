# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core data types shared across svdcheck."""

from __future__ import annotations

from .model_types import (
    AnnotationLevel,
    CheckConclusion,
    CheckStatus,
    DataFormat,
    LogComponent,
    LogFormat,
    MessageLevel,
    ParserPhase,
)
from .types import Annotation, GroupedMessages, Message, MessageHeader, ParseResult, Stats

__all__ = [
    "Annotation",
    "AnnotationLevel",
    "CheckConclusion",
    "CheckStatus",
    "DataFormat",
    "GroupedMessages",
    "LogComponent",
    "LogFormat",
    "Message",
    "MessageHeader",
    "MessageLevel",
    "ParseResult",
    "ParserPhase",
    "Stats",
]
