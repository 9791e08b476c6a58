# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from enum import StrEnum


class MessageLevel(StrEnum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def from_str(cls, raw: str) -> MessageLevel:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown message level '{raw}'") from exc

    @classmethod
    def from_tool(cls, raw: str) -> MessageLevel:
        """Map SVDConv's uppercase severity keyword (``INFO``/``WARNING``/``ERROR``)."""
        return cls.from_str(raw)


class AnnotationLevel(StrEnum):
    NOTICE = "notice"
    WARNING = "warning"
    FAILURE = "failure"

    @classmethod
    def for_message_level(cls, level: MessageLevel | str) -> AnnotationLevel:
        """Return the check-run annotation level for a message level.

        ``info`` becomes ``notice``, ``warning`` stays ``warning`` and every
        other value is reported as ``failure``.
        """
        match str(level):
            case MessageLevel.INFO:
                return cls.NOTICE
            case MessageLevel.WARNING:
                return cls.WARNING
            case _:
                return cls.FAILURE


class ParserPhase(StrEnum):
    NOISE = "noise"
    EXPECT_DESCRIPTION = "expect_description"


class CheckStatus(StrEnum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class CheckConclusion(StrEnum):
    SUCCESS = "success"
    FAILURE = "failure"
    NEUTRAL = "neutral"
    CANCELLED = "cancelled"


class LogFormat(StrEnum):
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log format '{raw}'") from exc


class LogComponent(StrEnum):
    CLI = "cli"
    PARSER = "parser"
    RUNNER = "runner"
    UPLOAD = "upload"
    GITHUB = "github"
    TOOL_CACHE = "tool_cache"


class DataFormat(StrEnum):
    JSON = "json"
    TABLE = "table"

    @classmethod
    def from_str(cls, raw: str) -> DataFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown data format '{raw}'") from exc


__all__ = [
    "AnnotationLevel",
    "CheckConclusion",
    "CheckStatus",
    "DataFormat",
    "LogComponent",
    "LogFormat",
    "MessageLevel",
    "ParserPhase",
]
