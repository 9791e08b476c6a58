# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core data classes for SVDConv diagnostics and check-run annotations.

SVDConv reports each diagnostic as a header line followed by a description
line. The parser turns those pairs into :class:`Message` records, groups them
by the SVD source line they refer to and keeps running :class:`Stats`. The
batcher then projects each message onto an :class:`Annotation` ready for the
GitHub Checks API.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .model_types import AnnotationLevel, MessageLevel

UNKNOWN_LINE = 0


@dataclass(slots=True, frozen=True)
class MessageHeader:
    """Severity, code and line captured from a diagnostic header line.

    Attributes:
        level: Normalised severity of the diagnostic.
        code: SVDConv message code (for example ``M305``).
        line: SVD source line the diagnostic refers to, ``0`` when unknown.
    """

    level: MessageLevel
    code: str
    line: int = UNKNOWN_LINE


@dataclass(slots=True, frozen=True)
class Message:
    """A single SVDConv diagnostic.

    Attributes:
        level: Normalised severity of the diagnostic.
        code: SVDConv message code (for example ``M305``).
        line: SVD source line the diagnostic refers to, ``0`` when unknown.
        message: Trimmed description line that followed the header.
    """

    level: MessageLevel
    code: str
    line: int
    message: str

    @classmethod
    def from_header(cls, header: MessageHeader, description: str) -> Message:
        return cls(
            level=header.level,
            code=header.code,
            line=header.line,
            message=description.strip(),
        )


type GroupedMessages = dict[int, list[Message]]


def _default_grouped_messages() -> GroupedMessages:
    return {}


@dataclass(slots=True)
class Stats:
    """Running counts of the diagnostics SVDConv reported."""

    notes: int = 0
    warnings: int = 0
    errors: int = 0

    def record(self, level: MessageLevel) -> None:
        match level:
            case MessageLevel.INFO:
                self.notes += 1
            case MessageLevel.WARNING:
                self.warnings += 1
            case MessageLevel.ERROR:
                self.errors += 1

    @property
    def total(self) -> int:
        return self.notes + self.warnings + self.errors

    def as_counts(self) -> dict[MessageLevel, int]:
        return {
            MessageLevel.ERROR: self.errors,
            MessageLevel.WARNING: self.warnings,
            MessageLevel.INFO: self.notes,
        }

    def describe(self) -> str:
        """Return a short human readable summary, e.g. ``1 error, 2 warnings, 0 notes``."""
        parts = (
            _plural(self.errors, "error"),
            _plural(self.warnings, "warning"),
            _plural(self.notes, "note"),
        )
        return ", ".join(parts)


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


@dataclass(slots=True)
class ParseResult:
    """Messages grouped by SVD line number together with the final stats."""

    messages: GroupedMessages = field(default_factory=_default_grouped_messages)
    stats: Stats = field(default_factory=Stats)

    @property
    def message_count(self) -> int:
        return sum(len(group) for group in self.messages.values())


@dataclass(slots=True, frozen=True)
class Annotation:
    """Upload-ready projection of a :class:`Message` onto a file line."""

    path: str
    start_line: int
    end_line: int
    annotation_level: AnnotationLevel
    message: str

    @classmethod
    def from_message(cls, path: str, message: Message) -> Annotation:
        return cls(
            path=path,
            start_line=message.line,
            end_line=message.line,
            annotation_level=AnnotationLevel.for_message_level(message.level),
            message=f"{message.code}: {message.message}",
        )

    def to_payload(self) -> dict[str, object]:
        """Return the JSON object expected by the GitHub Checks API."""
        return {
            "path": self.path,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "annotation_level": self.annotation_level.value,
            "message": self.message,
        }


__all__ = [
    "UNKNOWN_LINE",
    "Annotation",
    "GroupedMessages",
    "Message",
    "MessageHeader",
    "ParseResult",
    "Stats",
]
