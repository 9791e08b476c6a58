# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Line-oriented parser for SVDConv diagnostic output.

SVDConv prints each diagnostic as two physical lines::

    *** WARNING M305: Field 'foo' (Line 12)
      Field size exceeds register width.

The parser is a two-phase state machine driven by :func:`transition`, a pure
function of the current :class:`ParserState` and the next output line.
:func:`aggregate_messages` runs it over a whole output buffer, grouping the
emitted messages by SVD line number and counting every header it sees.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final

from svdcheck._internal.exceptions import MalformedHeaderError
from svdcheck._internal.logging_utils import structured_extra
from svdcheck.core.model_types import LogComponent, MessageLevel, ParserPhase
from svdcheck.core.types import UNKNOWN_LINE, Message, MessageHeader, ParseResult

logger: logging.Logger = logging.getLogger("svdcheck.parser")

MESSAGE_MARKER: Final[str] = "***"
MESSAGE_HEADER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\*\*\* (?P<level>INFO|ERROR|WARNING) (?P<code>M\d+): (?P<text>.*?)"
    r"(?: \(Line (?P<line>\d+)\))?\s*$"
)


@dataclass(slots=True, frozen=True)
class ParserState:
    phase: ParserPhase = ParserPhase.NOISE
    header: MessageHeader | None = None


INITIAL_STATE: Final[ParserState] = ParserState()


@dataclass(slots=True, frozen=True)
class Transition:
    """Outcome of feeding one line to the parser.

    Attributes:
        state: State to use for the next line.
        header: Header recognised on this line, if any. Callers count these.
        message: Message completed on this line, if any.
    """

    state: ParserState
    header: MessageHeader | None = None
    message: Message | None = None


def is_header_line(line: str) -> bool:
    return line.startswith(MESSAGE_MARKER)


def parse_header(line: str, *, line_number: int | None = None) -> MessageHeader:
    """Parse a diagnostic header line.

    Raises:
        MalformedHeaderError: If the line does not match the header pattern.
    """
    match = MESSAGE_HEADER_PATTERN.match(line)
    if match is None:
        raise MalformedHeaderError(line, line_number=line_number)
    raw_line = match.group("line")
    return MessageHeader(
        level=MessageLevel.from_tool(match.group("level")),
        code=match.group("code"),
        line=int(raw_line) if raw_line is not None else UNKNOWN_LINE,
    )


def transition(state: ParserState, line: str, *, line_number: int | None = None) -> Transition:
    """Advance the parser by one output line.

    A header line always starts a new diagnostic. When a description was still
    pending, the earlier header is abandoned and its message is never emitted.
    A blank line in place of the description abandons the header the same way.
    """
    if is_header_line(line):
        header = parse_header(line, line_number=line_number)
        if state.phase is ParserPhase.EXPECT_DESCRIPTION and state.header is not None:
            logger.debug(
                "Dropping %s %s: no description before next header",
                state.header.level,
                state.header.code,
                extra=structured_extra(component=LogComponent.PARSER),
            )
        return Transition(
            state=ParserState(phase=ParserPhase.EXPECT_DESCRIPTION, header=header),
            header=header,
        )
    if state.phase is ParserPhase.EXPECT_DESCRIPTION and state.header is not None:
        if not line.strip():
            logger.debug(
                "Dropping %s %s: blank description",
                state.header.level,
                state.header.code,
                extra=structured_extra(component=LogComponent.PARSER),
            )
            return Transition(state=INITIAL_STATE)
        return Transition(state=INITIAL_STATE, message=Message.from_header(state.header, line))
    return Transition(state=state)


def aggregate_messages(buffer: str) -> ParseResult:
    """Parse a complete SVDConv output buffer.

    Returns:
        Messages grouped by SVD line number plus the per-level counts of every
        header seen, including headers whose description never arrived.

    Raises:
        MalformedHeaderError: If any marker line is not a valid header. No
            partial result is returned.
    """
    result = ParseResult()
    state = INITIAL_STATE
    for index, line in enumerate(buffer.split("\n"), start=1):
        step = transition(state, line, line_number=index)
        state = step.state
        if step.header is not None:
            result.stats.record(step.header.level)
        if step.message is not None:
            result.messages.setdefault(step.message.line, []).append(step.message)
    if state.phase is ParserPhase.EXPECT_DESCRIPTION and state.header is not None:
        logger.debug(
            "Dropping %s %s: output ended before its description",
            state.header.level,
            state.header.code,
            extra=structured_extra(component=LogComponent.PARSER),
        )
    logger.debug(
        "Parsed %s messages on %s lines (%s)",
        result.message_count,
        len(result.messages),
        result.stats.describe(),
        extra=structured_extra(component=LogComponent.PARSER, counts=result.stats.as_counts()),
    )
    return result


__all__ = [
    "INITIAL_STATE",
    "MESSAGE_HEADER_PATTERN",
    "MESSAGE_MARKER",
    "ParserState",
    "Transition",
    "aggregate_messages",
    "is_header_line",
    "parse_header",
    "transition",
]
