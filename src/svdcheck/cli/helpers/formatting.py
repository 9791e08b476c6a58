# Copyright (c) 2024 PantherianCodeX

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import cast

from svdcheck._internal.utils import normalise_enums_for_json
from svdcheck.core.model_types import DataFormat
from svdcheck.core.types import GroupedMessages, Stats


@dataclass(slots=True)
class Table:
    headers: list[str]
    rows: list[Mapping[str, object]]

    def render(self) -> list[str]:
        if not self.headers or not self.rows:
            return ["<empty>"]
        widths: dict[str, int] = {}
        for header in self.headers:
            max_len = max(len(header), *(len(stringify(row.get(header))) for row in self.rows))
            widths[header] = max_len
        header_line = " | ".join(header.ljust(widths[header]) for header in self.headers)
        separator = "-+-".join("-" * widths[header] for header in self.headers)
        lines = [header_line, separator]
        lines.extend(
            " | ".join(stringify(row.get(header)).ljust(widths[header]) for header in self.headers)
            for row in self.rows
        )
        return [line.rstrip() for line in lines]


def stringify(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str | int | float):
        return str(value)
    if isinstance(value, Mapping):
        mapping = cast("Mapping[str, object]", value)
        return "{" + ", ".join(f"{key}: {stringify(val)}" for key, val in mapping.items()) + "}"
    if isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray):
        sequence = cast("Sequence[object]", value)
        return "[" + ", ".join(stringify(item) for item in sequence) + "]"
    return str(value)


def message_rows(messages: GroupedMessages) -> list[dict[str, object]]:
    """Flatten grouped messages into rows ordered by line number."""
    return [
        {
            "line": message.line,
            "level": message.level,
            "code": message.code,
            "message": message.message,
        }
        for line in sorted(messages)
        for message in messages[line]
    ]


def render_messages(messages: GroupedMessages, stats: Stats, fmt: DataFormat) -> list[str]:
    rows = message_rows(messages)
    if fmt is DataFormat.JSON:
        payload = {
            "messages": rows,
            "stats": {"notes": stats.notes, "warnings": stats.warnings, "errors": stats.errors},
        }
        return [json.dumps(normalise_enums_for_json(payload), indent=2, ensure_ascii=False)]
    table = Table(headers=["line", "level", "code", "message"], rows=list(rows))
    return [*table.render(), "", stats.describe()]


__all__ = ["Table", "message_rows", "render_messages", "stringify"]
