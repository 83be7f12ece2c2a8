"""Bookmark file codec.

Pipeline shape:
- parse lines -> records (blank lines skipped, fail on first bad line)
- sort records by (category, title)
- render records -> padded lines

serialize() is idempotent: serialize(parse(serialize(rs))) == serialize(rs).
"""

from __future__ import annotations
from typing import Iterable, Sequence

from .records import Record, parse_line, render_line


def sort_records(records: Iterable[Record]) -> list[Record]:
    """Stable sort by (category, title); equal keys keep their order."""
    return sorted(records, key=lambda r: r.sort_key)


def split_lines(text: str) -> list[str]:
    """Split on "\\n" only (dropping a trailing "\\r").

    str.splitlines() also breaks on form feeds, U+2028 and friends, which
    are legal inside a field.
    """
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def parse(text: str) -> list[Record]:
    """Parse the bookmark file contents.

    Raises:
        MalformedLine, EmptyField
    """
    out: list[Record] = []
    for number, line in enumerate(split_lines(text), start=1):
        if not line.strip():
            continue
        out.append(parse_line(line, number))  # may raise
    return sort_records(out)


def column_widths(records: Sequence[Record]) -> tuple[int, int]:
    """Widest title and widest category, 0 for an empty collection."""
    title_width = max((len(r.title) for r in records), default=0)
    category_width = max((len(r.category) for r in records), default=0)
    return title_width, category_width


def render_lines(records: Sequence[Record]) -> list[str]:
    """Render records as column-aligned lines, in the given order."""
    title_width, category_width = column_widths(records)
    return [render_line(r, title_width, category_width) for r in records]


def serialize(records: Sequence[Record]) -> str:
    """Render the whole file: one line per record, newline-terminated."""
    lines = render_lines(records)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
