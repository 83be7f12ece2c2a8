"""Glue between records and an interactive menu.

Records are shown in the same padded form the file uses. The line the
menu hands back is matched against those rendered lines to find the
record again; anything else the user typed is returned as raw input.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from . import codec
from .records import Record


@dataclass(frozen=True)
class NoSelection:
    """The user cancelled the menu."""


@dataclass(frozen=True)
class Resolved:
    index: int


@dataclass(frozen=True)
class RawInput:
    text: str


Selection = Union[NoSelection, Resolved, RawInput]


def render(records: Sequence[Record]) -> list[str]:
    return codec.render_lines(records)


def resolve(
    selected: Optional[str],
    records: Sequence[Record],
    rendered: Optional[Sequence[str]] = None,
) -> Selection:
    """Map the menu's answer back to a record position.

    Identical rendered lines resolve to the first one in sort order.
    """
    if selected is None or not selected.strip():
        return NoSelection()
    text = selected.strip()
    lines = render(records) if rendered is None else rendered
    for index, line in enumerate(lines):
        if line == text:
            return Resolved(index)
    return RawInput(text)


class Selector:
    """Present records or free-text prompts through a menu program.

    `menu` is anything with a ``choose(lines, prompt, default=None)``
    method, usually a MenuProgram.
    """

    def __init__(self, menu):
        self.menu = menu

    def select(
        self, records: Sequence[Record], prompt: str = "bookmarks", extra: Sequence[str] = ()
    ) -> Selection:
        lines = render(records)
        answer = self.menu.choose(lines + list(extra), prompt)
        return resolve(answer, records, lines)

    def ask(
        self, prompt: str, default: Optional[str] = None, choices: Sequence[str] = ()
    ) -> Optional[str]:
        """Ask for one value; None when cancelled.

        Without `choices`, the current value (if any) is offered as the only
        line so it can be accepted unchanged.
        """
        if choices:
            return self.menu.choose(list(choices), prompt, default=default)
        lines = [default] if default else []
        return self.menu.choose(lines, prompt)
