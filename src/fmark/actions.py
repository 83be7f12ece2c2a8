"""User-facing verbs: view, go, create, modify, delete.

Each verb is one pass from Idle back to Idle. Cancelling any prompt is a
normal outcome and leaves the store untouched. Mutating verbs persist the
whole collection right after the change.
"""

from __future__ import annotations
import contextlib
import enum
import logging
import os
from typing import Optional

from . import codec
from .errors import CollaboratorSpawnError, ValidationError
from .records import Record
from .selector import NoSelection, RawInput, Resolved, Selector
from .store import Store

logger = logging.getLogger(__name__)

OPTION_GOTO = "goto"
OPTION_MODIFY = "modify"
OPTION_REMOVE = "remove"
OPTION_CANCEL = "cancel"
OPTIONS = (OPTION_GOTO, OPTION_MODIFY, OPTION_REMOVE, OPTION_CANCEL)

ADD_LABEL = " add bookmark "
SEPARATOR = "-"


class State(enum.Enum):
    IDLE = "idle"
    VIEWING = "viewing"
    NAVIGATING = "navigating"
    CREATING = "creating"
    MODIFYING = "modifying"
    DELETING = "deleting"


def add_entry(records) -> str:
    """The "add bookmark" line, centred across the width of the table."""
    title_width, category_width = codec.column_widths(records)
    padding = max(title_width + category_width + 11 - len(ADD_LABEL), 0)
    left = padding // 2
    return SEPARATOR * left + ADD_LABEL + SEPARATOR * (padding - left)


class Dispatcher:
    def __init__(
        self,
        store: Store,
        selector: Selector,
        browser,
        path: str | os.PathLike,
        confirm_delete: bool = True,
    ):
        self.store = store
        self.selector = selector
        self.browser = browser
        self.path = path
        self.confirm_delete = confirm_delete
        self.state = State.IDLE

    @contextlib.contextmanager
    def _in_state(self, state: State):
        self.state = state
        try:
            yield
        finally:
            self.state = State.IDLE

    def _pick(self, prompt: str) -> Optional[int]:
        selection = self.selector.select(self.store.snapshot(), prompt)
        if isinstance(selection, Resolved):
            return selection.index
        return None

    def persist(self) -> None:
        """Write the collection back to the bookmark file.

        Raises:
            StorageError
        """
        self.store.save(self.path)

    def view(self, index: Optional[int] = None) -> Optional[Record]:
        with self._in_state(State.VIEWING):
            if index is None:
                index = self._pick("bookmarks")
            if index is None:
                return None
            return self.store[index]

    def go(self, index: Optional[int] = None) -> Optional[Record]:
        """Open the chosen bookmark in the browser.

        A browser that fails to start is reported, not raised.
        """
        with self._in_state(State.NAVIGATING):
            if index is None:
                index = self._pick("go")
            if index is None:
                return None
            record = self.store[index]
            try:
                self.browser.open(record.url)
            except CollaboratorSpawnError as ex:
                logger.error("%s", ex)
            return record

    def create(self, title: Optional[str] = None) -> Optional[Record]:
        with self._in_state(State.CREATING):
            record = self._prompt_record(title=title)
            if record is None:
                return None
            self.store.add(record)
            self.persist()
            logger.info("added %r", record.title)
            return record

    def modify(self, index: Optional[int] = None) -> Optional[Record]:
        with self._in_state(State.MODIFYING):
            if index is None:
                index = self._pick("modify")
            if index is None:
                return None
            current = self.store[index]
            record = self._prompt_record(current.title, current.category, current.url)
            if record is None:
                return None
            if record == current:
                return current
            self.store.update(index, record)
            self.persist()
            logger.info("modified %r", record.title)
            return record

    def delete(self, index: Optional[int] = None) -> Optional[Record]:
        with self._in_state(State.DELETING):
            if index is None:
                index = self._pick("remove")
            if index is None:
                return None
            record = self.store[index]
            if self.confirm_delete:
                answer = self.selector.ask(f"Remove {record.title}? (yes/no)")
                if (answer or "").strip().lower() != "yes":
                    return None
            removed = self.store.remove(index)
            self.persist()
            logger.info("removed %r", removed.title)
            return removed

    def _prompt_record(
        self,
        title: Optional[str] = None,
        category: Optional[str] = None,
        url: Optional[str] = None,
    ) -> Optional[Record]:
        """Prompt for title, category and URL in turn.

        Returns None if any prompt is cancelled or the answers are invalid.
        """
        title = self.selector.ask("title", default=title)
        if title is None:
            return None
        category = self.selector.ask(
            "category", default=category, choices=self.store.categories()
        )
        if category is None:
            return None
        url = self.selector.ask("url", default=url)
        if url is None:
            return None
        try:
            return Record.create(title, category, url)
        except ValidationError as ex:
            logger.warning("bookmark not saved: %s", ex)
            return None

    def run(self) -> None:
        """Interactive session: list, pick, act, and come back to the list.

        Ends when the list is cancelled or a bookmark is opened.
        """
        while True:
            records = self.store.snapshot()
            entry = add_entry(records)
            selection = self.selector.select(records, "bookmarks", extra=[entry])

            if isinstance(selection, NoSelection):
                return
            if isinstance(selection, RawInput):
                if selection.text == entry.strip():
                    self.create()
                else:
                    self.create(title=selection.text)
                continue

            option = self.selector.ask("options", choices=OPTIONS)
            if option == OPTION_GOTO:
                self.go(selection.index)
                return
            if option == OPTION_MODIFY:
                self.modify(selection.index)
            elif option == OPTION_REMOVE:
                self.delete(selection.index)
