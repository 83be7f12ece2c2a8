"""In-memory bookmark collection backed by a plain-text file.

The Store keeps its records sorted by (category, title) at all times.
Every mutation checks its input first and only then touches the list, so
a rejected call leaves the collection as it was.
"""

from __future__ import annotations
import bisect
import logging
import os
from typing import Iterable, Iterator

from . import codec
from .errors import IndexOutOfRange, StorageError
from .records import Record

logger = logging.getLogger(__name__)


class Store:
    def __init__(self, records: Iterable[Record] = ()):
        """Raises ValidationError if any record breaks the field invariant."""
        self._records: list[Record] = codec.sort_records(r.validated() for r in records)

    @classmethod
    def from_text(cls, text: str) -> "Store":
        """Build a Store from file contents.

        Raises:
            ParseError: if the text is not a valid bookmark file.
        """
        return cls(codec.parse(text))

    @classmethod
    def load(cls, path: str | os.PathLike) -> "Store":
        """Read and parse the bookmark file at `path`.

        Raises:
            StorageError: if the file cannot be read.
            ParseError: if its contents are malformed.
        """
        try:
            with open(path, "r", encoding="utf-8") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as ex:
            raise StorageError(path, f"cannot read bookmark file: {ex}") from ex
        store = cls.from_text(text)
        logger.debug("loaded %d bookmarks from %s", len(store), path)
        return store

    def save(self, path: str | os.PathLike) -> None:
        """Overwrite `path` with the serialized collection.

        Raises:
            StorageError: if the file cannot be written. The in-memory
                change is kept but is no longer in sync with the file.
        """
        text = codec.serialize(self._records)
        try:
            with open(path, "w", encoding="utf-8") as fh:
                fh.write(text)
        except OSError as ex:
            raise StorageError(
                path, f"change was applied in memory but NOT saved: {ex}"
            ) from ex
        logger.debug("wrote %d bookmarks to %s", len(self), path)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        self._check_index(index)
        return self._records[index]

    def snapshot(self) -> tuple[Record, ...]:
        return tuple(self._records)

    def categories(self) -> list[str]:
        """Distinct categories, in sort order."""
        seen: list[str] = []
        for r in self._records:
            if not seen or seen[-1] != r.category:
                seen.append(r.category)
        return seen

    def add(self, record: Record) -> int:
        """Insert a record at its sorted position and return that position.

        Equal keys go after the records already present. Duplicates are
        accepted.

        Raises:
            ValidationError
        """
        record = record.validated()
        at = bisect.bisect_right(self._records, record.sort_key, key=lambda r: r.sort_key)
        self._records.insert(at, record)
        return at

    def update(self, index: int, record: Record) -> int:
        """Replace the record at `index`; return its new sorted position.

        Raises:
            ValidationError, IndexOutOfRange
        """
        record = record.validated()
        self._check_index(index)
        del self._records[index]
        return self.add(record)

    def remove(self, index: int) -> Record:
        """Delete and return the record at `index`.

        Raises:
            IndexOutOfRange
        """
        self._check_index(index)
        return self._records.pop(index)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._records):
            raise IndexOutOfRange(index, len(self._records))
