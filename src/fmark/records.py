"""Line-oriented bookmark records.

A bookmark is a single line with three tagged fields:
    {T}<title> {C}<category> {U}<url>

Example:
    {T}Project's Github {C}Development {U}https://github.com/vannrr/fmark

Title and category are padded on the right so that the {C} and {U} tags
line up across the file. Padding is not part of a field's value: parsing
trims every field.
"""

from __future__ import annotations
from dataclasses import dataclass

from .errors import EmptyField, MalformedLine, ValidationError


TITLE_TAG = "{T}"
CATEGORY_TAG = "{C}"
URL_TAG = "{U}"
TAGS = (TITLE_TAG, CATEGORY_TAG, URL_TAG)

FIELD_NAMES = ("title", "category", "url")


@dataclass(frozen=True)
class Record:
    title: str
    category: str
    url: str

    @classmethod
    def create(cls, title: str, category: str, url: str) -> "Record":
        """Build a Record from user input, trimming every field.

        Raises:
            ValidationError: if a field is blank or holds a tag marker.
        """
        values = {}
        for name, value in zip(FIELD_NAMES, (title, category, url)):
            cleaned = (value or "").strip()
            if not cleaned:
                raise ValidationError(name, "must not be empty")
            if any(tag in cleaned for tag in TAGS):
                raise ValidationError(name, f"must not contain {', '.join(TAGS)}")
            if "\n" in cleaned or "\r" in cleaned:
                raise ValidationError(name, "must be a single line")
            values[name] = cleaned
        return cls(**values)

    def validated(self) -> "Record":
        """Return a trimmed copy of this record, or raise ValidationError."""
        return Record.create(self.title, self.category, self.url)

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.category, self.title)


def parse_line(line: str, line_number: int) -> Record:
    """Parse one non-blank file line into a Record.

    Raises:
        MalformedLine: if a tag is missing, repeated or out of order.
        EmptyField: if a field is blank once its padding is trimmed.
    """
    raw = line.strip()
    if not raw.startswith(TITLE_TAG) or any(raw.count(tag) != 1 for tag in TAGS):
        raise MalformedLine(line_number, line.rstrip("\r\n"))

    cat_at = raw.index(CATEGORY_TAG)
    url_at = raw.index(URL_TAG)
    if url_at < cat_at:
        raise MalformedLine(line_number, line.rstrip("\r\n"))

    title = raw[len(TITLE_TAG):cat_at].strip()
    category = raw[cat_at + len(CATEGORY_TAG):url_at].strip()
    url = raw[url_at + len(URL_TAG):].strip()

    for name, value in zip(FIELD_NAMES, (title, category, url)):
        if not value:
            raise EmptyField(line_number, name)

    return Record(title=title, category=category, url=url)


def render_line(r: Record, title_width: int = 0, category_width: int = 0) -> str:
    """Render a Record to its padded line form (no trailing newline)."""
    return (
        f"{TITLE_TAG}{r.title.ljust(title_width)} "
        f"{CATEGORY_TAG}{r.category.ljust(category_width)} "
        f"{URL_TAG}{r.url}"
    )
