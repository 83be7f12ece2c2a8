"""Shared test doubles for the menu and browser collaborators."""

import pytest

from fmark.errors import CollaboratorSpawnError
from fmark.records import Record


class FakeMenu:
    """Answers prompts from a canned list; records what it was shown."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.calls = []

    def choose(self, lines, prompt, default=None):
        self.calls.append((list(lines), prompt, default))
        if not self.answers:
            return None
        return self.answers.pop(0)


class FakeBrowser:
    def __init__(self, fail=False):
        self.fail = fail
        self.opened = []

    def open(self, url):
        if self.fail:
            raise CollaboratorSpawnError("nosuchbrowser", "No such file or directory")
        self.opened.append(url)


@pytest.fixture
def records():
    return [
        Record("Rust Book", "Development", "https://doc.rust-lang.org/book/"),
        Record("Python Docs", "Development", "https://docs.python.org/3/"),
        Record("Arch Wiki", "Reference", "https://wiki.archlinux.org/"),
    ]
