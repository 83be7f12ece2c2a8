"""Command-line interface for fmark.

- loads settings from flags and FMARK_DEFAULT_OPTS
- loads the bookmark file (fails on the first malformed line)
- runs the interactive menu session, saving after every change
"""

from __future__ import annotations
import logging
import os
import sys
from typing import Mapping, Sequence

from .actions import Dispatcher
from .browser import Browser
from .config import load_settings
from .errors import FmarkError, ParseError, StorageError
from .menu import MenuProgram
from .selector import Selector
from .store import Store

LOG_LEVEL_VARIABLE = "FMARK_LOG_LEVEL"


def _configure_logging(environ: Mapping[str, str]) -> None:
    name = environ.get(LOG_LEVEL_VARIABLE, "WARNING").upper()
    level = getattr(logging, name, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="fmark: %(levelname)s: %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    _configure_logging(os.environ)

    try:
        settings = load_settings(argv)
        store = Store.load(settings.path)
        dispatcher = Dispatcher(
            store,
            Selector(MenuProgram(settings.menu_program, settings.rows)),
            Browser(settings.browser),
            settings.path,
        )
        dispatcher.run()
    except ParseError as ex:
        sys.stderr.write(f"error: {settings.path}: {ex}\n")
        return 2
    except StorageError as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 3
    except FmarkError as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
