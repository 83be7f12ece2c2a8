"""Run-time settings from command-line flags and FMARK_DEFAULT_OPTS.

Options in FMARK_DEFAULT_OPTS are parsed first; flags given on the command
line are parsed on top of them and win.
"""

from __future__ import annotations
import argparse
import logging
import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

from .core.programs import require_programs
from .errors import ConfigError
from .menu import SUPPORTED_MENUS
from .records import Record
from .store import Store

logger = logging.getLogger(__name__)

ENV_VARIABLE = "FMARK_DEFAULT_OPTS"
DEFAULT_MENU_PROGRAM = "bemenu"
DEFAULT_BROWSER = "firefox"
DEFAULT_BOOKMARK_FILE = ".bookmarks"
DEFAULT_MENU_ROWS = 20
MIN_MENU_ROWS = 1
MAX_MENU_ROWS = 255

TEMPLATE_RECORD = Record(
    title="Project's Github",
    category="Development",
    url="https://github.com/vannrr/fmark",
)


@dataclass(frozen=True)
class Settings:
    menu_program: str
    browser: str
    path: Path
    rows: int


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fmark",
        description="Search and edit a plain-text bookmark file through a menu program.",
        epilog=(
            f"environment:\n  {ENV_VARIABLE}  default options, e.g. "
            f"'--menu {DEFAULT_MENU_PROGRAM} --rows {DEFAULT_MENU_ROWS}'"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "-m", "--menu", dest="menu_program", default=DEFAULT_MENU_PROGRAM,
        help=f"Menu program: {', '.join(SUPPORTED_MENUS)} (default: {DEFAULT_MENU_PROGRAM})",
    )
    p.add_argument(
        "-b", "--browser", default=DEFAULT_BROWSER,
        help=f"Browser used to open bookmarks (default: {DEFAULT_BROWSER})",
    )
    p.add_argument(
        "-p", "--path", default=None,
        help=f"Path to the bookmark file (default: $HOME/{DEFAULT_BOOKMARK_FILE})",
    )
    p.add_argument(
        "-r", "--rows", default=str(DEFAULT_MENU_ROWS),
        help=f"Number of rows shown in the menu (default: {DEFAULT_MENU_ROWS})",
    )
    return p


def parse_options(
    argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None
) -> argparse.Namespace:
    environ = os.environ if environ is None else environ
    parser = build_parser()
    try:
        defaults = shlex.split(environ.get(ENV_VARIABLE, ""))
    except ValueError as ex:
        raise ConfigError(f"{ENV_VARIABLE}: {ex}") from ex
    namespace = parser.parse_args(defaults)
    # argparse only fills in defaults for attributes the namespace lacks
    return parser.parse_args(argv, namespace=namespace)


def parse_rows(value) -> int:
    """Clamp the row count to 1..255; fall back to the default if unparsable."""
    try:
        rows = int(value)
    except (TypeError, ValueError):
        logger.warning("invalid row count %r, using %d", value, DEFAULT_MENU_ROWS)
        return DEFAULT_MENU_ROWS
    return max(MIN_MENU_ROWS, min(rows, MAX_MENU_ROWS))


def bookmark_path(value: Optional[str], environ: Mapping[str, str]) -> Path:
    """Resolve the bookmark file, creating the default one if needed."""
    if value:
        path = Path(value).expanduser()
        if not path.exists():
            raise ConfigError(f"File not found: {path}")
        return path

    home = environ.get("HOME")
    if not home:
        raise ConfigError("Failed to get HOME environment variable.")
    path = Path(home) / DEFAULT_BOOKMARK_FILE
    if not path.exists():
        logger.info("creating bookmark file %s", path)
        Store([TEMPLATE_RECORD]).save(path)
    return path


def load_settings(
    argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None
) -> Settings:
    """Parse options and check them against the system.

    Raises:
        ConfigError, StorageError
    """
    environ = os.environ if environ is None else environ
    args = parse_options(argv, environ)

    if args.menu_program not in SUPPORTED_MENUS:
        raise ConfigError(f"Unsupported menu program: {args.menu_program}")
    require_programs(args.menu_program, args.browser)

    return Settings(
        menu_program=args.menu_program,
        browser=args.browser,
        path=bookmark_path(args.path, environ),
        rows=parse_rows(args.rows),
    )
