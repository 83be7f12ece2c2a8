"""External menu programs (bemenu, dmenu, rofi, fzf).

A menu program is treated as a function from lines to one line: the
choices are written to its stdin and the answer is read from its stdout.
Empty output means the user cancelled.
"""

from __future__ import annotations
import logging
import subprocess
from typing import Sequence

from .errors import CollaboratorSpawnError, ConfigError

logger = logging.getLogger(__name__)

SUPPORTED_MENUS = ("bemenu", "dmenu", "rofi", "fzf")
CURRENT_MARKER = " <-- current"


class MenuProgram:
    def __init__(self, program: str, rows: int = 20):
        if program not in SUPPORTED_MENUS:
            raise ConfigError(f"Unsupported menu program: {program}")
        self.program = program
        self.rows = rows

    def command(self, prompt: str) -> list[str]:
        """Build the argument vector for one prompt."""
        rows = str(self.rows)
        if self.program == "fzf":
            return ["fzf", "-i", "--print-query", "--prompt", f"{prompt}> "]
        if self.program == "rofi":
            return ["rofi", "-dmenu", "-i", "-l", rows, "-p", prompt]
        return [self.program, "-i", "-l", rows, "-p", prompt]

    def choose(
        self, lines: Sequence[str], prompt: str, default: str | None = None
    ) -> str | None:
        """Show `lines` and return the chosen or typed line, or None.

        If `default` is one of the lines it is shown with a marker, and the
        marker is removed again from the answer.
        """
        items = list(lines)
        marked = None
        if default is not None and default in items:
            marked = default + CURRENT_MARKER
            items = [marked if line == default else line for line in items]

        output = self._run(self.command(prompt), "\n".join(items))
        answer = self._answer(output)
        if marked is not None and answer == marked:
            answer = default
        return answer or None

    def _run(self, cmd: list[str], stdin_text: str) -> str:
        logger.debug("running %s", cmd)
        try:
            proc = subprocess.run(
                cmd,
                input=stdin_text,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
            )
        except OSError as ex:
            raise CollaboratorSpawnError(cmd[0], str(ex)) from ex
        except UnicodeDecodeError as ex:
            raise CollaboratorSpawnError(cmd[0], "invalid UTF-8 output") from ex
        # dmenu-style tools exit non-zero on escape; the empty stdout says it all
        logger.debug("%s exited with %s", cmd[0], proc.returncode)
        return proc.stdout or ""

    def _answer(self, output: str) -> str:
        if self.program == "fzf":
            # --print-query: the query line first, then the selection (if any)
            lines = [line.strip() for line in output.split("\n") if line.strip()]
            return lines[-1] if lines else ""
        return output.strip()
