"""Open bookmark URLs in an external browser."""

from __future__ import annotations
import logging
import subprocess

from .errors import CollaboratorSpawnError

logger = logging.getLogger(__name__)


class Browser:
    def __init__(self, program: str):
        self.program = program

    def open(self, url: str) -> None:
        """Spawn the browser detached from this process; do not wait for it.

        Raises:
            CollaboratorSpawnError: if the browser cannot be started.
        """
        logger.info("opening %s with %s", url, self.program)
        try:
            subprocess.Popen(
                [self.program, url],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as ex:
            raise CollaboratorSpawnError(self.program, str(ex)) from ex
