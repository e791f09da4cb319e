"""Announcement sinks for spoken guidance."""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Announcer(Protocol):
    """Anything that can speak a line of text."""

    def __call__(self, text: str) -> None:
        """Announce ``text``."""
        ...


class LoggingAnnouncer:
    """Announcer that writes each announcement to the log.

    Stands in for a speech engine on machines without one.
    """

    def __init__(self, level: int = logging.INFO) -> None:
        self._level = level
        self.history: list[str] = []

    def __call__(self, text: str) -> None:
        self.history.append(text)
        logger.log(self._level, "Announcing: %s", text)
