"""Structured logging for the navigation assistant.

Modules log through ``logging.getLogger(__name__)``; this package only
configures the root handler and carries the per-session context.

Usage:
    from navassist.logging import bind_session, setup_logging

    setup_logging(level="DEBUG")
    with bind_session("a1b2c3", grid_size=11):
        logger.info("Moved to %s", position)
"""

from navassist.logging.context import (
    bind_session,
    get_extra_context,
    get_session_id,
    new_session_id,
    session_id,
)
from navassist.logging.formatters import HumanFormatter, JSONFormatter, LogFormat
from navassist.logging.logger import setup_logging

__all__ = [
    "HumanFormatter",
    "JSONFormatter",
    "LogFormat",
    "bind_session",
    "get_extra_context",
    "get_session_id",
    "new_session_id",
    "session_id",
    "setup_logging",
]
