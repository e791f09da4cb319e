"""Root logger setup.

Only the handler installed here is ever replaced, so handlers added by other
tools (test runners, embedding applications) survive reconfiguration.
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

from navassist.logging.formatters import HumanFormatter, JSONFormatter, LogFormat


@dataclass
class LoggingState:
    """Internal state for logging configuration."""

    handler: logging.Handler | None = field(default=None)


_state = LoggingState()


def _build_formatter(
    log_format: LogFormat,
    *,
    service_name: str,
    use_colors: bool,
) -> logging.Formatter:
    if log_format == LogFormat.JSON:
        return JSONFormatter(service_name=service_name)
    return HumanFormatter(use_colors=use_colors)


def setup_logging(
    level: str = "INFO",
    log_format: LogFormat = LogFormat.HUMAN,
    *,
    use_colors: bool = True,
    service_name: str = "navigation-assistant",
    stream: TextIO | None = None,
    force: bool = False,
) -> logging.Handler:
    """Install the navigation assistant's handler on the root logger.

    Logs go to stderr by default so they do not interleave with the grid
    drawn on stdout.

    Args:
        level: Minimum level name for the root logger.
        log_format: Human-readable lines or one JSON object per line.
        use_colors: Whether the human format uses ANSI colors.
        service_name: Identifier stamped on JSON records.
        stream: Output stream for logs. Defaults to sys.stderr.
        force: If True, replace a handler installed by an earlier call.

    Returns:
        The active handler.
    """
    if _state.handler is not None and not force:
        return _state.handler

    root_logger = logging.getLogger()
    if _state.handler is not None:
        root_logger.removeHandler(_state.handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        _build_formatter(log_format, service_name=service_name, use_colors=use_colors)
    )
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    _state.handler = handler
    return handler
