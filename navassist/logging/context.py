"""Per-session logging context.

A navigation controller binds its session ID (plus any extra fields) for the
duration of each operation, so log lines from several sessions in one process
can be told apart. Bindings are undone on exit, also across threads.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

session_id: ContextVar[str] = ContextVar("session_id", default="")

_extra_context: ContextVar[dict[str, Any] | None] = ContextVar("extra_context", default=None)


def new_session_id() -> str:
    """Return a short random session identifier."""
    return uuid4().hex[:12]


def get_session_id() -> str:
    """Return the session ID bound in the current context."""
    return session_id.get()


def get_extra_context() -> dict[str, Any]:
    """Return a copy of the extra fields bound in the current context."""
    context = _extra_context.get()
    if context is None:
        return {}
    return context.copy()


@contextmanager
def bind_session(value: str, **fields: Any) -> Iterator[None]:
    """Attach a session ID and extra fields to log records inside the block.

    Nested bindings merge their fields with the outer ones; the outer values
    come back when the block exits.

    Args:
        value: The session ID.
        **fields: Key-value pairs to include in log records.
    """
    merged = get_extra_context()
    merged.update(fields)
    id_token = session_id.set(value)
    extra_token = _extra_context.set(merged or None)
    try:
        yield
    finally:
        _extra_context.reset(extra_token)
        session_id.reset(id_token)
