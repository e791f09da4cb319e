"""Base exception class for the navigation assistant."""

from typing import Any, ClassVar


class NavigationError(Exception):
    """Base exception for all navigation assistant errors.

    The entry point catches this one type, logs ``to_log_dict()`` and exits
    non-zero, so every subclass carries a stable ``error_code`` and a
    ``context`` dict describing the grid or settings that failed.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        context: Grid or settings values involved in the failure.
    """

    error_code: ClassVar[str] = "NAVIGATION_ERROR"

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            context: Additional key-value pairs for debugging.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_log_dict(self) -> dict[str, Any]:
        """Return the fields logged under ``extra={"error": ...}``."""
        return {
            "error_code": self.error_code,
            "exception_type": type(self).__name__,
            "message": self.message,
            "context": self.context,
        }

    def __str__(self) -> str:
        """Return the message, followed by the context when there is one."""
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} [{details}]"

    def __repr__(self) -> str:
        """Return detailed representation."""
        return f"{type(self).__name__}({self.message!r}, context={self.context!r})"
