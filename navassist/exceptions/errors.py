"""Concrete navigation errors."""

from typing import Any, ClassVar

from navassist.exceptions.base import NavigationError


class PlacementInfeasibleError(NavigationError):
    """Obstacles cannot be placed on the grid.

    Raised instead of sampling forever when the requested obstacle count does
    not fit in the free cells, or when the sampling budget runs out.
    """

    error_code: ClassVar[str] = "PLACEMENT_INFEASIBLE"

    def __init__(
        self,
        message: str,
        *,
        requested: int | None = None,
        available: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize placement error with optional capacity info.

        Args:
            message: Description of the failure.
            requested: Number of obstacles requested.
            available: Number of free cells on the grid.
            context: Additional context information.
        """
        context_dict = context or {}
        if requested is not None:
            context_dict["requested"] = requested
        if available is not None:
            context_dict["available"] = available
        super().__init__(message, context=context_dict)


class InvalidPositionError(NavigationError):
    """A position lies outside the grid, or an obstacle covers the user."""

    error_code: ClassVar[str] = "INVALID_POSITION"

    def __init__(
        self,
        message: str,
        *,
        x: int | None = None,
        y: int | None = None,
        grid_size: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid position error.

        Args:
            message: Description of the failure.
            x: Offending column.
            y: Offending row.
            grid_size: Side length of the grid.
            context: Additional context information.
        """
        context_dict = context or {}
        if x is not None:
            context_dict["x"] = x
        if y is not None:
            context_dict["y"] = y
        if grid_size is not None:
            context_dict["grid_size"] = grid_size
        super().__init__(message, context=context_dict)


class ConfigurationError(NavigationError):
    """Settings are inconsistent with each other."""

    error_code: ClassVar[str] = "CONFIGURATION_ERROR"
