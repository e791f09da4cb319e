"""Navigation assistant exception hierarchy.

Architecture:
    NavigationError (base)
    ├── PlacementInfeasibleError
    ├── InvalidPositionError
    └── ConfigurationError

A move onto an obstacle is not an exception: it is reported through
``MoveOutcome.BLOCKED``. Moves past the grid edge are clamped.

Usage:
    from navassist.exceptions import PlacementInfeasibleError

    if obstacle_count > free_cells:
        raise PlacementInfeasibleError(
            "Not enough free cells",
            requested=obstacle_count,
            available=free_cells,
        )
"""

from navassist.exceptions.base import NavigationError
from navassist.exceptions.errors import (
    ConfigurationError,
    InvalidPositionError,
    PlacementInfeasibleError,
)

__all__ = [
    "ConfigurationError",
    "InvalidPositionError",
    "NavigationError",
    "PlacementInfeasibleError",
]
