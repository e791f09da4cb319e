"""Grid domain models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """A cell on the grid.

    Used both for the user's location and for obstacle cells. Positions are
    frozen so that obstacle sets can hold them directly.
    """

    model_config = ConfigDict(frozen=True)

    x: int = Field(ge=0)
    y: int = Field(ge=0)

    def offset(self, dx: int, dy: int, grid_size: int) -> "Position":
        """Return the cell ``(dx, dy)`` away, clamped to the grid edges."""
        return Position(
            x=max(0, min(grid_size - 1, self.x + dx)),
            y=max(0, min(grid_size - 1, self.y + dy)),
        )

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class MoveOutcome(StrEnum):
    """Result of a move request."""

    MOVED = "moved"
    AT_BOUNDARY = "at_boundary"
    BLOCKED = "blocked"


class MoveResult(BaseModel):
    """Outcome of a move together with the position after it."""

    model_config = ConfigDict(frozen=True)

    outcome: MoveOutcome
    position: Position

    @property
    def is_blocked(self) -> bool:
        """Check if an obstacle rejected the move."""
        return self.outcome == MoveOutcome.BLOCKED
