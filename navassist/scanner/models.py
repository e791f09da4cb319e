"""Obstacle scanner data models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from navassist.grid.models import Position


class Direction(StrEnum):
    """Bearing from the user to an obstacle.

    Rows grow downward, so ``FRONT`` diagonals lie below the user and
    ``BACK`` diagonals above.
    """

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    FRONT_LEFT = "FRONT-LEFT"
    FRONT_RIGHT = "FRONT-RIGHT"
    BACK_LEFT = "BACK-LEFT"
    BACK_RIGHT = "BACK-RIGHT"


class Severity(StrEnum):
    """Urgency of a detected obstacle."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ObstacleType(StrEnum):
    """Coarse label shown next to a detection."""

    WALL = "Wall"
    OBJECT = "Object"


class Detection(BaseModel):
    """An obstacle inside the detection radius, classified for display."""

    model_config = ConfigDict(frozen=True)

    obstacle: Position
    distance: float = Field(ge=0.0)
    direction: Direction
    severity: Severity
    obstacle_type: ObstacleType

    @property
    def detection_id(self) -> str:
        """Stable identifier derived from the obstacle cell."""
        return f"{self.obstacle.x}-{self.obstacle.y}"
