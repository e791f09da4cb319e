"""Navigation controller data models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from navassist.grid.models import Position
from navassist.scanner.models import Detection

WELCOME_MESSAGE = "Welcome to the Navigation Assistant"
BLOCKED_MESSAGE = "Cannot move - obstacle blocking path"
RESET_MESSAGE = "Environment reset"
CLEAR_MESSAGE = "Path is clear ahead"
WARNING_PREFIX = "Warning! "


class NavigationState(StrEnum):
    """Controller state derived from the latest scan."""

    IDLE = "idle"
    CLEAR = "clear"
    ALERT = "alert"


class NavigationSnapshot(BaseModel):
    """Read-only view of a session for renderers."""

    model_config = ConfigDict(frozen=True)

    grid_size: int = Field(ge=1)
    position: Position
    obstacles: frozenset[Position]
    detections: tuple[Detection, ...]
    message: str
    state: NavigationState

    @property
    def nearest(self) -> Detection | None:
        """Return the closest detection, if any."""
        return self.detections[0] if self.detections else None
