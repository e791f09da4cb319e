"""Text rendering of a navigation snapshot.

Draws the grid map and the detection list for a terminal. Rows grow
downward, matching the direction labels.
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import TYPE_CHECKING

from navassist.scanner.models import Severity

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from navassist.grid.models import Position
    from navassist.navigation.models import NavigationSnapshot
    from navassist.scanner.models import Detection

_NEAR_OBSTACLE_DISTANCE: float = 1.5

CAUTION_LINE = "CAUTION: Immediate obstacle ahead - Please stop or change direction"


class CellState(StrEnum):
    """What a grid cell shows on the map."""

    USER = "@"
    OBSTACLE = "#"
    NEAR_OBSTACLE = "!"
    CLEAR = "."


def cell_state(x: int, y: int, position: Position, obstacles: Iterable[Position]) -> CellState:
    """Classify one map cell.

    A free cell within 1.5 of any obstacle is marked as near an obstacle.
    """
    if x == position.x and y == position.y:
        return CellState.USER

    near = False
    for obstacle in obstacles:
        if obstacle.x == x and obstacle.y == y:
            return CellState.OBSTACLE
        if math.hypot(obstacle.x - x, obstacle.y - y) <= _NEAR_OBSTACLE_DISTANCE:
            near = True

    return CellState.NEAR_OBSTACLE if near else CellState.CLEAR


def render_grid(snapshot: NavigationSnapshot) -> str:
    """Draw the grid map, one text row per grid row."""
    rows = []
    for y in range(snapshot.grid_size):
        cells = (
            cell_state(x, y, snapshot.position, snapshot.obstacles).value
            for x in range(snapshot.grid_size)
        )
        rows.append(" ".join(cells))
    return "\n".join(rows)


def render_detections(detections: Sequence[Detection]) -> str:
    """Draw the detection list, nearest first."""
    header = f"Obstacle Detection: {len(detections)} Detected"
    if not detections:
        return f"{header}\n  Path is Clear - No obstacles detected in your vicinity"

    lines = [header]
    for detection in detections:
        lines.append(
            f"  {detection.obstacle_type.value:<6} {detection.severity.value.upper():<6} "
            f"{detection.direction.value:<11} {detection.distance:.1f} meters "
            f"at {detection.obstacle}"
        )
        if detection.severity == Severity.HIGH:
            lines.append(f"    {CAUTION_LINE}")
    return "\n".join(lines)


def render_status(snapshot: NavigationSnapshot, braille: str | None = None) -> str:
    """Draw the full status screen: message, map, position and detections."""
    parts = [f"> {snapshot.message}"]
    if braille is not None:
        parts.append(f"  {braille}")
    parts.extend(
        [
            render_grid(snapshot),
            f"Current Position: {snapshot.position}",
            render_detections(snapshot.detections),
        ]
    )
    return "\n\n".join(parts)
