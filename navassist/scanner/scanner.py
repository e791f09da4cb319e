"""Distance, direction and severity classification of nearby obstacles.

The scanner is a pure function of the user's position and the obstacle set:
every call computes the full detection list from scratch. No state is kept
between scans.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

from navassist.scanner.models import Detection, Direction, ObstacleType, Severity

if TYPE_CHECKING:
    from navassist.config import Settings
    from navassist.grid.models import Position

logger = logging.getLogger(__name__)


def classify_direction(dx: int, dy: int) -> Direction:
    """Classify the bearing of a cell offset ``(dx, dy)`` from the user.

    The dominant axis gives the base direction. Whenever both deltas are
    non-zero the diagonal wins, regardless of which axis dominates.

    Args:
        dx: Column delta, positive to the right.
        dy: Row delta, positive downward.

    Returns:
        The direction label.
    """
    if abs(dx) > abs(dy):
        direction = Direction.RIGHT if dx > 0 else Direction.LEFT
    else:
        direction = Direction.DOWN if dy > 0 else Direction.UP

    if dy > 0 and dx > 0:
        direction = Direction.FRONT_RIGHT
    elif dy > 0 and dx < 0:
        direction = Direction.FRONT_LEFT
    elif dy < 0 and dx > 0:
        direction = Direction.BACK_RIGHT
    elif dy < 0 and dx < 0:
        direction = Direction.BACK_LEFT

    return direction


class ObstacleScanner:
    """Ranks obstacles around the user by distance.

    Each obstacle gets a Euclidean distance, a direction, a severity and a
    type label. Obstacles outside the detection radius are dropped, and only
    the nearest few are kept.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the scanner with detection thresholds.

        Args:
            settings: Navigation settings with distance thresholds.
        """
        self._detection_radius = settings.detection_radius
        self._high_severity_distance = settings.high_severity_distance
        self._medium_severity_distance = settings.medium_severity_distance
        self._wall_distance = settings.wall_distance
        self._max_detections = settings.max_detections

    def scan(self, user_position: Position, obstacles: Iterable[Position]) -> list[Detection]:
        """Detect obstacles near the user.

        Args:
            user_position: Current user position.
            obstacles: Obstacle cells to examine.

        Returns:
            At most ``max_detections`` detections within the detection
            radius, nearest first. Equal distances keep input order.
        """
        detections = [self._classify(user_position, obstacle) for obstacle in obstacles]
        nearby = [
            detection for detection in detections if detection.distance <= self._detection_radius
        ]
        nearby.sort(key=lambda detection: detection.distance)
        ranked = nearby[: self._max_detections]

        logger.debug(
            "Scan from %s: %d obstacles, %d in range, %d reported",
            user_position,
            len(detections),
            len(nearby),
            len(ranked),
        )
        return ranked

    def _classify(self, user_position: Position, obstacle: Position) -> Detection:
        """Build the detection record for a single obstacle."""
        dx = obstacle.x - user_position.x
        dy = obstacle.y - user_position.y
        distance = math.sqrt(dx * dx + dy * dy)

        return Detection(
            obstacle=obstacle,
            distance=distance,
            direction=classify_direction(dx, dy),
            severity=self._classify_severity(distance),
            obstacle_type=self._classify_type(distance),
        )

    def _classify_severity(self, distance: float) -> Severity:
        """Classify severity from distance.

        Args:
            distance: Distance to the obstacle in cells.

        Returns:
            HIGH below the high threshold, MEDIUM below the medium
            threshold, LOW otherwise.
        """
        if distance < self._high_severity_distance:
            return Severity.HIGH
        if distance < self._medium_severity_distance:
            return Severity.MEDIUM
        return Severity.LOW

    def _classify_type(self, distance: float) -> ObstacleType:
        if distance < self._wall_distance:
            return ObstacleType.WALL
        return ObstacleType.OBJECT
