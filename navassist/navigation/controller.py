"""Navigation session controller.

Owns the grid and the scanner, applies moves and resets, and turns the
latest scan into a status message. Spoken output goes through an injected
announcer so the controller itself never touches audio.

State machine:

- IDLE: Nothing scanned yet.
- CLEAR: The last scan found no obstacles in range.
- ALERT: The last scan found at least one obstacle in range.

A blocked move or a move absorbed at the grid edge leaves the state alone.

Announcements made during an operation are queued and handed to the
announcer once the controller lock is released, so an announcer may call
back into the controller.
"""

from __future__ import annotations

import logging
import random
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

from navassist.grid.model import GridModel
from navassist.grid.models import MoveOutcome, MoveResult, Position
from navassist.logging import bind_session, new_session_id
from navassist.navigation.models import (
    BLOCKED_MESSAGE,
    CLEAR_MESSAGE,
    RESET_MESSAGE,
    WARNING_PREFIX,
    WELCOME_MESSAGE,
    NavigationSnapshot,
    NavigationState,
)
from navassist.scanner.models import Detection, Severity
from navassist.scanner.scanner import ObstacleScanner

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from navassist.config import Settings
    from navassist.navigation.announcer import Announcer

logger = logging.getLogger(__name__)


def describe_move(dx: int, dy: int) -> str:
    """Name a move by its dominant sign: horizontal first, then vertical."""
    if dx > 0:
        return "right"
    if dx < 0:
        return "left"
    if dy > 0:
        return "down"
    return "up"


def alert_message(detection: Detection) -> str:
    """Build the status line for the nearest detection."""
    return (
        f"Obstacle detected {detection.direction.value.lower()}, "
        f"{detection.distance:.1f} meters away"
    )


class NavigationController:
    """A single user's navigation session.

    Every state-changing call runs to completion under one lock, so readers
    never observe a position from one layout with detections from another.
    Log records emitted during a call carry the session ID.
    """

    def __init__(
        self,
        settings: Settings,
        announcer: Announcer | None = None,
        *,
        obstacles: Iterable[Position] | None = None,
        rng: random.Random | None = None,
        session_id: str | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            settings: Navigation settings.
            announcer: Sink for spoken guidance. Nothing is spoken if omitted.
            obstacles: Fixed starting layout. A random one is generated if omitted.
            rng: Random source for obstacle layouts. Seeded from
                ``settings.random_seed`` if omitted.
            session_id: Identifier stamped on log records. Generated if omitted.
        """
        self._settings = settings
        self._announcer = announcer
        self._rng = rng or random.Random(settings.random_seed)
        self._scanner = ObstacleScanner(settings)
        self._lock = threading.Lock()
        self._session_id = session_id or new_session_id()
        self._pending: list[str] = []

        self._grid = GridModel(
            grid_size=settings.grid_size,
            position=Position(x=settings.start_x, y=settings.start_y),
        )
        if obstacles is None:
            self._grid.regenerate(
                settings.obstacle_count,
                self._rng,
                attempt_limit=settings.placement_attempt_limit,
            )
        else:
            self._grid.replace_obstacles(obstacles)

        self._state = NavigationState.IDLE
        self._message = WELCOME_MESSAGE
        self._detections: tuple[Detection, ...] = ()

    @property
    def session_id(self) -> str:
        """Return the identifier stamped on this session's log records."""
        return self._session_id

    @property
    def state(self) -> NavigationState:
        """Return the current controller state."""
        return self._state

    @property
    def grid_size(self) -> int:
        """Return the side length of the grid."""
        return self._grid.grid_size

    @property
    def obstacles(self) -> frozenset[Position]:
        """Return the current obstacle cells."""
        return self._grid.obstacles

    def current_message(self) -> str:
        """Return the latest status message, without any warning prefix."""
        return self._message

    def current_detections(self) -> list[Detection]:
        """Return the latest detections, nearest first."""
        return list(self._detections)

    def current_position(self) -> Position:
        """Return the user's position."""
        return self._grid.position

    def snapshot(self) -> NavigationSnapshot:
        """Return a consistent view of the whole session for rendering."""
        with self._lock:
            return NavigationSnapshot(
                grid_size=self._grid.grid_size,
                position=self._grid.position,
                obstacles=self._grid.obstacles,
                detections=self._detections,
                message=self._message,
                state=self._state,
            )

    def move(self, dx: int, dy: int, *, voice_enabled: bool = False) -> MoveResult:
        """Move the user by ``(dx, dy)``.

        A move onto an obstacle is refused and leaves everything but the
        message untouched. A move past the grid edge is clamped. If clamping
        leaves the user in place, the message is still "Moved {direction}"
        and the previous detections are kept without a rescan. A real move
        rescans and the status message becomes the scan result.

        Args:
            dx: Column delta.
            dy: Row delta.
            voice_enabled: Whether to pass messages to the announcer.

        Returns:
            The move result.
        """
        with self._operation():
            result = self._grid.apply_move(dx, dy)

            if result.outcome == MoveOutcome.BLOCKED:
                logger.info(
                    "Move blocked by obstacle",
                    extra={"dx": dx, "dy": dy, "position": str(result.position)},
                )
                self._set_message(BLOCKED_MESSAGE, voice_enabled=voice_enabled)
                return result

            self._set_message(f"Moved {describe_move(dx, dy)}", voice_enabled=voice_enabled)

            if result.outcome == MoveOutcome.AT_BOUNDARY:
                logger.debug(
                    "Move absorbed at grid edge",
                    extra={"dx": dx, "dy": dy, "position": str(result.position)},
                )
                return result

            logger.debug("Moved to %s", result.position)
            self._rescan(voice_enabled=voice_enabled)
            return result

    def reset(self, *, voice_enabled: bool = False) -> frozenset[Position]:
        """Replace the obstacles with a new random layout and rescan.

        The user's cell is kept free. The status message ends up as the
        result of the rescan.

        Args:
            voice_enabled: Whether to pass messages to the announcer.

        Returns:
            The new obstacle cells.

        Raises:
            PlacementInfeasibleError: If the configured obstacles cannot fit.
        """
        with self._operation():
            obstacles = self._grid.regenerate(
                self._settings.obstacle_count,
                self._rng,
                attempt_limit=self._settings.placement_attempt_limit,
            )
            logger.info(
                "Environment reset with %d obstacles around %s",
                len(obstacles),
                self._grid.position,
            )
            self._set_message(RESET_MESSAGE, voice_enabled=voice_enabled)
            self._rescan(voice_enabled=voice_enabled)
            return obstacles

    def refresh(self, *, voice_enabled: bool = False) -> list[Detection]:
        """Rescan without changing the grid.

        Used when a session starts and when voice output is switched on.

        Args:
            voice_enabled: Whether to pass messages to the announcer.

        Returns:
            The fresh detections.
        """
        with self._operation():
            self._rescan(voice_enabled=voice_enabled)
            return list(self._detections)

    def speak_current_message(self) -> None:
        """Announce the current status message on request."""
        with self._operation():
            self._queue_announcement(self._message)

    @contextmanager
    def _operation(self) -> Iterator[None]:
        """Run a block under the lock, then deliver what it queued."""
        with bind_session(self._session_id, grid_size=self._grid.grid_size):
            self._lock.acquire()
            try:
                yield
            finally:
                announcements, self._pending = self._pending, []
                self._lock.release()
            self._deliver(announcements)

    def _rescan(self, *, voice_enabled: bool) -> None:
        """Recompute detections and derive the state and status message."""
        self._detections = tuple(self._scanner.scan(self._grid.position, self._grid.obstacles))

        if not self._detections:
            self._transition(NavigationState.CLEAR)
            self._set_message(CLEAR_MESSAGE, voice_enabled=voice_enabled)
            return

        self._transition(NavigationState.ALERT)
        nearest = self._detections[0]
        message = alert_message(nearest)
        self._message = message

        if voice_enabled and nearest.severity == Severity.HIGH:
            self._queue_announcement(WARNING_PREFIX + message)

    def _transition(self, new_state: NavigationState) -> None:
        if new_state != self._state:
            logger.info("Navigation state transition: %s -> %s", self._state, new_state)
        self._state = new_state

    def _set_message(self, message: str, *, voice_enabled: bool) -> None:
        self._message = message
        if voice_enabled:
            self._queue_announcement(message)

    def _queue_announcement(self, text: str) -> None:
        if self._announcer is not None:
            self._pending.append(text)

    def _deliver(self, announcements: list[str]) -> None:
        """Hand queued text to the announcer without waiting on or retrying it."""
        for text in announcements:
            try:
                self._announcer(text)
            except Exception:
                logger.exception("Announcer failed for %r", text)
