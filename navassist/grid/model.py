"""Grid state with obstacle placement and move validation.

Obstacles are placed by rejection sampling: a uniformly random cell is drawn
until it hits neither the user nor an obstacle already placed, for a budget
that grows with the grid. Any obstacles still missing after that are picked
from the free cells directly. Moves are clamped to the grid edges and
rejected when they land on an obstacle.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from navassist.exceptions import InvalidPositionError, PlacementInfeasibleError
from navassist.grid.models import MoveOutcome, MoveResult, Position

logger = logging.getLogger(__name__)

_SAMPLES_PER_FREE_CELL: int = 4


def default_attempt_limit(grid_size: int) -> int:
    """Return the rejection-sampling budget for a grid of this size."""
    return _SAMPLES_PER_FREE_CELL * (grid_size * grid_size - 1)


def generate_obstacles(
    obstacle_count: int,
    grid_size: int,
    user_position: Position,
    rng: random.Random | None = None,
    *,
    attempt_limit: int | None = None,
) -> frozenset[Position]:
    """Place ``obstacle_count`` distinct obstacles on the grid.

    No obstacle lands on ``user_position``. Cells are drawn at random until
    ``attempt_limit`` samples have been spent; whatever is still missing is
    then picked from the remaining free cells, so a crowded grid still fills
    in bounded time.

    Args:
        obstacle_count: Number of obstacles to place.
        grid_size: Side length of the square grid.
        user_position: Cell that must stay free.
        rng: Random source. A fresh unseeded one is used if omitted.
        attempt_limit: Random samples drawn before falling back to picking
            from the free cells. Defaults to ``default_attempt_limit``.

    Returns:
        The obstacle cells.

    Raises:
        PlacementInfeasibleError: If the obstacles cannot fit on the grid.
    """
    available = grid_size * grid_size - 1
    if obstacle_count > available:
        raise PlacementInfeasibleError(
            f"Cannot place {obstacle_count} obstacles on a {grid_size}x{grid_size} grid",
            requested=obstacle_count,
            available=available,
        )

    if attempt_limit is None:
        attempt_limit = default_attempt_limit(grid_size)
    rng = rng or random.Random()
    placed: set[Position] = set()
    attempts = 0

    while len(placed) < obstacle_count and attempts < attempt_limit:
        attempts += 1
        candidate = Position(x=rng.randrange(grid_size), y=rng.randrange(grid_size))
        if candidate == user_position or candidate in placed:
            continue
        placed.add(candidate)

    remaining = obstacle_count - len(placed)
    if remaining:
        cells = (Position(x=x, y=y) for y in range(grid_size) for x in range(grid_size))
        free = [cell for cell in cells if cell != user_position and cell not in placed]
        placed.update(rng.sample(free, remaining))
        logger.debug(
            "Sampling budget of %d spent, picked %d obstacles from %d free cells",
            attempt_limit,
            remaining,
            len(free),
        )

    logger.debug(
        "Placed %d obstacles in %d attempts (grid=%d)",
        obstacle_count,
        attempts,
        grid_size,
    )
    return frozenset(placed)


def try_move(
    position: Position,
    dx: int,
    dy: int,
    grid_size: int,
    obstacles: Iterable[Position],
) -> MoveResult:
    """Validate a move without changing any state.

    The target is clamped to the grid, so a move off the edge is absorbed
    rather than rejected.

    Args:
        position: Current user position.
        dx: Column delta.
        dy: Row delta.
        grid_size: Side length of the square grid.
        obstacles: Occupied cells.

    Returns:
        ``BLOCKED`` with the unchanged position if the target holds an
        obstacle, ``AT_BOUNDARY`` if clamping leaves the user where they are,
        otherwise ``MOVED`` with the new position.
    """
    target = position.offset(dx, dy, grid_size)

    if target in obstacles:
        return MoveResult(outcome=MoveOutcome.BLOCKED, position=position)

    if target == position:
        return MoveResult(outcome=MoveOutcome.AT_BOUNDARY, position=position)

    return MoveResult(outcome=MoveOutcome.MOVED, position=target)


class GridModel:
    """Holds the grid size, the user's position and the obstacle set.

    Position and obstacles are replaced as whole values, never edited in
    place, so readers always see a consistent pair.
    """

    def __init__(
        self,
        grid_size: int,
        position: Position,
        obstacles: Iterable[Position] = (),
    ) -> None:
        """Initialize the grid.

        Args:
            grid_size: Side length of the square grid.
            position: Starting user position.
            obstacles: Initial obstacle cells.

        Raises:
            InvalidPositionError: If the start position or any obstacle lies
                outside the grid.
        """
        self._grid_size = grid_size
        self._check_inside(position)
        self._position = position
        self._obstacles: frozenset[Position] = frozenset()
        self.replace_obstacles(obstacles)

    @property
    def grid_size(self) -> int:
        """Return the side length of the grid."""
        return self._grid_size

    @property
    def position(self) -> Position:
        """Return the current user position."""
        return self._position

    @property
    def obstacles(self) -> frozenset[Position]:
        """Return the current obstacle cells."""
        return self._obstacles

    def apply_move(self, dx: int, dy: int) -> MoveResult:
        """Validate a move and commit it if the user actually moves.

        Args:
            dx: Column delta.
            dy: Row delta.

        Returns:
            The move result.
        """
        result = try_move(self._position, dx, dy, self._grid_size, self._obstacles)
        if result.outcome == MoveOutcome.MOVED:
            self._position = result.position
        return result

    def replace_obstacles(self, obstacles: Iterable[Position]) -> None:
        """Swap in a new obstacle set.

        Args:
            obstacles: New obstacle cells.

        Raises:
            InvalidPositionError: If any obstacle lies outside the grid or on
                the user's cell.
        """
        new_obstacles = frozenset(obstacles)
        for obstacle in new_obstacles:
            self._check_inside(obstacle)
        if self._position in new_obstacles:
            raise InvalidPositionError(
                f"Obstacle placed on the user's cell {self._position}",
                x=self._position.x,
                y=self._position.y,
                grid_size=self._grid_size,
            )
        self._obstacles = new_obstacles

    def regenerate(
        self,
        obstacle_count: int,
        rng: random.Random | None = None,
        *,
        attempt_limit: int | None = None,
    ) -> frozenset[Position]:
        """Replace the obstacles with a fresh random layout around the user.

        Returns:
            The new obstacle cells.
        """
        obstacles = generate_obstacles(
            obstacle_count,
            self._grid_size,
            self._position,
            rng,
            attempt_limit=attempt_limit,
        )
        self._obstacles = obstacles
        return obstacles

    def has_obstacle(self, position: Position) -> bool:
        """Check if a cell holds an obstacle."""
        return position in self._obstacles

    def _check_inside(self, position: Position) -> None:
        if position.x >= self._grid_size or position.y >= self._grid_size:
            raise InvalidPositionError(
                f"Position {position} is outside the grid",
                x=position.x,
                y=position.y,
                grid_size=self._grid_size,
            )
