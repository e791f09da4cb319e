"""Tests for text rendering of navigation snapshots."""

from navassist.grid.models import Position
from navassist.navigation.models import NavigationSnapshot, NavigationState
from navassist.render import (
    CAUTION_LINE,
    CellState,
    cell_state,
    render_detections,
    render_grid,
    render_status,
)
from navassist.scanner.models import Detection, Direction, ObstacleType, Severity


def _make_detection(x=6, y=6, distance=1.414, severity=Severity.HIGH):
    """Create a Detection for testing."""
    return Detection(
        obstacle=Position(x=x, y=y),
        distance=distance,
        direction=Direction.FRONT_RIGHT,
        severity=severity,
        obstacle_type=ObstacleType.WALL,
    )


def _make_snapshot(obstacles=(), detections=(), grid_size=3, position=(0, 0)):
    """Create a NavigationSnapshot for testing."""
    return NavigationSnapshot(
        grid_size=grid_size,
        position=Position(x=position[0], y=position[1]),
        obstacles=frozenset(Position(x=x, y=y) for x, y in obstacles),
        detections=tuple(detections),
        message="Path is clear ahead",
        state=NavigationState.CLEAR,
    )


class TestCellState:
    def test_user_cell(self):
        assert cell_state(1, 1, Position(x=1, y=1), []) == CellState.USER

    def test_obstacle_cell(self):
        obstacles = [Position(x=2, y=1), Position(x=0, y=0)]
        assert cell_state(0, 0, Position(x=5, y=5), obstacles) == CellState.OBSTACLE

    def test_near_obstacle_includes_diagonal(self):
        assert cell_state(1, 1, Position(x=5, y=5), [Position(x=2, y=2)]) == CellState.NEAR_OBSTACLE

    def test_two_cells_away_is_clear(self):
        assert cell_state(0, 0, Position(x=5, y=5), [Position(x=2, y=0)]) == CellState.CLEAR


class TestRenderGrid:
    def test_layout(self):
        snapshot = _make_snapshot(obstacles=[(2, 2)], position=(0, 0))
        assert render_grid(snapshot) == "@ . .\n. ! !\n. ! #"

    def test_row_count(self):
        snapshot = _make_snapshot(grid_size=5)
        assert len(render_grid(snapshot).splitlines()) == 5


class TestRenderDetections:
    def test_empty_list(self):
        output = render_detections([])
        assert "0 Detected" in output
        assert "Path is Clear" in output

    def test_lists_detection_fields(self):
        output = render_detections([_make_detection(severity=Severity.MEDIUM)])
        assert "1 Detected" in output
        assert "Wall" in output
        assert "MEDIUM" in output
        assert "FRONT-RIGHT" in output
        assert "1.4 meters" in output
        assert "(6, 6)" in output
        assert CAUTION_LINE not in output

    def test_caution_for_high_severity(self):
        assert CAUTION_LINE in render_detections([_make_detection()])


class TestRenderStatus:
    def test_includes_all_sections(self):
        snapshot = _make_snapshot(detections=[_make_detection(x=1, y=1)])
        output = render_status(snapshot, braille="⠏")
        assert output.startswith("> Path is clear ahead")
        assert "⠏" in output
        assert "Current Position: (0, 0)" in output
        assert "Obstacle Detection: 1 Detected" in output

    def test_braille_optional(self):
        output = render_status(_make_snapshot())
        assert "⠏" not in output
