"""Tests for ObstacleScanner classification and ranking."""

import math
import random

import pytest

from navassist.config import Settings
from navassist.grid.models import Position
from navassist.scanner.models import Direction, ObstacleType, Severity
from navassist.scanner.scanner import ObstacleScanner, classify_direction

USER = Position(x=5, y=5)


def _make_settings(**overrides):
    """Create Settings for testing."""
    return Settings(**overrides)


def _make_scanner(**overrides):
    """Create an ObstacleScanner instance."""
    return ObstacleScanner(_make_settings(**overrides))


def _cells(*pairs):
    """Build a list of positions from (x, y) pairs."""
    return [Position(x=x, y=y) for x, y in pairs]


class TestClassifyDirection:
    @pytest.mark.parametrize(
        ("dx", "dy", "expected"),
        [
            (2, 0, Direction.RIGHT),
            (-2, 0, Direction.LEFT),
            (0, 2, Direction.DOWN),
            (0, -2, Direction.UP),
            (1, 1, Direction.FRONT_RIGHT),
            (-1, 1, Direction.FRONT_LEFT),
            (1, -1, Direction.BACK_RIGHT),
            (-1, -1, Direction.BACK_LEFT),
        ],
    )
    def test_axes_and_diagonals(self, dx, dy, expected):
        assert classify_direction(dx, dy) == expected

    def test_diagonal_overrides_dominant_axis(self):
        assert classify_direction(3, 1) == Direction.FRONT_RIGHT
        assert classify_direction(-1, -3) == Direction.BACK_LEFT

    def test_zero_delta_is_up(self):
        assert classify_direction(0, 0) == Direction.UP

    def test_deterministic(self):
        assert {classify_direction(2, -1) for _ in range(5)} == {Direction.BACK_RIGHT}

    def test_hyphenated_values(self):
        assert Direction.FRONT_LEFT.value == "FRONT-LEFT"


class TestScanExamples:
    def test_adjacent_diagonal_is_high_wall(self):
        detections = _make_scanner().scan(USER, _cells((6, 6)))

        assert len(detections) == 1
        detection = detections[0]
        assert detection.distance == pytest.approx(math.sqrt(2))
        assert detection.severity == Severity.HIGH
        assert detection.direction == Direction.FRONT_RIGHT
        assert detection.obstacle_type == ObstacleType.WALL

    def test_two_cells_down_is_medium_object(self):
        detections = _make_scanner().scan(USER, _cells((5, 7)))

        detection = detections[0]
        assert detection.distance == 2.0
        assert detection.severity == Severity.MEDIUM
        assert detection.direction == Direction.DOWN
        assert detection.obstacle_type == ObstacleType.OBJECT

    def test_three_cells_is_low(self):
        detection = _make_scanner().scan(USER, _cells((2, 5)))[0]
        assert detection.distance == 3.0
        assert detection.severity == Severity.LOW
        assert detection.direction == Direction.LEFT

    def test_adjacent_is_high(self):
        detection = _make_scanner().scan(USER, _cells((5, 4)))[0]
        assert detection.severity == Severity.HIGH
        assert detection.direction == Direction.UP

    def test_distance_not_rounded(self):
        detection = _make_scanner().scan(USER, _cells((7, 6)))[0]
        assert detection.distance == pytest.approx(math.sqrt(5))
        assert detection.severity == Severity.MEDIUM


class TestScanFiltering:
    def test_no_obstacles(self):
        assert _make_scanner().scan(USER, []) == []

    def test_drops_beyond_radius(self):
        # sqrt(10) ~ 3.16 is just outside the default radius of 3
        assert _make_scanner().scan(USER, _cells((8, 6), (0, 0))) == []

    def test_keeps_exactly_at_radius(self):
        assert len(_make_scanner().scan(USER, _cells((5, 8)))) == 1

    def test_sorted_nearest_first(self):
        detections = _make_scanner().scan(USER, _cells((5, 8), (6, 6), (5, 7), (5, 6)))
        distances = [detection.distance for detection in detections]
        assert distances == sorted(distances)
        assert detections[0].obstacle == Position(x=5, y=6)

    def test_keeps_at_most_five(self):
        ring = _cells((4, 4), (5, 4), (6, 4), (4, 5), (6, 5), (4, 6), (5, 6), (6, 6))
        detections = _make_scanner().scan(USER, ring)
        assert len(detections) == 5
        assert all(detection.distance <= 3 for detection in detections)
        assert all(detection.distance == 1.0 for detection in detections[:4])

    def test_equal_distances_keep_input_order(self):
        detections = _make_scanner().scan(USER, _cells((6, 5), (4, 5), (5, 4)))
        assert [detection.obstacle for detection in detections] == _cells((6, 5), (4, 5), (5, 4))

    def test_custom_thresholds(self):
        scanner = _make_scanner(detection_radius=1.0, max_detections=1)
        detections = scanner.scan(USER, _cells((5, 6), (6, 5), (5, 7)))
        assert len(detections) == 1
        assert detections[0].obstacle == Position(x=5, y=6)


class TestSeverityClassification:
    def test_high_below_boundary(self):
        assert _make_scanner()._classify_severity(1.49) == Severity.HIGH

    def test_medium_at_high_boundary(self):
        assert _make_scanner()._classify_severity(1.5) == Severity.MEDIUM

    def test_low_at_medium_boundary(self):
        assert _make_scanner()._classify_severity(2.5) == Severity.LOW


class TestObstacleTypeClassification:
    def test_wall_below_boundary(self):
        assert _make_scanner()._classify_type(1.99) == ObstacleType.WALL

    def test_object_at_boundary(self):
        assert _make_scanner()._classify_type(2.0) == ObstacleType.OBJECT


class TestDetection:
    def test_detection_id(self):
        detection = _make_scanner().scan(USER, _cells((6, 6)))[0]
        assert detection.detection_id == "6-6"


class TestScanProperties:
    @pytest.mark.parametrize("seed", range(25))
    def test_random_layouts(self, seed):
        rng = random.Random(seed)
        grid_size = rng.randint(2, 15)
        cells = [Position(x=x, y=y) for y in range(grid_size) for x in range(grid_size)]
        user = rng.choice(cells)
        free = [cell for cell in cells if cell != user]
        obstacles = rng.sample(free, rng.randint(0, len(free)))

        detections = _make_scanner().scan(user, obstacles)
        distances = [detection.distance for detection in detections]

        assert len(detections) <= 5
        assert all(distance <= 3.0 for distance in distances)
        assert distances == sorted(distances)
        assert {detection.obstacle for detection in detections} <= set(obstacles)
