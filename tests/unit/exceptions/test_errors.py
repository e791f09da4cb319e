"""Tests for concrete navigation errors."""

import pytest

from navassist.exceptions import (
    ConfigurationError,
    InvalidPositionError,
    NavigationError,
    PlacementInfeasibleError,
)


class TestPlacementInfeasibleError:
    def test_error_code(self):
        assert PlacementInfeasibleError.error_code == "PLACEMENT_INFEASIBLE"

    def test_capacity_in_context(self):
        error = PlacementInfeasibleError("too many", requested=200, available=120)
        assert error.context == {"requested": 200, "available": 120}

    def test_merges_extra_context(self):
        error = PlacementInfeasibleError("gave up", requested=5, context={"placed": 3})
        assert error.context == {"placed": 3, "requested": 5}

    def test_is_navigation_error(self):
        with pytest.raises(NavigationError):
            raise PlacementInfeasibleError("too many")


class TestInvalidPositionError:
    def test_error_code(self):
        assert InvalidPositionError.error_code == "INVALID_POSITION"

    def test_coordinates_in_context(self):
        error = InvalidPositionError("outside", x=12, y=3, grid_size=11)
        assert error.context == {"x": 12, "y": 3, "grid_size": 11}

    def test_omits_missing_fields(self):
        assert InvalidPositionError("outside").context == {}


class TestConfigurationError:
    def test_error_code(self):
        assert ConfigurationError.error_code == "CONFIGURATION_ERROR"

    def test_is_navigation_error(self):
        assert issubclass(ConfigurationError, NavigationError)
