"""Tests for the base navigation exception."""

from navassist.exceptions.base import NavigationError
from navassist.exceptions.errors import PlacementInfeasibleError


class TestNavigationError:
    def test_default_error_code(self):
        error = NavigationError("something failed")
        assert error.error_code == "NAVIGATION_ERROR"

    def test_message_attribute(self):
        error = NavigationError("test message")
        assert error.message == "test message"

    def test_empty_context_by_default(self):
        assert NavigationError("test").context == {}

    def test_custom_context(self):
        error = NavigationError("test", context={"grid_size": 11})
        assert error.context == {"grid_size": 11}

    def test_to_log_dict(self):
        result = NavigationError("test message", context={"key": "value"}).to_log_dict()
        assert result == {
            "error_code": "NAVIGATION_ERROR",
            "exception_type": "NavigationError",
            "message": "test message",
            "context": {"key": "value"},
        }

    def test_to_log_dict_uses_subclass_code(self):
        result = PlacementInfeasibleError("too many", requested=9, available=8).to_log_dict()
        assert result["error_code"] == "PLACEMENT_INFEASIBLE"
        assert result["exception_type"] == "PlacementInfeasibleError"
        assert result["context"] == {"requested": 9, "available": 8}

    def test_str_without_context(self):
        assert str(NavigationError("test message")) == "test message"

    def test_str_with_context(self):
        error = NavigationError("too many", context={"requested": 9, "available": 8})
        assert str(error) == "too many [requested=9, available=8]"

    def test_repr(self):
        result = repr(NavigationError("test"))
        assert result == "NavigationError('test', context={})"
