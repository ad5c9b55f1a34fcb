"""Tests for wren.errors — exception hierarchy and error messages."""

import pytest

from wren.errors import (
    ActionCallError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidAttributeError,
    WrenError,
)


class WidgetsController:
    pass


class TestHierarchy:
    def test_configuration_error_is_wren_error(self) -> None:
        assert issubclass(ConfigurationError, WrenError)

    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(InvalidArgumentError, WrenError)
        assert issubclass(InvalidArgumentError, ValueError)

    @pytest.mark.parametrize("cls", [InvalidAttributeError, ActionCallError])
    def test_specific_errors_are_invalid_argument(self, cls: type) -> None:
        assert issubclass(cls, InvalidArgumentError)


class TestInvalidAttributeError:
    def test_message_and_attribute(self) -> None:
        err = InvalidAttributeError("on click")
        assert str(err) == "Invalid HTML attribute name: 'on click'"
        assert err.attribute == "on click"


class TestActionCallError:
    def test_message_names_controller(self) -> None:
        err = ActionCallError(WidgetsController)
        assert str(err) == "You must call a method of WidgetsController"
        assert err.controller is WidgetsController

    def test_detail_appended(self) -> None:
        err = ActionCallError(WidgetsController, "'delete' is not a method")
        assert str(err) == "You must call a method of WidgetsController: 'delete' is not a method"

    def test_caught_as_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise ActionCallError(WidgetsController)
