"""Unit tests for meridian.helpers.exceptions module.

Tests custom exception classes.
"""

import pytest

from meridian.helpers.exceptions import ConfigFileError, PayloadDecodeError


class TestPayloadDecodeError:
    """Tests for PayloadDecodeError exception."""

    @pytest.mark.unit
    def test_carries_model_name_and_errors(self) -> None:
        """Should keep the model name and field-level errors."""
        errors = [{"loc": ("name",), "msg": "Field required", "type": "missing"}]
        error = PayloadDecodeError("NewUser", errors)
        assert error.model_name == "NewUser"
        assert error.errors == errors

    @pytest.mark.unit
    def test_message_counts_errors(self) -> None:
        """The message should name the model and the number of errors."""
        error = PayloadDecodeError("Config", [{}, {}])
        assert str(error) == "Invalid Config payload (2 error(s))"

    @pytest.mark.unit
    def test_can_be_raised_and_caught(self) -> None:
        """PayloadDecodeError should be raisable and catchable as Exception."""
        with pytest.raises(Exception, match="Invalid User payload"):
            raise PayloadDecodeError("User", [])


class TestConfigFileError:
    """Tests for ConfigFileError exception."""

    @pytest.mark.unit
    def test_stores_message(self) -> None:
        """ConfigFileError should store the error message."""
        error = ConfigFileError("bad file")
        assert str(error) == "bad file"
        assert isinstance(error, Exception)
