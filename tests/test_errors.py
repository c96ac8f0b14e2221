"""Tests for du_simulator error classes.

Tests cover:
- Error hierarchy
- Exceptions can be raised and caught as SimulatorError
"""

import pytest
from du_simulator.errors import (
    ConfigError,
    ExtensionNotFoundError,
    FileEntityError,
    ManifestError,
    SimulatorError,
)


class TestSimulatorError:
    """Tests for base SimulatorError."""

    def test_is_exception(self):
        """SimulatorError should be an Exception."""
        assert issubclass(SimulatorError, Exception)

    def test_has_message(self):
        """SimulatorError should have a message."""
        error = SimulatorError("my message")
        assert str(error) == "my message"


class TestSubclasses:
    """Every specific error is a SimulatorError."""

    @pytest.mark.parametrize(
        "error_cls",
        [FileEntityError, ConfigError, ManifestError, ExtensionNotFoundError],
    )
    def test_can_be_caught_as_simulator_error(self, error_cls):
        with pytest.raises(SimulatorError):
            raise error_cls("boom")

    def test_file_entity_error_not_config_error(self):
        """FileEntityError is not a ConfigError."""
        assert not isinstance(FileEntityError("x"), ConfigError)
