"""Tests for the exception hierarchy and display helpers."""

from launchgames.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    DeviceError,
    DeviceNotFoundError,
    LaunchGamesError,
    format_error_for_display,
)


class TestExceptions:
    """Test messages carried by application errors."""

    def test_hierarchy(self):
        assert issubclass(DeviceNotFoundError, DeviceError)
        assert issubclass(DeviceError, LaunchGamesError)
        assert issubclass(ConfigFileInvalidError, ConfigurationError)
        assert issubclass(ConfigValidationError, ConfigurationError)

    def test_str_is_user_message(self):
        error = LaunchGamesError("Something broke", "stack details")
        assert str(error) == "Something broke"
        assert error.technical_message == "stack details"

    def test_full_message_includes_hint(self):
        error = LaunchGamesError("Something broke", recovery_hint="Try again")
        assert error.get_full_message() == "Something broke\n\nSuggestion: Try again"

    def test_device_not_found(self):
        error = DeviceNotFoundError(None, ["IAC Driver Bus 1"])

        assert error.user_message == "No MIDI device found for a Launchpad"
        assert "IAC Driver Bus 1" in error.technical_message
        assert "launchgames midi list" in error.recovery_hint

    def test_device_not_found_with_pattern(self):
        error = DeviceNotFoundError("LPX", [])

        assert "'LPX'" in error.user_message
        assert "none" in error.technical_message
        assert "--port" in error.recovery_hint

    def test_trailing_comma(self):
        error = ConfigFileInvalidError("/tmp/c.json", "trailing comma at line 1 column 9")
        assert error.user_message == "Configuration file has a trailing comma"

    def test_validation_hint_for_games(self):
        error = ConfigValidationError("start_game", "snake", "unknown game")
        assert "launchgames games" in error.recovery_hint


class TestFormatErrorForDisplay:
    """Test formatting for the CLI error banner."""

    def test_application_error(self):
        error = DeviceNotFoundError(None, [])
        message, hint = format_error_for_display(error)

        assert message == error.user_message
        assert hint == error.recovery_hint

    def test_other_error(self):
        message, hint = format_error_for_display(ValueError("bad"))

        assert message == "ValueError: bad"
        assert hint is None
