"""Base exception class for launchgames.

All custom exceptions inherit from LaunchGamesError so callers can catch
every application error in one place. The base class carries:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recovery_hint`: Optional suggestion for how to fix the issue
"""

from typing import Optional


class LaunchGamesError(Exception):
    """
    Base exception for all launchgames errors.

    Attributes:
        user_message: Human-friendly message for display
        technical_message: Detailed message for logs
        recovery_hint: Optional hint for how to fix the issue
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        """Return user-friendly message."""
        return self.user_message

    def get_full_message(self) -> str:
        """Get complete error message with recovery hint."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg
