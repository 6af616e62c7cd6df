"""Exception types raised by the Hue CLI.

All errors derive from click.ClickException so that click prints
"Error: <message>" to stderr and exits with status 1.
"""

import click


class HueError(click.ClickException):
    """Base class for all errors surfaced to the user."""


class ConfigError(HueError):
    """Config file is missing, unreadable, or has an invalid schema."""


class DiscoveryError(HueError):
    """Bridge discovery failed or found no bridges."""


class BridgeError(HueError):
    """A call to the bridge failed.

    Args:
        operation: Short description of what was attempted (e.g. "get all lights")
        detail: What went wrong
        error_type: Bridge error code from the reply payload, if any
    """

    def __init__(self, operation: str, detail: str, error_type: int | None = None):
        self.operation = operation
        self.detail = detail
        self.error_type = error_type
        super().__init__(f"failed to {operation}: {detail}")


class RegistrationError(BridgeError):
    """Registering a new username with the bridge failed."""

    # Bridge error type returned when the link button has not been pressed
    LINK_BUTTON_NOT_PRESSED = 101

    def format_message(self) -> str:
        message = super().format_message()
        if self.error_type == self.LINK_BUTTON_NOT_PRESSED:
            message += "\nPress the link button on the bridge and run 'register' again within 30 seconds."
        return message
