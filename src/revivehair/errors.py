"""Exceptions and user-facing error messages for ReviveHair."""

from __future__ import annotations


class ReviveHairError(Exception):
    """Base exception for ReviveHair."""


class ConfigError(ReviveHairError):
    """Configuration file could not be read or is invalid."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class PickerError(ReviveHairError):
    """The media picker failed to return an image."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


# Generic messages for exceptions that are not ours
_FRIENDLY_BUILTINS: dict[type[BaseException], str] = {
    FileNotFoundError: "The selected file could not be found.",
    PermissionError: "Permission denied. Check that the app may access your photos.",
    TimeoutError: "The operation timed out. Please try again.",
}

UNKNOWN_ERROR = "An unexpected error occurred. Please try again."


def get_friendly_message(error: BaseException) -> str:
    """Translate an exception into a message suitable for the UI.

    Args:
        error: The exception to describe.

    Returns:
        A short, user-facing message.
    """
    if isinstance(error, PickerError):
        if error.source:
            return f"Could not get an image from the {error.source}: {error}"
        return f"Could not get an image: {error}"
    if isinstance(error, ConfigError):
        if error.path:
            return f"Invalid configuration in {error.path}: {error}"
        return f"Invalid configuration: {error}"

    for exc_type, message in _FRIENDLY_BUILTINS.items():
        if isinstance(error, exc_type):
            return message

    return UNKNOWN_ERROR
