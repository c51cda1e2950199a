"""Error display and the app log file for ReviveHair GUI."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import flet as ft

from revivehair.errors import get_friendly_message


def get_log_file_path() -> Path:
    """Get the path to the log file (next to the exe, or in cwd)."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).parent / "revivehair.log"
    return Path.cwd() / "revivehair.log"


def _write_log_entry(kind: str, message: str, context: str) -> None:
    try:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        entry = f"[{timestamp}] {kind}"
        if context:
            entry += f" ({context})"
        entry += f": {message}\n"

        with open(get_log_file_path(), "a", encoding="utf-8") as f:
            f.write(entry)
    except OSError:
        # Don't let logging errors crash the app
        pass


def log_error(error: Exception | str, context: str = "") -> None:
    """Log an error to the log file.

    Args:
        error: The error (exception or string).
        context: Optional context about where the error occurred.
    """
    if isinstance(error, str):
        _write_log_entry("Error", error, context)
    else:
        _write_log_entry(type(error).__name__, str(error), context)


def log_event(message: str, context: str = "") -> None:
    """Log an informational event, e.g. a picked image path."""
    _write_log_entry("Info", message, context)


def _show_snack(page: ft.Page, snack: ft.SnackBar) -> None:
    page.overlay.append(snack)
    snack.open = True
    page.update()


def show_error(
    page: ft.Page,
    error: Exception | str,
    *,
    persistent: bool = True,
    context: str = "",
) -> None:
    """Show a user-friendly error message as a snackbar and log it.

    Args:
        page: The Flet page to show the error on.
        error: The error (exception or string).
        persistent: If True, snackbar stays until dismissed.
        context: Optional context for the log entry.
    """
    log_error(error, context)

    message = error if isinstance(error, str) else get_friendly_message(error)
    _show_snack(
        page,
        ft.SnackBar(
            content=ft.Text(message),
            bgcolor=ft.Colors.RED_700,
            duration=None if persistent else 5000,
            action="Dismiss" if persistent else None,
        ),
    )


def show_info(
    page: ft.Page,
    message: str,
    *,
    duration: int = 3000,
) -> None:
    """Show an info message as a snackbar."""
    _show_snack(
        page,
        ft.SnackBar(
            content=ft.Text(message),
            bgcolor=ft.Colors.BLUE_700,
            duration=duration,
        ),
    )
