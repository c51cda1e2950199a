"""Base screen class for ReviveHair GUI."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

import flet as ft

if TYPE_CHECKING:
    from revivehair.gui.state import AppState


class BaseScreen(ABC):
    """Base class for all screens."""

    def __init__(self, page: ft.Page, state: AppState) -> None:
        """Initialize the screen.

        Args:
            page: Flet page instance.
            state: Application state.
        """
        self.page = page
        self.state = state

    @abstractmethod
    def build(self) -> ft.Control:
        """Build the screen UI.

        Returns:
            The root control for this screen.
        """

    def did_mount(self) -> None:
        """Called once the built control is on the page."""

    def dispose(self) -> None:
        """Called when the screen is replaced; cancel timers here."""

    def update(self) -> None:
        """Update the page."""
        self.page.update()

    def _create_header(self, title: str, on_back: Callable[[], None] | None) -> ft.Row:
        """Title row with an optional back button."""
        controls: list[ft.Control] = []
        if on_back is not None:
            controls.append(
                ft.IconButton(
                    icon=ft.Icons.ARROW_BACK,
                    on_click=lambda _: on_back(),
                    tooltip="Back",
                )
            )
        controls.append(ft.Text(title, size=20, weight=ft.FontWeight.BOLD))
        return ft.Row(controls, alignment=ft.MainAxisAlignment.START)
