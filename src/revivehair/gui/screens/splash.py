"""Splash screen for ReviveHair GUI."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import flet as ft

from revivehair.content import LOGO_IMAGE
from revivehair.gui import strings
from revivehair.gui.screens.base import BaseScreen
from revivehair.gui.theme import BRAND_BLUE, BRAND_BLUE_LIGHT
from revivehair.gui.timers import OneShotTimer

if TYPE_CHECKING:
    from revivehair.gui.state import AppState


class SplashScreen(BaseScreen):
    """Branded splash shown at launch; moves on after a fixed delay."""

    def __init__(
        self,
        page: ft.Page,
        state: AppState,
        on_finished: Callable[[], None],
        delay_seconds: float | None = None,
    ) -> None:
        """Initialize splash screen.

        Args:
            page: Flet page instance.
            state: Application state.
            on_finished: Called exactly once when the delay has elapsed.
            delay_seconds: Override for the configured splash delay.
        """
        super().__init__(page, state)
        self.on_finished = on_finished
        self.delay_seconds = (
            delay_seconds if delay_seconds is not None else state.config.splash.delay_seconds
        )
        self._timer = OneShotTimer(self.delay_seconds, self._on_timer)
        self._finished = False
        self._disposed = False

    @property
    def finished(self) -> bool:
        return self._finished

    def did_mount(self) -> None:
        """Start the delay timer."""
        if not self._disposed:
            self._timer.start()

    def dispose(self) -> None:
        """Cancel the pending navigation."""
        self._disposed = True
        self._timer.cancel()

    def _on_timer(self) -> None:
        self.page.run_task(self.finish)

    async def finish(self) -> None:
        """Navigate away, at most once and never after dispose()."""
        if self._finished or self._disposed:
            return
        self._finished = True
        self.on_finished()

    def build(self) -> ft.Control:
        """Build the splash UI."""
        logo = ft.Container(
            content=ft.Image(src=LOGO_IMAGE, width=160, height=160),
            width=160,
            height=160,
            bgcolor=ft.Colors.WHITE,
            border_radius=8,
        )

        return ft.Container(
            content=ft.Column(
                [
                    logo,
                    ft.Container(height=30),
                    ft.Text(
                        strings.SPLASH_TITLE,
                        size=30,
                        weight=ft.FontWeight.BOLD,
                        color=ft.Colors.WHITE,
                        text_align=ft.TextAlign.CENTER,
                    ),
                    ft.Container(height=20),
                    ft.Text(
                        strings.SPLASH_NOTE,
                        size=15,
                        weight=ft.FontWeight.BOLD,
                        color=ft.Colors.WHITE_70,
                        text_align=ft.TextAlign.CENTER,
                    ),
                    ft.Container(height=30),
                    ft.ProgressRing(color=ft.Colors.WHITE),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                alignment=ft.MainAxisAlignment.CENTER,
            ),
            gradient=ft.LinearGradient(
                begin=ft.Alignment(-1, -1),
                end=ft.Alignment(1, 1),
                colors=[BRAND_BLUE, BRAND_BLUE_LIGHT],
            ),
            alignment=ft.Alignment(0, 0),
            expand=True,
        )
