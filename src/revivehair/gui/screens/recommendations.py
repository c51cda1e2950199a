"""Recommendations screen for ReviveHair GUI."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import flet as ft

from revivehair.content import RECOMMENDATIONS, RECOMMENDATIONS_HEADING, Recommendation
from revivehair.gui import strings
from revivehair.gui.screens.base import BaseScreen

if TYPE_CHECKING:
    from revivehair.gui.state import AppState


class RecommendationsScreen(BaseScreen):
    """Static list of hair care recommendations."""

    def __init__(
        self,
        page: ft.Page,
        state: AppState,
        on_back: Callable[[], None] | None = None,
        recommendations: Sequence[Recommendation] = RECOMMENDATIONS,
    ) -> None:
        super().__init__(page, state)
        self.on_back = on_back
        self.recommendations = list(recommendations)
        self.tiles: list[ft.ListTile] = []

    def build(self) -> ft.Control:
        """Build the recommendations UI."""
        self.tiles = [
            ft.ListTile(
                leading=ft.Icon(getattr(ft.Icons, rec.icon.upper())),
                title=ft.Text(rec.title, size=18),
            )
            for rec in self.recommendations
        ]

        return ft.Container(
            content=ft.Column(
                [
                    self._create_header(strings.RECOMMENDATIONS_TITLE, self.on_back),
                    ft.Divider(),
                    ft.Text(RECOMMENDATIONS_HEADING, size=22, weight=ft.FontWeight.BOLD),
                    ft.Container(height=20),
                    *self.tiles,
                ],
                scroll=ft.ScrollMode.AUTO,
            ),
            padding=16,
            expand=True,
        )
