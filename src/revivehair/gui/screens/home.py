"""Home dashboard screen for ReviveHair GUI."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import flet as ft

from revivehair.gui import strings
from revivehair.gui.carousel import CarouselView
from revivehair.gui.dialogs import FaqDialog, ImageSourceSheet
from revivehair.gui.screens.base import BaseScreen
from revivehair.gui.theme import HIGHLIGHT_CARD, HOME_BACKGROUND, PANEL_BACKGROUND

if TYPE_CHECKING:
    from revivehair.gui.state import AppState
    from revivehair.media import ImagePicker


class HomeScreen(BaseScreen):
    """Main dashboard: carousel, scan action sheet and FAQ."""

    def __init__(
        self,
        page: ft.Page,
        state: AppState,
        picker: ImagePicker,
        on_upload: Callable[[], None],
        on_recommendations: Callable[[], None],
    ) -> None:
        """Initialize home screen.

        Args:
            page: Flet page instance.
            state: Application state.
            picker: Media picker used by the image-source sheet.
            on_upload: Callback to open the upload screen.
            on_recommendations: Callback to open the recommendations screen.
        """
        super().__init__(page, state)
        self.picker = picker
        self.on_upload = on_upload
        self.on_recommendations = on_recommendations
        self.carousel = CarouselView(page, state.config.carousel)
        self.image_sheet = ImageSourceSheet(page, picker)
        self.faq = FaqDialog(page)

    def did_mount(self) -> None:
        self.carousel.start()

    def dispose(self) -> None:
        self.carousel.dispose()

    def show_camera_options(self) -> None:
        """Open the Camera / Gallery / Cancel sheet."""
        self.image_sheet.open()

    def show_faq(self) -> None:
        self.faq.open()

    def _create_card(
        self,
        title: str,
        subtitle: str,
        icon: str,
        on_click: Callable[[], None],
        *,
        height: float = 150,
        bgcolor: str = ft.Colors.WHITE,
    ) -> ft.Container:
        """Create a tappable dashboard card."""
        return ft.Container(
            content=ft.Row(
                [
                    ft.Icon(icon, size=40),
                    ft.Column(
                        [
                            ft.Text(title, size=18, weight=ft.FontWeight.BOLD),
                            ft.Text(subtitle, size=13, color=ft.Colors.GREY_700),
                        ],
                        spacing=4,
                        expand=True,
                    ),
                    ft.Icon(ft.Icons.CHEVRON_RIGHT),
                ],
                spacing=16,
            ),
            height=height,
            padding=20,
            bgcolor=bgcolor,
            border_radius=16,
            shadow=ft.BoxShadow(
                spread_radius=2,
                blur_radius=5,
                color=ft.Colors.with_opacity(0.2, ft.Colors.GREY),
            ),
            clip_behavior=ft.ClipBehavior.HARD_EDGE,
            on_click=lambda e: on_click(),
        )

    def build(self) -> ft.Control:
        """Build the home UI."""
        cards = ft.Column(
            [
                self._create_card(
                    strings.HOME_SCAN_TITLE,
                    strings.HOME_SCAN_DESC,
                    ft.Icons.CAMERA_ALT_OUTLINED,
                    self.show_camera_options,
                ),
                self._create_card(
                    strings.HOME_FAQ_TITLE,
                    strings.HOME_FAQ_DESC,
                    ft.Icons.HELP_OUTLINE,
                    self.show_faq,
                ),
                self._create_card(
                    strings.HOME_RECOMMENDATIONS_TITLE,
                    strings.HOME_RECOMMENDATIONS_DESC,
                    ft.Icons.HEALTH_AND_SAFETY_OUTLINED,
                    self.on_recommendations,
                    bgcolor=HIGHLIGHT_CARD,
                ),
            ],
            spacing=20,
        )

        panel = ft.Container(
            content=ft.Column(
                [
                    ft.Text(
                        strings.HOME_HEADLINE,
                        size=24,
                        weight=ft.FontWeight.BOLD,
                        color=ft.Colors.BLACK,
                    ),
                    ft.Container(height=5),
                    cards,
                    ft.Container(height=12),
                    ft.OutlinedButton(
                        strings.HOME_UPLOAD,
                        icon=ft.Icons.UPLOAD_FILE,
                        on_click=lambda e: self.on_upload(),
                    ),
                ],
            ),
            padding=20,
            bgcolor=PANEL_BACKGROUND,
            border_radius=30,
        )

        return ft.Container(
            content=ft.Column(
                [self.carousel.build(), panel],
                scroll=ft.ScrollMode.AUTO,
            ),
            bgcolor=HOME_BACKGROUND,
            expand=True,
        )
