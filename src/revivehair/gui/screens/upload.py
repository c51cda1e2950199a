"""Image upload screen for ReviveHair GUI."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import flet as ft

from revivehair.gui import strings
from revivehair.gui.dialogs import pick_and_log
from revivehair.gui.screens.base import BaseScreen
from revivehair.media import ImageSource

if TYPE_CHECKING:
    from revivehair.gui.state import AppState
    from revivehair.media import ImagePicker, PickedImage


class UploadScreen(BaseScreen):
    """Gallery selection and camera capture prompt."""

    def __init__(
        self,
        page: ft.Page,
        state: AppState,
        picker: ImagePicker,
        on_back: Callable[[], None] | None = None,
        on_recommendations: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(page, state)
        self.picker = picker
        self.on_back = on_back
        self.on_recommendations = on_recommendations

        # Only the name is kept, for display; the image itself goes nowhere
        self.selected_text = ft.Text("", size=14, color=ft.Colors.GREY_700)

    async def pick(self, source: ImageSource) -> PickedImage | None:
        """Run the picker for ``source`` and show the picked file name."""
        image = await pick_and_log(self.page, self.picker, source)
        if image is not None:
            self.selected_text.value = strings.UPLOAD_SELECTED.format(name=image.name)
            self.update()
        return image

    def build(self) -> ft.Control:
        """Build the upload UI."""

        async def on_gallery(e: ft.ControlEvent) -> None:
            await self.pick(ImageSource.GALLERY)

        async def on_capture(e: ft.ControlEvent) -> None:
            await self.pick(ImageSource.CAMERA)

        button_padding = ft.Padding.symmetric(horizontal=100, vertical=15)
        controls: list[ft.Control] = [
            self._create_header(strings.UPLOAD_TITLE, self.on_back),
            ft.Divider(),
            ft.Button(
                strings.UPLOAD_SELECT,
                icon=ft.Icons.PHOTO_LIBRARY,
                on_click=on_gallery,
                bgcolor=ft.Colors.BLUE,
                color=ft.Colors.WHITE,
                style=ft.ButtonStyle(padding=button_padding),
            ),
            ft.Container(height=20),
            ft.Text(strings.UPLOAD_OR_CAPTURE, size=16, weight=ft.FontWeight.BOLD),
            ft.Button(
                strings.UPLOAD_CAPTURE,
                icon=ft.Icons.CAMERA_ALT,
                on_click=on_capture,
                bgcolor=ft.Colors.GREEN,
                color=ft.Colors.WHITE,
                style=ft.ButtonStyle(padding=button_padding),
            ),
            ft.Container(height=16),
            self.selected_text,
        ]

        if self.on_recommendations is not None:
            controls.append(
                ft.TextButton(
                    strings.UPLOAD_VIEW_RECOMMENDATIONS,
                    on_click=lambda e: self.on_recommendations(),
                )
            )

        return ft.Container(
            content=ft.Column(
                controls,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            padding=16,
            expand=True,
        )
