"""Modal flows opened from the home screen: image-source sheet and FAQ dialogs."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import flet as ft

from revivehair.content import FAQ_TIPS, FAQ_TITLE, FaqTip
from revivehair.errors import PickerError
from revivehair.gui import strings
from revivehair.gui.errors import log_event, show_error
from revivehair.media import ImagePicker, ImageSource, PickedImage


async def pick_and_log(
    page: ft.Page,
    picker: ImagePicker,
    source: ImageSource,
) -> PickedImage | None:
    """Run the picker, log a picked path and report picker failures.

    An empty result is ignored without any user feedback.
    """
    try:
        image = await picker.pick_image(source)
    except PickerError as e:
        show_error(page, e, persistent=False, context="image picker")
        return None

    if image is not None and image.path:
        log_event(
            strings.LOG_PICKED_IMAGE.format(source=source.label, path=image.path),
            context="image picker",
        )
        return image
    return None


class ImageSourceSheet:
    """Bottom sheet offering Camera, Gallery or Cancel."""

    def __init__(
        self,
        page: ft.Page,
        picker: ImagePicker,
        on_picked: Callable[[PickedImage], None] | None = None,
    ) -> None:
        self.page = page
        self.picker = picker
        self.on_picked = on_picked
        self.sheet = self._build()

    @property
    def is_open(self) -> bool:
        return bool(self.sheet.open)

    def _build(self) -> ft.BottomSheet:
        def option(icon: str, label: str, color: str, on_click: Callable) -> ft.ListTile:
            return ft.ListTile(
                leading=ft.Icon(icon, color=color),
                title=ft.Text(label, weight=ft.FontWeight.BOLD),
                on_click=on_click,
            )

        async def on_camera(e: ft.ControlEvent) -> None:
            await self.select(ImageSource.CAMERA)

        async def on_gallery(e: ft.ControlEvent) -> None:
            await self.select(ImageSource.GALLERY)

        self.camera_tile = option(ft.Icons.CAMERA, strings.SHEET_CAMERA, ft.Colors.BLACK, on_camera)
        self.gallery_tile = option(ft.Icons.PHOTO, strings.SHEET_GALLERY, ft.Colors.BLACK, on_gallery)
        self.cancel_tile = option(
            ft.Icons.CANCEL, strings.SHEET_CANCEL, ft.Colors.RED, lambda e: self.cancel()
        )

        return ft.BottomSheet(
            content=ft.Container(
                content=ft.Column(
                    [
                        self.camera_tile,
                        ft.Divider(),
                        self.gallery_tile,
                        ft.Divider(),
                        self.cancel_tile,
                    ],
                    tight=True,
                ),
                padding=ft.Padding.symmetric(vertical=20, horizontal=10),
            ),
        )

    def open(self) -> None:
        """Show the sheet."""
        self.page.show_dialog(self.sheet)

    def close(self) -> None:
        self.sheet.open = False
        self.page.update()

    def cancel(self) -> None:
        """Close without picking anything."""
        self.close()

    async def select(self, source: ImageSource) -> PickedImage | None:
        """Pick from ``source``, log the result and close the sheet."""
        try:
            image = await pick_and_log(self.page, self.picker, source)
        finally:
            self.close()

        if image is not None and self.on_picked is not None:
            self.on_picked(image)
        return image


class TipDetailDialog:
    """Dialog showing the full text of a single FAQ tip."""

    def __init__(self, page: ft.Page, tip: FaqTip) -> None:
        self.page = page
        self.tip = tip
        self.dialog = ft.AlertDialog(
            title=ft.Text(tip.title, weight=ft.FontWeight.BOLD),
            content=ft.Text(tip.detail),
            actions=[
                ft.TextButton(strings.DIALOG_CLOSE, on_click=lambda e: self.close()),
            ],
        )

    def open(self) -> None:
        self.page.show_dialog(self.dialog)

    def close(self) -> None:
        self.dialog.open = False
        self.page.update()


class FaqDialog:
    """FAQ dialog listing hair care tips; each tip opens a detail dialog."""

    def __init__(self, page: ft.Page, tips: Sequence[FaqTip] = FAQ_TIPS) -> None:
        self.page = page
        self.tips = list(tips)
        self.detail: TipDetailDialog | None = None

        self.tip_tiles = [
            ft.ListTile(
                title=ft.Text(tip.title, weight=ft.FontWeight.BOLD),
                on_click=lambda e, t=tip: self.show_tip(t),
            )
            for tip in self.tips
        ]
        self.dialog = ft.AlertDialog(
            title=ft.Text(FAQ_TITLE, size=20, weight=ft.FontWeight.BOLD),
            content=ft.Column(self.tip_tiles, tight=True),
            actions=[
                ft.TextButton(
                    strings.DIALOG_CLOSE,
                    on_click=lambda e: self.close(),
                    style=ft.ButtonStyle(text_style=ft.TextStyle(size=16)),
                ),
            ],
        )

    def open(self) -> None:
        self.page.show_dialog(self.dialog)

    def close(self) -> None:
        self.dialog.open = False
        self.page.update()

    def show_tip(self, tip: FaqTip) -> TipDetailDialog:
        """Close the FAQ and open the detail dialog for ``tip``."""
        self.close()
        self.detail = TipDetailDialog(self.page, tip)
        self.detail.open()
        return self.detail
