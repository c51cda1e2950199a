"""Device media picker integration."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

import flet as ft

from revivehair.errors import PickerError


class ImageSource(Enum):
    """Where the picker should take the image from."""

    CAMERA = "camera"
    GALLERY = "gallery"

    @property
    def label(self) -> str:
        """Lowercase name used in log lines."""
        return self.value


@dataclass(frozen=True)
class PickedImage:
    """An image returned by the picker."""

    path: str
    name: str
    source: ImageSource


class ImagePicker(ABC):
    """Picks a single image from a source."""

    @abstractmethod
    async def pick_image(self, source: ImageSource) -> PickedImage | None:
        """Ask the user for an image.

        Returns:
            The picked image, or None if the user cancelled.

        Raises:
            PickerError: If the platform picker failed.
        """


class FletImagePicker(ImagePicker):
    """Image picker backed by Flet's FilePicker service.

    Desktop and web builds have no camera capture, so both sources open an
    image-only file dialog; the dialog title tells the user which one was chosen.
    """

    DIALOG_TITLES = {
        ImageSource.CAMERA: "Capture Image",
        ImageSource.GALLERY: "Select Image from Gallery",
    }

    def __init__(self, file_picker: ft.FilePicker | None = None) -> None:
        self._file_picker = file_picker

    @property
    def file_picker(self) -> ft.FilePicker:
        if self._file_picker is None:
            self._file_picker = ft.FilePicker()
        return self._file_picker

    async def pick_image(self, source: ImageSource) -> PickedImage | None:
        try:
            files = await self.file_picker.pick_files(
                dialog_title=self.DIALOG_TITLES[source],
                file_type=ft.FilePickerFileType.IMAGE,
                allow_multiple=False,
            )
        except Exception as e:
            raise PickerError(str(e), source=source.label) from e

        if not files:
            return None

        picked = files[0]
        # Web builds only expose the file name, never a local path
        if not picked.path:
            return None
        return PickedImage(path=picked.path, name=picked.name, source=source)
