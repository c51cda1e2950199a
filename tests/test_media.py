"""Tests for the media picker."""

import asyncio
from types import SimpleNamespace
from typing import Any

import pytest

from revivehair.errors import PickerError
from revivehair.media import FletImagePicker, ImageSource, PickedImage


class StubFilePicker:
    """Mimics ft.FilePicker.pick_files."""

    def __init__(self, files: Any = None, error: Exception | None = None) -> None:
        self.files = files
        self.error = error
        self.kwargs: dict[str, Any] = {}

    async def pick_files(self, **kwargs: Any) -> Any:
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        return self.files


class TestImageSource:
    """Tests for ImageSource."""

    def test_labels(self) -> None:
        """Test labels used in log lines."""
        assert ImageSource.CAMERA.label == "camera"
        assert ImageSource.GALLERY.label == "gallery"


class TestFletImagePicker:
    """Tests for FletImagePicker."""

    def test_returns_picked_image(self) -> None:
        """Test the first picked file is returned with its source."""
        stub = StubFilePicker(files=[SimpleNamespace(path="/p/a.png", name="a.png")])
        picker = FletImagePicker(stub)

        image = asyncio.run(picker.pick_image(ImageSource.GALLERY))

        assert image == PickedImage(path="/p/a.png", name="a.png", source=ImageSource.GALLERY)
        assert stub.kwargs["allow_multiple"] is False
        assert stub.kwargs["dialog_title"] == "Select Image from Gallery"

    def test_camera_dialog_title(self) -> None:
        """Test the camera source is reflected in the dialog title."""
        stub = StubFilePicker(files=[])
        asyncio.run(FletImagePicker(stub).pick_image(ImageSource.CAMERA))
        assert stub.kwargs["dialog_title"] == "Capture Image"

    @pytest.mark.parametrize("files", [None, []])
    def test_cancelled(self, files: Any) -> None:
        """Test a cancelled dialog returns None."""
        picker = FletImagePicker(StubFilePicker(files=files))
        assert asyncio.run(picker.pick_image(ImageSource.CAMERA)) is None

    def test_file_without_path(self) -> None:
        """Test files without a local path (web) are ignored."""
        stub = StubFilePicker(files=[SimpleNamespace(path=None, name="a.png")])
        assert asyncio.run(FletImagePicker(stub).pick_image(ImageSource.GALLERY)) is None

    def test_failure_wrapped(self) -> None:
        """Test platform failures raise PickerError."""
        picker = FletImagePicker(StubFilePicker(error=OSError("no dialog")))
        with pytest.raises(PickerError) as exc_info:
            asyncio.run(picker.pick_image(ImageSource.CAMERA))
        assert exc_info.value.source == "camera"
