"""Shared fixtures for ReviveHair tests."""

from __future__ import annotations

import asyncio
import threading
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from revivehair.config import reset_config
from revivehair.media import ImagePicker, ImageSource, PickedImage


class FakeWindow:
    """Stand-in for page.window."""

    def __init__(self) -> None:
        self.width: float | None = None
        self.height: float | None = None
        self.prevent_close = False
        self.on_event: Any = None
        self.destroyed = False

    async def destroy(self) -> None:
        self.destroyed = True


class FakePage:
    """Stand-in for ft.Page that records updates and runs tasks inline."""

    def __init__(self) -> None:
        self.overlay: list[Any] = []
        self.controls: list[Any] = []
        self.dialogs: list[Any] = []
        self.navigation_bar: Any = None
        self.window = FakeWindow()
        self.on_connect: Any = None
        self.on_disconnect: Any = None
        self.on_close: Any = None
        self._lock = threading.Lock()
        self.update_count = 0

    def update(self) -> None:
        with self._lock:
            self.update_count += 1

    def add(self, *controls: Any) -> None:
        self.controls.extend(controls)
        self.update()

    def show_dialog(self, dialog: Any) -> None:
        dialog.open = True
        self.dialogs.append(dialog)
        self.update()

    def run_task(self, handler: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        return asyncio.run(handler(*args, **kwargs))


class FakePicker(ImagePicker):
    """Picker returning a canned result."""

    def __init__(
        self,
        result: PickedImage | None = None,
        error: Exception | None = None,
    ) -> None:
        self.result = result
        self.error = error
        self.calls: list[ImageSource] = []

    async def pick_image(self, source: ImageSource) -> PickedImage | None:
        self.calls.append(source)
        if self.error is not None:
            raise self.error
        return self.result


def wait_for(condition: Callable[[], bool], timeout: float = 2.0) -> bool:
    """Poll ``condition`` until it is true or ``timeout`` elapses."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.01)
    return condition()


@pytest.fixture
def page() -> FakePage:
    return FakePage()


@pytest.fixture(autouse=True)
def log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Send the app log to a temp file instead of the working directory."""
    path = tmp_path / "revivehair.log"
    monkeypatch.setattr("revivehair.gui.errors.get_log_file_path", lambda: path)
    return path


@pytest.fixture(autouse=True)
def _reset_config() -> None:
    reset_config()
