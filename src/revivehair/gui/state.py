"""Application state for ReviveHair GUI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from revivehair.config import AppConfig


class Screen(Enum):
    """Application screens."""

    SPLASH = auto()
    HOME = auto()
    UPLOAD = auto()
    RECOMMENDATIONS = auto()


@dataclass
class AppState:
    """Global application state.

    Picked images are deliberately absent: they are logged and dropped.
    """

    config: AppConfig = field(default_factory=AppConfig)
    current_screen: Screen = Screen.SPLASH
    dark_mode: bool = False
    config_path: str = ""
    config_error: str = ""
