"""Screen components for ReviveHair GUI."""

from revivehair.gui.screens.home import HomeScreen
from revivehair.gui.screens.recommendations import RecommendationsScreen
from revivehair.gui.screens.splash import SplashScreen
from revivehair.gui.screens.upload import UploadScreen

__all__ = [
    "HomeScreen",
    "RecommendationsScreen",
    "SplashScreen",
    "UploadScreen",
]
