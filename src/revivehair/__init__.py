"""ReviveHair - Hair loss detection and prevention demo app."""

from revivehair._version import __version__

__all__ = ["__version__"]
