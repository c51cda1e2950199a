"""Version lookup for ReviveHair.

The version is declared once, in pyproject.toml, and read back from the
installed distribution metadata.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "revivehair"

# Reported when running from a source tree that was never installed
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """Get the installed version string (e.g. "1.0.0")."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return FALLBACK_VERSION


__version__ = get_version()
