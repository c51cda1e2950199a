"""Tests for version lookup."""

import re
from importlib.metadata import PackageNotFoundError

import pytest

from revivehair import __version__, _version


def test_version_format() -> None:
    """Test the version looks like MAJOR.MINOR.PATCH."""
    assert re.match(r"^\d+\.\d+\.\d+", __version__)


def test_version_from_metadata(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the distribution metadata is the source of the version."""
    requested: list[str] = []

    def fake_version(name: str) -> str:
        requested.append(name)
        return "4.5.6"

    monkeypatch.setattr(_version, "version", fake_version)
    assert _version.get_version() == "4.5.6"
    assert requested == ["revivehair"]


def test_version_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test an uninstalled source tree reports the fallback version."""

    def missing(name: str) -> str:
        raise PackageNotFoundError(name)

    monkeypatch.setattr(_version, "version", missing)
    assert _version.get_version() == _version.FALLBACK_VERSION
