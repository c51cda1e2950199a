"""Configuration management for ReviveHair."""

from __future__ import annotations

import configparser
import os
import re
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from revivehair.content import DEFAULT_CAROUSEL_IMAGES
from revivehair.errors import ConfigError


class SplashConfig(BaseModel):
    """Splash screen timing."""

    delay_seconds: float = Field(default=3.0, gt=0)


class CarouselConfig(BaseModel):
    """Home screen carousel behaviour."""

    interval_seconds: float = Field(default=3.0, gt=0)
    transition_ms: int = Field(default=500, ge=0)
    images: list[str] = Field(default_factory=lambda: list(DEFAULT_CAROUSEL_IMAGES))


class WindowConfig(BaseModel):
    """Native window size (ignored in web mode)."""

    width: int = Field(default=420, ge=320)
    height: int = Field(default=860, ge=480)


class AppearanceConfig(BaseModel):
    """Look and feel options."""

    dark_mode: bool = False


class AppConfig(BaseModel):
    """Application configuration."""

    splash: SplashConfig = Field(default_factory=SplashConfig)
    carousel: CarouselConfig = Field(default_factory=CarouselConfig)
    window: WindowConfig = Field(default_factory=WindowConfig)
    appearance: AppearanceConfig = Field(default_factory=AppearanceConfig)


# Global config instance
_config: AppConfig | None = None
_config_path: Path | None = None


def get_exe_directory() -> Path:
    """Get the directory containing the executable, or cwd when run from source."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).parent
    return Path.cwd()


def get_config_dir() -> Path:
    """Get the user config directory (~/.revivehair), creating it if needed."""
    config_dir = Path.home() / ".revivehair"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_paths() -> list[Path]:
    """Get list of config file paths to search, in priority order.

    INI files come first; YAML files are still read when present.
    """
    exe_dir = get_exe_directory()
    cwd = Path.cwd()
    home_dir = Path.home() / ".revivehair"

    paths = [exe_dir / "revivehair.ini"]
    if cwd != exe_dir:
        paths.append(cwd / "revivehair.ini")
    paths.append(home_dir / "revivehair.ini")

    paths.append(cwd / "revivehair.yaml")
    paths.append(cwd / ".revivehair.yaml")
    paths.append(home_dir / "config.yaml")
    return paths


def find_config_file() -> Path | None:
    """Find the first existing config file."""
    for path in get_config_paths():
        if path.exists():
            return path
    return None


def _expand_env_vars(value: Any) -> Any:
    """Recursively expand ${VAR} and $VAR references in config values."""
    if isinstance(value, str):
        pattern = re.compile(r"\$\{([^}]+)\}|\$([A-Za-z_][A-Za-z0-9_]*)")

        def replace(match: re.Match[str]) -> str:
            var_name = match.group(1) or match.group(2)
            return os.environ.get(var_name, "")

        return pattern.sub(replace, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    return value


def _parse_list(value: str) -> list[str]:
    """Parse a comma-separated list, dropping empty items."""
    if not value or not value.strip():
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _load_ini_config(path: Path) -> dict[str, Any]:
    """Load configuration from an INI file into the AppConfig dict shape.

    Values are passed through as strings; pydantic does the type coercion.
    """
    parser = configparser.ConfigParser()
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error as e:
        raise ConfigError(str(e), path=str(path)) from e

    config: dict[str, Any] = {}

    if parser.has_section("splash"):
        splash = {k: v for k, v in parser.items("splash") if v.strip()}
        if splash:
            config["splash"] = splash

    if parser.has_section("carousel"):
        carousel: dict[str, Any] = {}
        for key in ("interval_seconds", "transition_ms"):
            value = parser.get("carousel", key, fallback="").strip()
            if value:
                carousel[key] = value
        if parser.has_option("carousel", "images"):
            images = _parse_list(parser.get("carousel", "images"))
            if images:
                carousel["images"] = images
        if carousel:
            config["carousel"] = carousel

    if parser.has_section("window"):
        window = {k: v for k, v in parser.items("window") if v.strip()}
        if window:
            config["window"] = window

    if parser.has_section("appearance"):
        value = parser.get("appearance", "dark_mode", fallback="").strip()
        if value:
            config["appearance"] = {"dark_mode": value}

    return config


def _load_yaml_config(path: Path) -> dict[str, Any]:
    """Load configuration from a YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(str(e), path=str(path)) from e


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from file.

    Args:
        path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration, or defaults when no file exists.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.
    """
    global _config, _config_path

    if path is None:
        path = find_config_file()

    if path is None or not path.exists():
        _config = AppConfig()
        _config_path = None
        return _config

    if path.suffix in (".ini", ".cfg"):
        raw_config = _load_ini_config(path)
    else:
        raw_config = _load_yaml_config(path)

    try:
        _config = AppConfig.model_validate(_expand_env_vars(raw_config))
    except ValidationError as e:
        raise ConfigError(str(e), path=str(path)) from e
    _config_path = path
    return _config


def get_config_path() -> Path | None:
    """Get the path the current configuration was loaded from."""
    return _config_path


def get_config() -> AppConfig:
    """Get the current configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration."""
    global _config, _config_path
    _config = None
    _config_path = None


def save_default_config(path: Path | None = None) -> Path:
    """Save a default INI config file.

    Args:
        path: Where to save. Defaults to ./revivehair.ini.

    Returns:
        Path to saved config file.
    """
    if path is None:
        path = Path.cwd() / "revivehair.ini"

    images = ", ".join(DEFAULT_CAROUSEL_IMAGES)
    default_config = f"""\
# ReviveHair Configuration
# You can use environment variables with ${{VAR}} syntax

[splash]
# Seconds the splash screen stays up before the home screen opens
delay_seconds = 3

[carousel]
# Seconds between automatic slides
interval_seconds = 3
# Slide transition length in milliseconds
transition_ms = 500
# Comma-separated image paths, relative to the assets directory
images = {images}

[window]
width = 420
height = 860

[appearance]
dark_mode = false
"""

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(default_config)

    return path
