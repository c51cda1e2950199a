"""Tests for the configuration module."""

import os
from pathlib import Path

import pytest

from revivehair.config import (
    AppConfig,
    AppearanceConfig,
    CarouselConfig,
    SplashConfig,
    WindowConfig,
    _expand_env_vars,
    _parse_list,
    get_config,
    get_config_path,
    get_config_paths,
    load_config,
    save_default_config,
)
from revivehair.content import DEFAULT_CAROUSEL_IMAGES
from revivehair.errors import ConfigError


class TestConfigModels:
    """Tests for configuration models."""

    def test_splash_defaults(self) -> None:
        """Test SplashConfig waits 3 seconds by default."""
        assert SplashConfig().delay_seconds == 3.0

    def test_carousel_defaults(self) -> None:
        """Test CarouselConfig defaults."""
        cfg = CarouselConfig()
        assert cfg.interval_seconds == 3.0
        assert cfg.transition_ms == 500
        assert cfg.images == list(DEFAULT_CAROUSEL_IMAGES)

    def test_window_and_appearance_defaults(self) -> None:
        """Test WindowConfig and AppearanceConfig defaults."""
        assert WindowConfig().width == 420
        assert WindowConfig().height == 860
        assert AppearanceConfig().dark_mode is False

    def test_app_config_defaults(self) -> None:
        """Test AppConfig nests all sections."""
        cfg = AppConfig()
        assert isinstance(cfg.splash, SplashConfig)
        assert isinstance(cfg.carousel, CarouselConfig)
        assert isinstance(cfg.window, WindowConfig)
        assert isinstance(cfg.appearance, AppearanceConfig)

    def test_non_positive_delay_rejected(self) -> None:
        """Test zero delays are invalid."""
        with pytest.raises(ValueError):
            SplashConfig(delay_seconds=0)


class TestEnvVarExpansion:
    """Tests for environment variable expansion."""

    def test_expand_braced_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test expanding ${VAR} syntax."""
        monkeypatch.setenv("RH_TEST_VAR", "5")
        assert _expand_env_vars("${RH_TEST_VAR}") == "5"

    def test_expand_dollar_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test expanding $VAR syntax inside a list."""
        monkeypatch.setenv("RH_TEST_VAR", "img.svg")
        assert _expand_env_vars(["$RH_TEST_VAR", "static"]) == ["img.svg", "static"]

    def test_expand_missing_var(self) -> None:
        """Test a missing variable becomes an empty string."""
        os.environ.pop("RH_MISSING_12345", None)
        assert _expand_env_vars({"k": "${RH_MISSING_12345}"}) == {"k": ""}


class TestParseList:
    """Tests for comma-separated list parsing."""

    def test_parse_list(self) -> None:
        """Test items are stripped and empties dropped."""
        assert _parse_list(" a.svg, ,b.svg ") == ["a.svg", "b.svg"]

    def test_parse_empty(self) -> None:
        """Test blank input gives an empty list."""
        assert _parse_list("  ") == []


class TestConfigLoading:
    """Tests for configuration loading."""

    def test_load_nonexistent_file(self) -> None:
        """Test loading returns defaults when the file does not exist."""
        cfg = load_config(Path("/nonexistent/revivehair.ini"))
        assert cfg == AppConfig()
        assert get_config_path() is None

    def test_load_ini(self, tmp_path: Path) -> None:
        """Test loading every INI section."""
        path = tmp_path / "revivehair.ini"
        path.write_text(
            "[splash]\n"
            "delay_seconds = 1.5\n"
            "[carousel]\n"
            "interval_seconds = 4\n"
            "transition_ms = 250\n"
            "images = one.svg, two.svg\n"
            "[window]\n"
            "width = 500\n"
            "[appearance]\n"
            "dark_mode = yes\n",
            encoding="utf-8",
        )

        cfg = load_config(path)

        assert cfg.splash.delay_seconds == 1.5
        assert cfg.carousel.interval_seconds == 4.0
        assert cfg.carousel.transition_ms == 250
        assert cfg.carousel.images == ["one.svg", "two.svg"]
        assert cfg.window.width == 500
        assert cfg.window.height == 860
        assert cfg.appearance.dark_mode is True
        assert get_config_path() == path

    def test_blank_ini_values_keep_defaults(self, tmp_path: Path) -> None:
        """Test empty values fall back to defaults."""
        path = tmp_path / "revivehair.ini"
        path.write_text("[carousel]\ninterval_seconds =\nimages =\n", encoding="utf-8")

        cfg = load_config(path)

        assert cfg.carousel.interval_seconds == 3.0
        assert cfg.carousel.images == list(DEFAULT_CAROUSEL_IMAGES)

    def test_load_ini_with_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment variables are expanded in INI values."""
        monkeypatch.setenv("RH_SPLASH_DELAY", "2")
        path = tmp_path / "revivehair.ini"
        path.write_text("[splash]\ndelay_seconds = ${RH_SPLASH_DELAY}\n", encoding="utf-8")

        assert load_config(path).splash.delay_seconds == 2.0

    def test_load_yaml(self, tmp_path: Path) -> None:
        """Test loading a YAML config file."""
        path = tmp_path / "revivehair.yaml"
        path.write_text(
            "carousel:\n  interval_seconds: 5\n  images:\n    - a.svg\n",
            encoding="utf-8",
        )

        cfg = load_config(path)

        assert cfg.carousel.interval_seconds == 5.0
        assert cfg.carousel.images == ["a.svg"]

    def test_empty_yaml(self, tmp_path: Path) -> None:
        """Test an empty YAML file gives defaults."""
        path = tmp_path / "revivehair.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == AppConfig()

    def test_invalid_value_raises_config_error(self, tmp_path: Path) -> None:
        """Test invalid values surface as ConfigError with the file path."""
        path = tmp_path / "revivehair.ini"
        path.write_text("[window]\nwidth = tiny\n", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.path == str(path)

    def test_malformed_ini_raises_config_error(self, tmp_path: Path) -> None:
        """Test unparsable INI files surface as ConfigError."""
        path = tmp_path / "revivehair.ini"
        path.write_text("delay_seconds = 1\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_malformed_yaml_raises_config_error(self, tmp_path: Path) -> None:
        """Test unparsable YAML files surface as ConfigError."""
        path = tmp_path / "revivehair.yaml"
        path.write_text("carousel: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_get_config_caches(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test get_config loads once and returns the same object."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_config() is get_config()


class TestConfigPaths:
    """Tests for config file discovery."""

    def test_paths_include_home(self) -> None:
        """Test the home directory INI is searched."""
        paths = get_config_paths()
        assert Path.home() / ".revivehair" / "revivehair.ini" in paths

    def test_ini_before_yaml(self) -> None:
        """Test INI files take priority over YAML files."""
        suffixes = [p.suffix for p in get_config_paths()]
        assert suffixes.index(".yaml") > max(i for i, s in enumerate(suffixes) if s == ".ini")


class TestSaveDefaultConfig:
    """Tests for writing the default config file."""

    def test_default_config_round_trips(self, tmp_path: Path) -> None:
        """Test the written file loads back to the defaults."""
        path = save_default_config(tmp_path / "sub" / "revivehair.ini")

        assert path.exists()
        assert load_config(path) == AppConfig()
