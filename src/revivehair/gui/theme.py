"""Theme configuration for ReviveHair GUI."""

import flet as ft

# Brand blues, also used for the splash gradient
BRAND_BLUE = "#1E88E5"
BRAND_BLUE_LIGHT = "#6AB7FF"

# Home screen surfaces
HOME_BACKGROUND = ft.Colors.BLUE_50
PANEL_BACKGROUND = ft.Colors.WHITE_54
HIGHLIGHT_CARD = ft.Colors.ORANGE

# Carousel position dots
DOT_ACTIVE = ft.Colors.RED
DOT_INACTIVE = ft.Colors.GREEN


def create_theme(dark_mode: bool = False) -> ft.Theme:
    """Create the app theme seeded from the brand blue.

    Args:
        dark_mode: Whether the theme will be used in dark mode.

    Returns:
        Configured Flet theme.
    """
    return ft.Theme(
        color_scheme_seed=BRAND_BLUE,
        color_scheme=ft.ColorScheme(
            primary=BRAND_BLUE_LIGHT if dark_mode else BRAND_BLUE,
            on_primary="#FFFFFF",
        ),
    )


def get_theme_mode(dark_mode: bool = False) -> ft.ThemeMode:
    """Get ThemeMode.DARK or ThemeMode.LIGHT."""
    return ft.ThemeMode.DARK if dark_mode else ft.ThemeMode.LIGHT
