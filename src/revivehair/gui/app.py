"""Main Flet application for ReviveHair GUI."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import flet as ft

from revivehair.errors import ConfigError
from revivehair.gui import strings
from revivehair.gui.errors import show_error
from revivehair.gui.navigation import Navigator
from revivehair.gui.state import AppState, Screen
from revivehair.gui.theme import create_theme, get_theme_mode
from revivehair.media import FletImagePicker

if TYPE_CHECKING:
    from revivehair.gui.screens.base import BaseScreen
    from revivehair.media import ImagePicker

ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"

# Screens reachable from the bottom navigation bar, in bar order
NAV_SCREENS = (Screen.HOME, Screen.UPLOAD, Screen.RECOMMENDATIONS)


class AppShell:
    """Owns the navigator and swaps screens in and out of the page."""

    def __init__(self, page: ft.Page, state: AppState, picker: ImagePicker) -> None:
        self.page = page
        self.state = state
        self.picker = picker
        self.content = ft.Container(expand=True)
        self.screen: BaseScreen | None = None
        self.navigator = Navigator(Screen.SPLASH, on_change=self._show)
        self.nav_bar = ft.NavigationBar(
            destinations=[
                ft.NavigationBarDestination(
                    icon=ft.Icons.HOME_OUTLINED,
                    selected_icon=ft.Icons.HOME,
                    label=strings.NAV_HOME,
                ),
                ft.NavigationBarDestination(
                    icon=ft.Icons.UPLOAD_FILE_OUTLINED,
                    selected_icon=ft.Icons.UPLOAD_FILE,
                    label=strings.NAV_UPLOAD,
                ),
                ft.NavigationBarDestination(
                    icon=ft.Icons.TIPS_AND_UPDATES_OUTLINED,
                    selected_icon=ft.Icons.TIPS_AND_UPDATES,
                    label=strings.NAV_RECOMMENDATIONS,
                ),
            ],
            on_change=self._on_nav_change,
            visible=False,
        )

    def start(self) -> None:
        """Attach the shell to the page and show the splash screen."""
        self.page.navigation_bar = self.nav_bar
        self.page.add(self.content)
        self._show(self.navigator.current)

    def close(self) -> None:
        """Dispose the visible screen so no timer outlives the session."""
        if self.screen is not None:
            self.screen.dispose()
            self.screen = None

    def resume(self) -> None:
        """Rebuild the current screen after close(), e.g. on web reconnect."""
        if self.screen is None:
            self._show(self.navigator.current)

    def bind_close_events(self, web_mode: bool = False) -> None:
        """Tear the shell down when the session ends or the window closes."""
        self.page.on_disconnect = lambda e: self.close()
        self.page.on_connect = lambda e: self.resume()
        self.page.on_close = lambda e: self.close()

        if web_mode:
            return

        # Handle window close so the screen is disposed before exit
        self.page.window.prevent_close = True

        async def on_window_event(e: ft.WindowEvent) -> None:
            if e.type == ft.WindowEventType.CLOSE:
                self.close()
                self.page.window.prevent_close = False
                await self.page.window.destroy()

        self.page.window.on_event = on_window_event

    def go_back(self) -> None:
        if not self.navigator.pop():
            self.navigator.reset(Screen.HOME)

    def open_tab(self, screen: Screen) -> None:
        """Show a bottom-bar screen on top of home."""
        if screen == Screen.HOME:
            self.navigator.reset(Screen.HOME)
        elif self.navigator.can_pop:
            self.navigator.replace(screen)
        else:
            self.navigator.push(screen)

    def _on_nav_change(self, e: ft.ControlEvent) -> None:
        self.open_tab(NAV_SCREENS[e.control.selected_index])

    def _create_screen(self, screen: Screen) -> BaseScreen:
        # Import screens here to avoid circular imports
        from revivehair.gui.screens import (
            HomeScreen,
            RecommendationsScreen,
            SplashScreen,
            UploadScreen,
        )

        if screen == Screen.SPLASH:
            return SplashScreen(
                self.page,
                self.state,
                on_finished=lambda: self.navigator.replace(Screen.HOME),
            )
        elif screen == Screen.UPLOAD:
            return UploadScreen(
                self.page,
                self.state,
                self.picker,
                on_back=self.go_back,
                on_recommendations=lambda: self.open_tab(Screen.RECOMMENDATIONS),
            )
        elif screen == Screen.RECOMMENDATIONS:
            return RecommendationsScreen(self.page, self.state, on_back=self.go_back)
        return HomeScreen(
            self.page,
            self.state,
            self.picker,
            on_upload=lambda: self.open_tab(Screen.UPLOAD),
            on_recommendations=lambda: self.open_tab(Screen.RECOMMENDATIONS),
        )

    def _show(self, screen: Screen) -> None:
        """Dispose the visible screen and build ``screen`` in its place."""
        if self.screen is not None:
            self.screen.dispose()

        self.state.current_screen = screen
        self.screen = self._create_screen(screen)
        self.content.content = self.screen.build()

        self.nav_bar.visible = screen != Screen.SPLASH
        if screen in NAV_SCREENS:
            self.nav_bar.selected_index = NAV_SCREENS.index(screen)

        self.page.update()
        self.screen.did_mount()


def _initialize_state(state: AppState, config_path: Path | None = None) -> None:
    """Load configuration into the state, falling back to defaults on error."""
    from revivehair.config import get_config_path, load_config

    try:
        state.config = load_config(config_path)
    except ConfigError as e:
        state.config_error = str(e)
        return

    loaded_from = get_config_path()
    state.config_path = str(loaded_from) if loaded_from else ""
    state.dark_mode = state.config.appearance.dark_mode


def run_app(web_mode: bool = False, config_path: Path | None = None) -> None:
    """Run the ReviveHair GUI application.

    Args:
        web_mode: If True, opens in a web browser instead of native window.
        config_path: Explicit config file; default locations are searched otherwise.
    """

    def main(page: ft.Page) -> None:
        """Main application entry point."""
        state = AppState()
        _initialize_state(state, config_path)

        page.title = strings.APP_TITLE
        page.theme = create_theme(dark_mode=state.dark_mode)
        page.theme_mode = get_theme_mode(dark_mode=state.dark_mode)
        page.padding = 0

        if not web_mode:
            page.window.width = state.config.window.width
            page.window.height = state.config.window.height

        shell = AppShell(page, state, FletImagePicker())
        shell.bind_close_events(web_mode)
        shell.start()

        if state.config_error:
            show_error(
                page,
                ConfigError(state.config_error),
                persistent=False,
                context="loading configuration",
            )

    if web_mode:
        ft.run(main, assets_dir=str(ASSETS_DIR), view=ft.AppView.WEB_BROWSER)
    else:
        ft.run(main, assets_dir=str(ASSETS_DIR))
