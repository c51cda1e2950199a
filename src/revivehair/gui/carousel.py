"""Auto-advancing image carousel for the home screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import flet as ft

from revivehair.gui import strings
from revivehair.gui.theme import BRAND_BLUE, BRAND_BLUE_LIGHT, DOT_ACTIVE, DOT_INACTIVE
from revivehair.gui.timers import RepeatingTimer

if TYPE_CHECKING:
    from revivehair.config import CarouselConfig

# Minimum horizontal fling speed (logical px/s) that counts as a swipe
SWIPE_VELOCITY_THRESHOLD = 100.0


@dataclass
class CarouselState:
    """Images shown by a carousel and the page currently visible."""

    images: list[str] = field(default_factory=list)
    current_page: int = 0

    @property
    def page_count(self) -> int:
        return len(self.images)

    @property
    def current_image(self) -> str | None:
        if 0 <= self.current_page < len(self.images):
            return self.images[self.current_page]
        return None


class CarouselController:
    """Page navigation for a carousel.

    The current page always stays within ``[0, page_count)``; with no
    images it stays at 0.
    """

    def __init__(self, images: list[str] | tuple[str, ...]) -> None:
        self.state = CarouselState(images=list(images))

    @property
    def current_page(self) -> int:
        return self.state.current_page

    def advance(self) -> int:
        """Move to the next page, wrapping to the first after the last."""
        if self.state.page_count:
            self.state.current_page = (self.state.current_page + 1) % self.state.page_count
        return self.state.current_page

    def previous(self) -> int:
        """Move to the previous page, wrapping to the last before the first."""
        if self.state.page_count:
            self.state.current_page = (self.state.current_page - 1) % self.state.page_count
        return self.state.current_page

    def go_to(self, index: int) -> int:
        """Jump to ``index``; out-of-range indices are ignored."""
        if 0 <= index < self.state.page_count:
            self.state.current_page = index
        return self.state.current_page


class CarouselView:
    """Carousel control with autoplay, swipe support and a dot indicator."""

    def __init__(
        self,
        page: ft.Page,
        config: CarouselConfig,
        *,
        height: float = 535,
    ) -> None:
        self.page = page
        self.config = config
        self.height = height
        self.controller = CarouselController(config.images)
        self._timer: RepeatingTimer | None = None
        self._disposed = False

        self.switcher = ft.AnimatedSwitcher(
            content=self._build_slide(),
            transition=ft.AnimatedSwitcherTransition.FADE,
            duration=config.transition_ms,
            reverse_duration=config.transition_ms,
        )
        self.dots = ft.Row(
            self._build_dots(),
            alignment=ft.MainAxisAlignment.CENTER,
        )

    @property
    def current_page(self) -> int:
        return self.controller.current_page

    def start(self) -> None:
        """Start autoplay. Does nothing after dispose()."""
        if self._disposed or self._timer is not None:
            return
        self._timer = RepeatingTimer(self.config.interval_seconds, self._on_tick)
        self._timer.start()

    def dispose(self) -> None:
        """Stop autoplay; later ticks are ignored."""
        self._disposed = True
        if self._timer is not None:
            self._timer.cancel()

    def _on_tick(self) -> None:
        # Timer thread; hop onto the page's event loop
        if not self._disposed:
            self.page.run_task(self.auto_advance)

    async def auto_advance(self) -> None:
        """Advance one page, as the autoplay timer does."""
        if self._disposed:
            return
        self.controller.advance()
        self._refresh()

    def show_page(self, index: int) -> None:
        """Jump to a page (dot taps)."""
        self.controller.go_to(index)
        self._refresh()

    def on_swipe(self, velocity: float) -> None:
        """Handle a horizontal fling; negative velocity means swipe left."""
        if velocity <= -SWIPE_VELOCITY_THRESHOLD:
            self.controller.advance()
        elif velocity >= SWIPE_VELOCITY_THRESHOLD:
            self.controller.previous()
        else:
            return
        self._refresh()

    def _on_drag_end(self, e: ft.DragEndEvent) -> None:
        self.on_swipe(e.primary_velocity or 0.0)

    def _refresh(self) -> None:
        self.switcher.content = self._build_slide()
        self.dots.controls = self._build_dots()
        self.page.update()

    def _build_slide(self) -> ft.Control:
        image = self.controller.state.current_image
        # key makes AnimatedSwitcher treat every page as a new child
        return ft.Container(
            key=str(self.controller.current_page),
            content=ft.Image(src=image, width=260, height=400) if image else None,
            width=260,
            height=400,
            border_radius=15,
            bgcolor=ft.Colors.WHITE,
            shadow=ft.BoxShadow(
                blur_radius=6,
                color=ft.Colors.BLACK_26,
                offset=ft.Offset(0, 4),
            ),
            clip_behavior=ft.ClipBehavior.HARD_EDGE,
        )

    def _build_dots(self) -> list[ft.Control]:
        dots: list[ft.Control] = []
        for index in range(self.controller.state.page_count):
            active = index == self.controller.current_page
            dots.append(
                ft.Container(
                    width=16 if active else 8,
                    height=8,
                    border_radius=4,
                    bgcolor=DOT_ACTIVE if active else DOT_INACTIVE,
                    animate=300,
                    on_click=lambda e, i=index: self.show_page(i),
                )
            )
        return dots

    def build(self) -> ft.Control:
        """Build the carousel UI."""
        title = ft.Container(
            content=ft.Text(
                strings.CAROUSEL_TITLE,
                size=25,
                weight=ft.FontWeight.W_900,
                color=ft.Colors.WHITE,
            ),
            padding=ft.Padding.symmetric(horizontal=16, vertical=10),
            alignment=ft.Alignment(-1, 0),
        )

        return ft.Container(
            content=ft.Column(
                [
                    title,
                    ft.GestureDetector(
                        content=ft.Container(
                            content=self.switcher,
                            alignment=ft.Alignment(0, 0),
                            expand=True,
                        ),
                        on_horizontal_drag_end=self._on_drag_end,
                        expand=True,
                    ),
                    ft.Container(height=15),
                    self.dots,
                    ft.Container(height=20),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            height=self.height,
            border_radius=15,
            gradient=ft.LinearGradient(
                begin=ft.Alignment(-1, -1),
                end=ft.Alignment(1, 1),
                colors=[BRAND_BLUE, BRAND_BLUE_LIGHT],
            ),
            shadow=ft.BoxShadow(
                blur_radius=10,
                color=ft.Colors.BLACK_26,
                offset=ft.Offset(0, 5),
            ),
        )
