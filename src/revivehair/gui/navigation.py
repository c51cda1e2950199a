"""Screen stack navigation for ReviveHair GUI."""

from __future__ import annotations

from collections.abc import Callable

from revivehair.gui.state import Screen


class Navigator:
    """A stack of screens with push/replace/pop semantics.

    The listener is called once per change with the new top screen.
    """

    def __init__(
        self,
        initial: Screen,
        on_change: Callable[[Screen], None] | None = None,
    ) -> None:
        self._stack: list[Screen] = [initial]
        self.on_change = on_change

    @property
    def current(self) -> Screen:
        """The screen on top of the stack."""
        return self._stack[-1]

    @property
    def stack(self) -> tuple[Screen, ...]:
        return tuple(self._stack)

    @property
    def can_pop(self) -> bool:
        return len(self._stack) > 1

    def push(self, screen: Screen) -> None:
        """Show ``screen`` on top of the current one."""
        self._stack.append(screen)
        self._notify()

    def replace(self, screen: Screen) -> None:
        """Swap the current screen for ``screen``; it cannot be popped back to."""
        self._stack[-1] = screen
        self._notify()

    def pop(self) -> bool:
        """Go back one screen.

        Returns:
            False if already at the root screen (nothing happens).
        """
        if not self.can_pop:
            return False
        self._stack.pop()
        self._notify()
        return True

    def reset(self, screen: Screen) -> None:
        """Clear the stack and show ``screen`` as the new root."""
        self._stack = [screen]
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.current)
