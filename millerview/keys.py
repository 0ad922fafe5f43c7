"""Key bindings for the Miller-column browser.

Maps key tokens from ``read_key`` to navigation actions. A dispatch returns
``True`` when the app should quit, ``False`` otherwise, so the loop stays a
plain read/dispatch/render cycle.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .miller_model import NavigationState

QUIT_KEYS: tuple[str, ...] = ("q", "CTRL_C")


@dataclass(frozen=True)
class KeyBinding:
    """One or more key tokens bound to a navigation action."""

    keys: tuple[str, ...]
    action: Callable[[], bool]


class NavigationKeyMap:
    """Dispatch table from key tokens to ``NavigationState`` mutations.

    ``page_distance`` is asked at dispatch time so paging follows the current
    terminal height.
    """

    def __init__(self, state: NavigationState, page_distance: Callable[[], int]) -> None:
        self.state = state
        self._page_distance = page_distance
        self._actions: dict[str, Callable[[], bool]] = {}
        self.changed = False
        self.register(
            KeyBinding(("UP", "k"), state.on_up),
            KeyBinding(("DOWN", "j"), state.on_down),
            KeyBinding(("LEFT", "h"), state.on_left),
            KeyBinding(("RIGHT", "l", "ENTER"), state.on_right),
            KeyBinding(("PAGE_UP",), lambda: state.on_page_up(self._page_distance())),
            KeyBinding(("PAGE_DOWN",), lambda: state.on_page_down(self._page_distance())),
        )

    def register(self, *bindings: KeyBinding) -> NavigationKeyMap:
        """Register bindings, later ones overriding earlier keys."""
        for binding in bindings:
            for key in binding.keys:
                self._actions[key] = binding.action
        return self

    def is_bound(self, key: str) -> bool:
        return key in self._actions or key in QUIT_KEYS

    def handle(self, key: str) -> bool:
        """Apply ``key``; return ``True`` when it requests quitting.

        ``changed`` records whether the last handled key altered state.
        """
        if key in QUIT_KEYS:
            self.changed = False
            return True
        action = self._actions.get(key)
        self.changed = bool(action()) if action is not None else False
        return False


__all__ = [
    "QUIT_KEYS",
    "KeyBinding",
    "NavigationKeyMap",
]
