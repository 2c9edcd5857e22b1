from __future__ import annotations

import tkinter as tk

from lavajump.domain.input_state import InputIntent

_LEFT_KEYS = frozenset({"Left", "a", "A"})
_RIGHT_KEYS = frozenset({"Right", "d", "D"})
_JUMP_KEYS = frozenset({"Up", "w", "W", "space"})


class TkInputMapper:
    """Tracks which movement keys are currently held."""

    def __init__(self, root: tk.Misc) -> None:
        self._held: set[str] = set()

        root.bind("<KeyPress>", self._on_key_down)
        root.bind("<KeyRelease>", self._on_key_up)
        # Releases are lost while unfocused; drop everything.
        root.bind("<FocusOut>", self._on_focus_out)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_key_down(self, evt: tk.Event) -> None:
        self._held.add(evt.keysym)

    def _on_key_up(self, evt: tk.Event) -> None:
        self._held.discard(evt.keysym)

    def _on_focus_out(self, _evt: tk.Event) -> None:
        self._held.clear()

    def sample(self) -> InputIntent:
        held = self._held
        return InputIntent(
            left=not held.isdisjoint(_LEFT_KEYS),
            right=not held.isdisjoint(_RIGHT_KEYS),
            jump=not held.isdisjoint(_JUMP_KEYS),
        )
