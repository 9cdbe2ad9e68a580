# Raw key sampling backed by Tk key events.
from __future__ import annotations

from typing import Any

try:
    from .keyboard_input import KeySamplingError, check_key_code
    from .virtual_keycodes import TK_KEYSYM_TO_CODE
except ImportError:
    from keyboard_input import KeySamplingError, check_key_code
    from virtual_keycodes import TK_KEYSYM_TO_CODE


class TkKeySource:
    """Tracks which key codes are physically held, from KeyPress/KeyRelease events.

    Tk only delivers events while its window has focus; losing focus releases
    every key so nothing stays stuck down.
    """

    def __init__(self) -> None:
        self.held: set[int] = set()
        self.closed = False

    def bind(self, widget: Any) -> None:
        widget.bind("<KeyPress>", self.on_key_press, add="+")
        widget.bind("<KeyRelease>", self.on_key_release, add="+")
        widget.bind("<FocusOut>", lambda _e: self.release_all(), add="+")

    def on_key_press(self, event: Any) -> None:
        code = TK_KEYSYM_TO_CODE.get(event.keysym)
        if code is not None:
            self.held.add(code)

    def on_key_release(self, event: Any) -> None:
        code = TK_KEYSYM_TO_CODE.get(event.keysym)
        if code is not None:
            self.held.discard(code)

    def release_all(self) -> None:
        self.held.clear()

    def close(self) -> None:
        self.closed = True
        self.held.clear()

    def is_key_down(self, code: int) -> bool:
        if self.closed:
            raise KeySamplingError("Key source is closed; the window is gone.")
        return check_key_code(code) in self.held
