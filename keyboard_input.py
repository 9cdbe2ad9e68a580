# Per-key edge detection over a polled "is this key down" signal.
from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Protocol

import numpy as np

try:
    from .virtual_keycodes import NON_KEYBOARD_CODES, NUM_KEY_CODES
except ImportError:
    from virtual_keycodes import NON_KEYBOARD_CODES, NUM_KEY_CODES


class KeyState(IntEnum):
    RELEASED = 0
    JUST_RELEASED = 1
    PRESSED = 2
    JUST_PRESSED = 3


UP_STATES = frozenset({KeyState.RELEASED, KeyState.JUST_RELEASED})
DOWN_STATES = frozenset({KeyState.PRESSED, KeyState.JUST_PRESSED})
_DOWN_VALUES = np.array(sorted(int(state) for state in DOWN_STATES), dtype=np.int8)


class KeySamplingError(OSError):
    """Raised by a raw key source that could not read the device."""


class RawKeySource(Protocol):
    def is_key_down(self, code: int) -> bool: ...


def key_is_up(state: KeyState) -> bool:
    return state in UP_STATES


def key_is_down(state: KeyState) -> bool:
    return state in DOWN_STATES


def next_key_state(prev: KeyState, raw_down: bool) -> KeyState:
    """Transition for one key: only the up/down group of `prev` matters."""
    if raw_down:
        return KeyState.JUST_PRESSED if key_is_up(prev) else KeyState.PRESSED
    return KeyState.JUST_RELEASED if key_is_down(prev) else KeyState.RELEASED


def check_key_code(code: int) -> int:
    """Reject codes outside 0..NUM_KEY_CODES-1 (negative codes must not wrap)."""
    if isinstance(code, bool) or not isinstance(code, (int, np.integer)):
        raise IndexError(f"key code must be an integer, got {code!r}")
    if not 0 <= code < NUM_KEY_CODES:
        raise IndexError(f"key code {code} out of range 0..{NUM_KEY_CODES - 1}")
    return int(code)


class InputTracker:
    """Logical state of every key code, refreshed by exactly one update() per tick."""

    def __init__(self, source: RawKeySource) -> None:
        self.source = source
        self._states = np.full(NUM_KEY_CODES, int(KeyState.RELEASED), dtype=np.int8)

    def update(self) -> None:
        """Sample every code once, then replace the whole state array."""
        raw_down = np.fromiter(
            (bool(self.source.is_key_down(code)) for code in range(NUM_KEY_CODES)),
            dtype=bool,
            count=NUM_KEY_CODES,
        )
        was_down = np.isin(self._states, _DOWN_VALUES)
        self._states = np.where(
            raw_down,
            np.where(was_down, int(KeyState.PRESSED), int(KeyState.JUST_PRESSED)),
            np.where(was_down, int(KeyState.JUST_RELEASED), int(KeyState.RELEASED)),
        ).astype(np.int8)

    def state(self, code: int) -> KeyState:
        return KeyState(int(self._states[check_key_code(code)]))

    def states(self) -> np.ndarray:
        snapshot = self._states.copy()
        snapshot.flags.writeable = False
        return snapshot

    def key_is_up(self, code: int) -> bool:
        return key_is_up(self.state(code))

    def key_is_down(self, code: int) -> bool:
        return key_is_down(self.state(code))

    def key_pressed_now(self, code: int) -> bool:
        return self.state(code) == KeyState.JUST_PRESSED

    def key_released_now(self, code: int) -> bool:
        return self.state(code) == KeyState.JUST_RELEASED


def any_key_pressed(tracker: InputTracker, excluded_codes: Iterable[int] = NON_KEYBOARD_CODES) -> bool:
    """True if any code outside `excluded_codes` went down this tick."""
    pressed = tracker.states() == int(KeyState.JUST_PRESSED)
    excluded = [check_key_code(code) for code in excluded_codes]
    if excluded:
        pressed[excluded] = False
    return bool(pressed.any())
