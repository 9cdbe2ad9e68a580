# Key codes shared by the input tracker, raw key sources and controller glue.
from __future__ import annotations

# Codes follow the Windows virtual-key numbering so the 0..255 range is dense
# and pointer buttons sit at fixed low values.
NUM_KEY_CODES = 256

VK_LBUTTON = 0x01
VK_RBUTTON = 0x02
VK_CANCEL = 0x03
VK_MBUTTON = 0x04
VK_XBUTTON1 = 0x05
VK_XBUTTON2 = 0x06
VK_BACK = 0x08
VK_TAB = 0x09
VK_RETURN = 0x0D
VK_SHIFT = 0x10
VK_CONTROL = 0x11
VK_ESCAPE = 0x1B
VK_SPACE = 0x20
VK_LEFT = 0x25
VK_UP = 0x26
VK_RIGHT = 0x27
VK_DOWN = 0x28

# Pointer buttons: ignored when asking whether any keyboard key went down.
NON_KEYBOARD_CODES = frozenset({VK_LBUTTON, VK_RBUTTON, VK_MBUTTON, VK_XBUTTON1, VK_XBUTTON2})


def _build_tk_keysyms() -> dict[str, int]:
    table = {
        "Escape": VK_ESCAPE,
        "Return": VK_RETURN,
        "KP_Enter": VK_RETURN,
        "space": VK_SPACE,
        "BackSpace": VK_BACK,
        "Tab": VK_TAB,
        "Shift_L": VK_SHIFT,
        "Shift_R": VK_SHIFT,
        "Control_L": VK_CONTROL,
        "Control_R": VK_CONTROL,
        "Left": VK_LEFT,
        "Up": VK_UP,
        "Right": VK_RIGHT,
        "Down": VK_DOWN,
    }
    # Letters map to their uppercase ASCII value, digits to theirs.
    for offset in range(26):
        table[chr(ord("a") + offset)] = ord("A") + offset
        table[chr(ord("A") + offset)] = ord("A") + offset
    for digit in "0123456789":
        table[digit] = ord(digit)
    return table


TK_KEYSYM_TO_CODE = _build_tk_keysyms()
