from types import SimpleNamespace

import pytest

from keyboard_input import InputTracker, KeySamplingError
from platform_input import TkKeySource
from virtual_keycodes import VK_ESCAPE, VK_LEFT


def event(keysym):
    return SimpleNamespace(keysym=keysym)


class FakeWidget:
    def __init__(self):
        self.bindings = {}

    def bind(self, sequence, func, add=None):
        self.bindings[sequence] = func


def test_press_and_release_track_held_codes():
    source = TkKeySource()
    source.on_key_press(event("Left"))
    source.on_key_press(event("a"))
    assert source.is_key_down(VK_LEFT)
    assert source.is_key_down(ord("A"))

    source.on_key_release(event("Left"))
    assert not source.is_key_down(VK_LEFT)


def test_unknown_keysyms_are_ignored():
    source = TkKeySource()
    source.on_key_press(event("F13"))
    assert source.held == set()


def test_bind_registers_handlers_and_focus_loss_releases():
    source = TkKeySource()
    widget = FakeWidget()
    source.bind(widget)
    assert set(widget.bindings) == {"<KeyPress>", "<KeyRelease>", "<FocusOut>"}

    widget.bindings["<KeyPress>"](event("Escape"))
    assert source.is_key_down(VK_ESCAPE)
    widget.bindings["<FocusOut>"](event(""))
    assert not source.is_key_down(VK_ESCAPE)


def test_drives_tracker_edges():
    source = TkKeySource()
    tracker = InputTracker(source)
    source.on_key_press(event("Escape"))
    tracker.update()
    assert tracker.key_pressed_now(VK_ESCAPE)
    tracker.update()
    assert not tracker.key_pressed_now(VK_ESCAPE)


def test_closed_source_reports_sampling_error():
    source = TkKeySource()
    tracker = InputTracker(source)
    source.close()
    with pytest.raises(KeySamplingError):
        tracker.update()


def test_out_of_range_code_raises():
    with pytest.raises(IndexError):
        TkKeySource().is_key_down(256)
