import numpy as np
import pytest

from keyboard_input import (
    DOWN_STATES,
    UP_STATES,
    KeySamplingError,
    KeyState,
    any_key_pressed,
    key_is_down,
    key_is_up,
    next_key_state,
)
from virtual_keycodes import NON_KEYBOARD_CODES, NUM_KEY_CODES, VK_ESCAPE, VK_LBUTTON, VK_SPACE


@pytest.mark.parametrize(
    "prev, raw_down, expected",
    [
        (KeyState.RELEASED, True, KeyState.JUST_PRESSED),
        (KeyState.RELEASED, False, KeyState.RELEASED),
        (KeyState.JUST_RELEASED, True, KeyState.JUST_PRESSED),
        (KeyState.JUST_RELEASED, False, KeyState.RELEASED),
        (KeyState.PRESSED, True, KeyState.PRESSED),
        (KeyState.PRESSED, False, KeyState.JUST_RELEASED),
        (KeyState.JUST_PRESSED, True, KeyState.PRESSED),
        (KeyState.JUST_PRESSED, False, KeyState.JUST_RELEASED),
    ],
)
def test_transition_table(prev, raw_down, expected):
    assert next_key_state(prev, raw_down) == expected


def test_up_and_down_groups_are_complementary():
    for state in KeyState:
        assert key_is_up(state) != key_is_down(state)
    assert UP_STATES | DOWN_STATES == set(KeyState)


def test_all_keys_start_released(tracker):
    assert np.all(tracker.states() == KeyState.RELEASED)
    assert tracker.key_is_up(VK_SPACE)


def test_press_hold_release_sequence(tracker, keys):
    seen = []
    for raw_down in (True, True, False, False):
        keys.held = {VK_SPACE} if raw_down else set()
        tracker.update()
        seen.append(tracker.state(VK_SPACE))

    assert seen == [
        KeyState.JUST_PRESSED,
        KeyState.PRESSED,
        KeyState.JUST_RELEASED,
        KeyState.RELEASED,
    ]


def test_edges_are_reported_exactly_once(tracker, keys):
    keys.held = {VK_SPACE}
    pressed_ticks = 0
    for _ in range(10):
        tracker.update()
        pressed_ticks += tracker.key_pressed_now(VK_SPACE)
        assert tracker.key_is_down(VK_SPACE)
    assert pressed_ticks == 1

    keys.held = set()
    released_ticks = 0
    for _ in range(10):
        tracker.update()
        released_ticks += tracker.key_released_now(VK_SPACE)
        assert tracker.key_is_up(VK_SPACE)
    assert released_ticks == 1


def test_update_agrees_with_scalar_transition(tracker, keys):
    rng = np.random.default_rng(7)
    expected = [KeyState.RELEASED] * NUM_KEY_CODES
    for _ in range(20):
        keys.held = {int(code) for code in np.flatnonzero(rng.random(NUM_KEY_CODES) < 0.5)}
        tracker.update()
        expected = [next_key_state(prev, code in keys.held) for code, prev in enumerate(expected)]
        assert [tracker.state(code) for code in range(NUM_KEY_CODES)] == expected


def test_update_samples_every_code_once(tracker, keys):
    tracker.update()
    assert keys.calls == NUM_KEY_CODES


def test_sampling_error_propagates_and_keeps_previous_states(tracker, keys):
    keys.held = {VK_SPACE}
    tracker.update()
    before = tracker.states()

    keys.fail_on = VK_ESCAPE
    with pytest.raises(KeySamplingError):
        tracker.update()
    assert np.array_equal(tracker.states(), before)
    assert isinstance(KeySamplingError("x"), OSError)


@pytest.mark.parametrize("code", [-1, NUM_KEY_CODES, 1000, "a", 1.5, True])
def test_out_of_range_codes_raise(tracker, code):
    with pytest.raises(IndexError):
        tracker.key_pressed_now(code)


def test_states_snapshot_is_read_only(tracker):
    snapshot = tracker.states()
    with pytest.raises(ValueError):
        snapshot[0] = KeyState.PRESSED


def test_any_key_pressed_ignores_excluded_codes(tracker, keys):
    keys.held = set(NON_KEYBOARD_CODES)
    tracker.update()
    assert tracker.key_pressed_now(VK_LBUTTON)
    assert not any_key_pressed(tracker)

    keys.held = set(NON_KEYBOARD_CODES) | {VK_SPACE}
    tracker.update()
    assert any_key_pressed(tracker)
    assert not any_key_pressed(tracker, excluded_codes={VK_SPACE})
    assert any_key_pressed(tracker, excluded_codes=())


def test_any_key_pressed_only_counts_fresh_presses(tracker, keys):
    keys.held = {VK_SPACE}
    tracker.update()
    tracker.update()
    assert tracker.key_is_down(VK_SPACE)
    assert not any_key_pressed(tracker)
