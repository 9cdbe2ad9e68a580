import pytest

from keyboard_input import InputTracker, KeySamplingError


class FakeKeys:
    """Raw key source driven by the test: codes in `held` read as down."""

    def __init__(self):
        self.held = set()
        self.calls = 0
        self.fail_on = None

    def is_key_down(self, code):
        self.calls += 1
        if code == self.fail_on:
            raise KeySamplingError(f"cannot read key {code}")
        return code in self.held


@pytest.fixture
def keys():
    return FakeKeys()


@pytest.fixture
def tracker(keys):
    return InputTracker(keys)
