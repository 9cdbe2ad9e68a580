import pytest

from timing import FrameTimer, get_microsec_timestamp


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


def test_frame_due_only_after_a_full_period():
    clock = FakeClock()
    timer = FrameTimer(fps=60, clock=clock)
    assert timer.frame_period_us == 16666

    clock.now = 16666
    assert not timer.frame_due()
    clock.now = 16667
    assert timer.frame_due()
    assert timer.elapsed_frames == 1
    assert not timer.frame_due()


def test_ms_until_next_frame_is_at_least_one():
    clock = FakeClock()
    timer = FrameTimer(fps=60, clock=clock)
    assert timer.ms_until_next_frame() == 17
    clock.now = 100_000
    assert timer.ms_until_next_frame() == 1


def test_rejects_non_positive_fps():
    with pytest.raises(ValueError):
        FrameTimer(fps=0)


def test_timestamp_is_monotonic():
    first = get_microsec_timestamp()
    assert get_microsec_timestamp() >= first
