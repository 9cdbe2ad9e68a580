# Frame pacing from a microsecond performance counter.
from __future__ import annotations

import time
from typing import Callable


def get_microsec_timestamp() -> int:
    return time.perf_counter_ns() // 1000


class FrameTimer:
    """Reports when one frame period has elapsed since the last reported frame."""

    def __init__(self, fps: int = 60, clock: Callable[[], int] = get_microsec_timestamp) -> None:
        if fps <= 0:
            raise ValueError("fps must be > 0")
        self.frame_period_us = int(1e6 / fps)
        self.clock = clock
        self.prev_time = clock()
        self.elapsed_frames = 0

    def frame_due(self) -> bool:
        now = self.clock()
        if now - self.prev_time > self.frame_period_us:
            self.prev_time = now
            self.elapsed_frames += 1
            return True
        return False

    def ms_until_next_frame(self) -> int:
        """Delay for the next poll, never less than 1 ms."""
        remaining_us = self.frame_period_us - (self.clock() - self.prev_time)
        return max(1, remaining_us // 1000 + 1)
