"""Frame timing for the host loop."""

import statistics
import time
from collections import deque

from bruteroom import config
from bruteroom.types import DeltaTime


class Clock:
    """Measure frame deltas, total running time and framerate.

    The character controller advances its timers by ``tick()``'s delta, so
    animation timing follows the wall clock rather than the frame count.
    """

    def __init__(self, sample_size: int = config.FPS_SAMPLE_SIZE) -> None:
        self.last_time = time.perf_counter()
        self.last_delta_time: DeltaTime = DeltaTime(0.0)
        self.elapsed = 0.0
        self.frame_count = 0
        self.time_samples: deque[float] = deque(maxlen=sample_size)
        self.drift_time = 0.0

    def tick(self) -> DeltaTime:
        """Measure the time since the last tick and return it."""
        current_time = time.perf_counter()
        delta_time = DeltaTime(max(0, current_time - self.last_time))
        self.last_time = current_time
        self.last_delta_time = delta_time
        self.elapsed += delta_time
        self.frame_count += 1
        self.time_samples.append(delta_time)
        return delta_time

    def sync(self, fps: float | None = None) -> DeltaTime:
        """
        Sleep until the next frame is due at ``fps``, then tick.

        With no ``fps`` (or VSync doing the pacing) this is just ``tick()``.
        """
        if fps is not None and fps > 0:
            desired_frame_time = 1 / fps
            target_time = self.last_time + desired_frame_time - self.drift_time
            sleep_time = max(0, target_time - time.perf_counter() - 0.001)
            if sleep_time:
                time.sleep(sleep_time)
            # busy-wait for the remaining time
            while (drift_time := time.perf_counter() - target_time) < 0:
                pass
            self.drift_time = min(drift_time, desired_frame_time)

        return self.tick()

    @property
    def last_fps(self) -> float:
        """The FPS of the most recent frame."""
        if not self.time_samples or self.time_samples[-1] == 0:
            return 0
        return 1 / self.time_samples[-1]

    @property
    def mean_fps(self) -> float:
        """The FPS of the sampled frames overall."""
        if not self.time_samples:
            return 0
        try:
            return 1 / statistics.fmean(self.time_samples)
        except ZeroDivisionError:
            return 0
