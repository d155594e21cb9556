"""Countdown timer used for action gating and turn rotation."""

from __future__ import annotations

from bruteroom.types import DeltaTime, Seconds


class ActionTimer:
    """A one-shot countdown advanced by real frame time.

    ``elapsed`` never exceeds ``duration``. The timer is finished once
    ``elapsed`` reaches ``duration``, and ``just_finished`` is true only for
    the single ``tick()`` that made it so. A paused timer ignores ticks.

    A zero-duration timer is finished from construction and never reports
    ``just_finished``; this is what an idle character holds.
    """

    def __init__(self, duration: Seconds = 0.0, *, paused: bool = False) -> None:
        if duration < 0:
            raise ValueError(f"Timer duration must not be negative, got {duration}")
        self.duration = duration
        self.elapsed = 0.0
        self.paused = paused
        self._just_finished = False

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    @property
    def just_finished(self) -> bool:
        return self._just_finished

    @property
    def remaining(self) -> Seconds:
        return self.duration - self.elapsed

    def tick(self, delta_time: DeltaTime) -> ActionTimer:
        """Advance by ``delta_time`` and return self so callers can chain
        ``timer.tick(dt).just_finished``."""
        was_finished = self.finished
        if not self.paused and not was_finished:
            self.elapsed = min(self.duration, self.elapsed + max(0.0, delta_time))
        self._just_finished = not was_finished and self.finished
        return self

    def pause(self) -> None:
        self.paused = True

    def unpause(self) -> None:
        self.paused = False

    def finish(self) -> None:
        """Jump to the end without reporting ``just_finished``."""
        self.elapsed = self.duration
        self._just_finished = False

    def __repr__(self) -> str:
        state = "paused" if self.paused else "running"
        return f"ActionTimer({self.elapsed:.3f}/{self.duration:.3f}s, {state})"
