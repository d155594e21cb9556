from unittest.mock import patch

import pytest

from bruteroom.util.clock import Clock


def test_clock_sync_calculates_delta_and_fps() -> None:
    times = iter([0.0, 0.1, 0.3])
    with patch("time.perf_counter", side_effect=lambda: next(times)):
        clock = Clock()
        dt1 = clock.sync()
        dt2 = clock.sync()

    assert dt1 == pytest.approx(0.1)
    assert dt2 == pytest.approx(0.2)
    assert clock.last_fps == pytest.approx(1 / dt2)
    assert clock.mean_fps == pytest.approx(1 / ((dt1 + dt2) / 2))


def test_clock_accumulates_elapsed_time_and_frames() -> None:
    times = iter([1.0, 1.25, 1.5, 2.0])
    with patch("time.perf_counter", side_effect=lambda: next(times)):
        clock = Clock()
        for _ in range(3):
            clock.tick()

    assert clock.elapsed == pytest.approx(1.0)
    assert clock.frame_count == 3
    assert clock.last_delta_time == pytest.approx(0.5)


def test_clock_never_reports_negative_delta() -> None:
    times = iter([5.0, 4.0])
    with patch("time.perf_counter", side_effect=lambda: next(times)):
        clock = Clock()
        dt = clock.tick()

    assert dt == 0
    assert clock.last_fps == 0


def test_clock_without_samples_reports_zero_fps() -> None:
    clock = Clock()

    assert clock.last_fps == 0
    assert clock.mean_fps == 0


def test_clock_keeps_only_the_configured_number_of_samples() -> None:
    times = iter([0.0, 1.0, 2.0, 3.0, 4.0])
    with patch("time.perf_counter", side_effect=lambda: next(times)):
        clock = Clock(sample_size=2)
        for _ in range(4):
            clock.tick()

    assert len(clock.time_samples) == 2
