import pytest

from bruteroom.character.timers import ActionTimer
from bruteroom.types import DeltaTime


def test_timer_reports_just_finished_on_exactly_one_tick() -> None:
    timer = ActionTimer(0.5)

    assert not timer.tick(DeltaTime(0.25)).just_finished
    assert timer.tick(DeltaTime(0.25)).just_finished
    assert timer.finished
    assert not timer.tick(DeltaTime(0.25)).just_finished


def test_elapsed_is_clamped_to_duration() -> None:
    timer = ActionTimer(1.0)
    timer.tick(DeltaTime(3.0))

    assert timer.elapsed == 1.0
    assert timer.remaining == 0.0
    assert timer.just_finished


def test_zero_duration_timer_starts_finished() -> None:
    timer = ActionTimer()

    assert timer.finished
    assert not timer.tick(DeltaTime(0.1)).just_finished


def test_paused_timer_ignores_ticks_until_unpaused() -> None:
    timer = ActionTimer(1.0, paused=True)
    timer.tick(DeltaTime(5.0))
    assert timer.elapsed == 0.0
    assert not timer.finished

    timer.unpause()
    timer.tick(DeltaTime(0.25))
    assert timer.elapsed == 0.25

    timer.pause()
    timer.tick(DeltaTime(0.25))
    assert timer.elapsed == 0.25


def test_negative_delta_does_not_rewind() -> None:
    timer = ActionTimer(1.0)
    timer.tick(DeltaTime(0.5))
    timer.tick(DeltaTime(-0.25))

    assert timer.elapsed == 0.5


def test_finish_jumps_to_end_without_just_finished() -> None:
    timer = ActionTimer(2.0)
    timer.tick(DeltaTime(0.5))

    timer.finish()

    assert timer.finished
    assert not timer.just_finished
    assert not timer.tick(DeltaTime(0.1)).just_finished


def test_negative_duration_is_rejected() -> None:
    with pytest.raises(ValueError, match="negative"):
        ActionTimer(-1.0)


def test_repr_shows_progress_and_state() -> None:
    timer = ActionTimer(1.0, paused=True)

    assert repr(timer) == "ActionTimer(0.000/1.000s, paused)"
