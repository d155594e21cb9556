import pytest

from bruteroom import config
from bruteroom.animation.clips import BRUTE_CLIPS, ClipDefinition, get_clip_definition
from bruteroom.character.enums import ActionKind


def test_every_action_has_a_clip() -> None:
    for action in ActionKind:
        assert get_clip_definition(action.clip_id).clip_id == action.clip_id


@pytest.mark.parametrize(
    "action",
    [action for action in ActionKind if action.bounded],
)
def test_bounded_clips_outlast_the_transition_overlap(action: ActionKind) -> None:
    assert BRUTE_CLIPS[action.clip_id].duration > config.TRANSITION_OVERLAP


def test_only_runs_carry_root_velocity() -> None:
    moving = {clip.clip_id for clip in BRUTE_CLIPS.values() if clip.root_velocity}

    assert moving == {"RunForward", "RunBackward"}
    assert BRUTE_CLIPS["RunForward"].root_velocity > 0
    assert BRUTE_CLIPS["RunBackward"].root_velocity < 0


def test_unknown_clip_raises() -> None:
    with pytest.raises(KeyError):
        get_clip_definition("Dance")


@pytest.mark.parametrize("duration", [0.0, -1.0])
def test_non_positive_duration_is_rejected(duration: float) -> None:
    with pytest.raises(ValueError, match="positive duration"):
        ClipDefinition("Broken", duration=duration)
