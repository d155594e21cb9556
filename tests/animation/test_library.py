import logging

import pytest

from bruteroom import config
from bruteroom.animation.clips import BRUTE_CLIPS, ClipDefinition
from bruteroom.animation.library import AnimationLibrary
from bruteroom.world.transform import Transform


@pytest.fixture
def loaded_library() -> AnimationLibrary:
    library = AnimationLibrary()
    library.load(BRUTE_CLIPS.values())
    return library


def test_empty_library_is_not_ready() -> None:
    library = AnimationLibrary()

    assert not library.loaded
    assert library.single_player() is None


def test_load_logs_and_records_the_asset(caplog: pytest.LogCaptureFixture) -> None:
    library = AnimationLibrary()
    with caplog.at_level(logging.INFO):
        library.load(BRUTE_CLIPS.values())

    assert library.loaded
    assert library.asset_name == config.CHARACTER_ASSET
    assert "Loaded 7 animation clips from brute.glb" in caplog.text


def test_clip_duration_reads_the_table(loaded_library: AnimationLibrary) -> None:
    assert loaded_library.clip_duration("TurnLeft") == 2.2
    assert loaded_library.clip_duration("RunForward") == 0.73


def test_clip_duration_of_unknown_clip_raises(loaded_library: AnimationLibrary) -> None:
    with pytest.raises(KeyError, match="not loaded"):
        loaded_library.clip_duration("Backflip")


def test_loaded_but_unspawned_is_not_ready(loaded_library: AnimationLibrary) -> None:
    assert loaded_library.single_player() is None


def test_single_player_after_spawn(loaded_library: AnimationLibrary) -> None:
    transform = Transform()
    player = loaded_library.spawn_player(transform)

    assert loaded_library.single_player() is player
    assert player.transform is transform
    assert loaded_library.players == (player,)


def test_spawn_before_load_raises() -> None:
    with pytest.raises(RuntimeError, match="before clips are loaded"):
        AnimationLibrary().spawn_player(Transform())


def test_more_than_one_player_is_an_error(loaded_library: AnimationLibrary) -> None:
    loaded_library.spawn_player(Transform())
    loaded_library.spawn_player(Transform())

    with pytest.raises(RuntimeError, match="exactly one"):
        loaded_library.single_player()


def test_later_loads_replace_definitions(loaded_library: AnimationLibrary) -> None:
    loaded_library.load([ClipDefinition("Attack", duration=3.0)], asset_name="alt.glb")

    assert loaded_library.clip_duration("Attack") == 3.0
    assert loaded_library.clip_duration("Idle") == 2.3
    assert loaded_library.asset_name == "alt.glb"
