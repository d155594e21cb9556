from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from bruteroom.character.controller import CharacterController, facing_rotation
from bruteroom.character.enums import ActionKind, FacingDirection
from bruteroom.input.keyboard import Keyboard
from bruteroom.input_events import KeySym
from bruteroom.types import BonePath, ClipId, DeltaTime, Seconds
from bruteroom.world.transform import Transform


@dataclass
class PlayCommand:
    """One call made on the recording player."""

    clip_id: ClipId
    blend: Seconds | None  # None for play_looping
    repeat: bool = False
    root_motion: BonePath | None = None


class RecordingHandle:
    def __init__(self, command: PlayCommand) -> None:
        self.command = command

    def repeat(self) -> RecordingHandle:
        self.command.repeat = True
        return self

    def enable_root_motion(self, bone_path: BonePath) -> RecordingHandle:
        self.command.root_motion = tuple(bone_path)
        return self


@dataclass
class RecordingPlayer:
    """Animation player that only remembers what it was asked to play."""

    transform: Transform = field(
        default_factory=lambda: Transform.from_rotation(
            facing_rotation(FacingDirection.NORTH)
        )
    )
    commands: list[PlayCommand] = field(default_factory=list)

    def play_looping(self, clip_id: ClipId) -> RecordingHandle:
        self.commands.append(PlayCommand(clip_id, None, repeat=True))
        return RecordingHandle(self.commands[-1])

    def play_with_transition(
        self, clip_id: ClipId, blend_seconds: Seconds
    ) -> RecordingHandle:
        self.commands.append(PlayCommand(clip_id, blend_seconds))
        return RecordingHandle(self.commands[-1])

    @property
    def last(self) -> PlayCommand:
        return self.commands[-1]


DEFAULT_TEST_DURATIONS: dict[ActionKind, Seconds] = {
    ActionKind.IDLE: 2.0,
    ActionKind.RUN_FORWARD: 0.75,
    ActionKind.RUN_BACKWARD: 0.75,
    ActionKind.TURN_LEFT: 2.5,
    ActionKind.TURN_RIGHT: 2.5,
    ActionKind.ATTACK: 1.5,
    ActionKind.JUMP: 2.0,
}


class FakeLibrary:
    """Clip durations plus at most one recording player."""

    def __init__(
        self,
        durations: dict[ActionKind, Seconds] | None = None,
        player: RecordingPlayer | None = None,
    ) -> None:
        merged = dict(DEFAULT_TEST_DURATIONS)
        merged.update(durations or {})
        self.durations = {kind.clip_id: d for kind, d in merged.items()}
        self.player = player

    def clip_duration(self, clip_id: ClipId) -> Seconds:
        return self.durations[clip_id]

    def single_player(self) -> RecordingPlayer | None:
        return self.player


def step(
    controller: CharacterController,
    keyboard: Keyboard,
    dt: float = 0.0,
    *,
    press: Iterable[KeySym] = (),
    release: Iterable[KeySym] = (),
) -> None:
    """Run one frame with the given key edges."""
    keyboard.begin_frame()
    for sym in release:
        keyboard.release(sym)
    for sym in press:
        keyboard.press(sym)
    controller.update(keyboard, DeltaTime(dt))


def run_for(
    controller: CharacterController,
    keyboard: Keyboard,
    seconds: float,
    dt: float = 0.125,
) -> None:
    """Run idle frames of ``dt`` until ``seconds`` have passed.

    ``seconds`` should be a multiple of ``dt``; the defaults use binary
    fractions so accumulated time is exact.
    """
    frames = round(seconds / dt)
    for _ in range(frames):
        step(controller, keyboard, dt)


def tap(controller: CharacterController, keyboard: Keyboard, key: KeySym) -> None:
    """Press and release ``key`` over two zero-length frames."""
    step(controller, keyboard, press=[key])
    step(controller, keyboard, release=[key])
