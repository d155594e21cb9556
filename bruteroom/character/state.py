"""The character's action state.

The current action is a tagged union (``ActionState``) rather than a set of
independent flags. Each variant carries only the data that makes sense for
it, so combinations like "rotating while idle" cannot be built:

- ``Idle``: standing, accepts new actions once the action timer allows.
- ``Locomoting``: a looping run clip with root motion; runs until stopped.
- ``Turning``: a bounded turn clip plus the rotation it drives.
- ``OneShot``: a bounded attack or jump clip.

``CharacterState`` is the single aggregate the controller owns. It is plain
data so it can be built and inspected in tests without a running host loop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from bruteroom import config
from bruteroom.character.enums import ActionKind, FacingDirection, TurnDirection
from bruteroom.character.timers import ActionTimer

_LOCOMOTION_ACTIONS = frozenset({ActionKind.RUN_FORWARD, ActionKind.RUN_BACKWARD})
_ONE_SHOT_ACTIONS = frozenset({ActionKind.ATTACK, ActionKind.JUMP})


@dataclass
class RotationProgress:
    """A turn's visual rotation.

    Attributes:
        turn: Which way the body rotates.
        target: The facing the turn arrives at. Already stored in
            ``CharacterState.facing`` when the turn starts.
        timer: Runs for ``TRANSITION_OVERLAP`` seconds. Created paused and
            released when the turn's action timer finishes.
    """

    turn: TurnDirection
    target: FacingDirection
    timer: ActionTimer = field(
        default_factory=lambda: ActionTimer(config.TRANSITION_OVERLAP, paused=True)
    )

    @property
    def rotating(self) -> bool:
        """True while the body is visibly turning."""
        return not self.timer.paused and not self.timer.finished


@dataclass(frozen=True)
class Idle:
    @property
    def action(self) -> ActionKind:
        return ActionKind.IDLE


@dataclass(frozen=True)
class Locomoting:
    action: ActionKind

    def __post_init__(self) -> None:
        if self.action not in _LOCOMOTION_ACTIONS:
            raise ValueError(f"{self.action.name} is not a locomotion action")


@dataclass(frozen=True)
class Turning:
    rotation: RotationProgress

    @property
    def action(self) -> ActionKind:
        if self.rotation.turn is TurnDirection.LEFT:
            return ActionKind.TURN_LEFT
        return ActionKind.TURN_RIGHT


@dataclass(frozen=True)
class OneShot:
    action: ActionKind

    def __post_init__(self) -> None:
        if self.action not in _ONE_SHOT_ACTIONS:
            raise ValueError(f"{self.action.name} is not a one-shot action")


ActionState: TypeAlias = Idle | Locomoting | Turning | OneShot


def state_for_action(
    action: ActionKind, rotation: RotationProgress | None = None
) -> ActionState:
    """Build the ``ActionState`` variant that holds ``action``.

    Raises:
        ValueError: If a turn is given without its rotation, or a rotation
            is given for anything but the matching turn.
    """
    if action.turn is not None:
        if rotation is None:
            raise ValueError(f"{action.name} requires a rotation")
        if rotation.turn is not action.turn:
            raise ValueError(
                f"{action.name} cannot carry a {rotation.turn.name} rotation"
            )
        return Turning(rotation)
    if rotation is not None:
        raise ValueError(f"{action.name} cannot carry a rotation")
    if action is ActionKind.IDLE:
        return Idle()
    if action in _LOCOMOTION_ACTIONS:
        return Locomoting(action)
    return OneShot(action)


@dataclass
class CharacterState:
    """Everything the controller remembers between frames.

    ``busy`` is derived from the action state: it is true for every action
    except Idle, and only a stop edge or the end of a bounded action clears
    it.
    """

    action_state: ActionState = field(default_factory=Idle)
    facing: FacingDirection = FacingDirection.NORTH
    action_timer: ActionTimer = field(default_factory=ActionTimer)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check the cross-field invariants.

        Raises:
            ValueError: If a looping or idle action holds a running action
                timer, or a turn's target disagrees with the facing.
        """
        bounded = isinstance(self.action_state, Turning | OneShot)
        if not bounded and not self.action_timer.finished:
            raise ValueError(
                f"{self.current_action.name} cannot hold a running action timer"
            )
        if isinstance(self.action_state, Turning):
            target = self.action_state.rotation.target
            if target is not self.facing:
                raise ValueError(
                    f"Turn targets {target.name} but facing is {self.facing.name}"
                )

    @property
    def current_action(self) -> ActionKind:
        return self.action_state.action

    @property
    def busy(self) -> bool:
        return self.current_action is not ActionKind.IDLE

    @property
    def rotation(self) -> RotationProgress | None:
        if isinstance(self.action_state, Turning):
            return self.action_state.rotation
        return None

    @property
    def ready(self) -> bool:
        """True when a new action may start: nothing is timing or rotating."""
        return self.action_timer.finished and self.rotation is None
