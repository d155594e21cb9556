"""Enumerations for the character control state machine."""

from __future__ import annotations

import math
from enum import Enum, auto

from bruteroom.types import ClipId


class TurnDirection(Enum):
    """Which way a 90° turn goes."""

    LEFT = auto()
    RIGHT = auto()

    @property
    def sign(self) -> int:
        """+1 for a left (counter-clockwise about +Y) turn, -1 for right."""
        return 1 if self is TurnDirection.LEFT else -1


class FacingDirection(Enum):
    """The four cardinal directions the character can face.

    Members are declared in left-turn order, so a left turn is one step
    forward through the declaration and a right turn is one step back.
    """

    NORTH = 0
    WEST = 1
    SOUTH = 2
    EAST = 3

    def turned(self, turn: TurnDirection, steps: int = 1) -> FacingDirection:
        """Return the facing reached after ``steps`` turns in ``turn`` direction."""
        return FacingDirection((self.value + turn.sign * steps) % 4)

    @property
    def yaw(self) -> float:
        """Canonical rotation about +Y in radians (North 0, West π/2, ...)."""
        return self.value * math.pi / 2


class ActionKind(Enum):
    """Every action the character can perform.

    Each action plays exactly one clip. Looping actions run until something
    replaces them; bounded actions play once and are timed by the
    controller's action timer.
    """

    IDLE = ("Idle", True)
    RUN_FORWARD = ("RunForward", True)
    RUN_BACKWARD = ("RunBackward", True)
    TURN_LEFT = ("TurnLeft", False)
    TURN_RIGHT = ("TurnRight", False)
    ATTACK = ("Attack", False)
    JUMP = ("Jump", False)

    clip_id: ClipId
    looping: bool

    def __init__(self, clip_id: ClipId, looping: bool) -> None:
        self.clip_id = clip_id
        self.looping = looping

    @property
    def bounded(self) -> bool:
        """True for one-play actions guarded by the action timer."""
        return not self.looping

    @property
    def turn(self) -> TurnDirection | None:
        match self:
            case ActionKind.TURN_LEFT:
                return TurnDirection.LEFT
            case ActionKind.TURN_RIGHT:
                return TurnDirection.RIGHT
            case _:
                return None


class Intent(Enum):
    """Logical intent produced from one frame's key edges."""

    NONE = auto()
    STOP = auto()
    MOVE_FORWARD = auto()
    MOVE_BACKWARD = auto()
    TURN_LEFT = auto()
    TURN_RIGHT = auto()
    ATTACK = auto()
    JUMP = auto()

    @property
    def action(self) -> ActionKind | None:
        """The action this intent starts, or None for NONE/STOP."""
        return _INTENT_ACTIONS.get(self)


_INTENT_ACTIONS = {
    Intent.MOVE_FORWARD: ActionKind.RUN_FORWARD,
    Intent.MOVE_BACKWARD: ActionKind.RUN_BACKWARD,
    Intent.TURN_LEFT: ActionKind.TURN_LEFT,
    Intent.TURN_RIGHT: ActionKind.TURN_RIGHT,
    Intent.ATTACK: ActionKind.ATTACK,
    Intent.JUMP: ActionKind.JUMP,
}
