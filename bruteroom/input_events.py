"""Backend-agnostic input event types.

Thin event types that decouple game code from the windowing backend. The
GLFW backend is the sole producer; the keyboard tracker consumes them.

Integer values for KeySym follow SDL3 so letter keys are lowercase ASCII
and navigation keys carry the 0x40000000 scancode mask.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Final


class Modifier(enum.IntFlag):
    """Keyboard modifier flags. Same integer values as SDL3."""

    NONE = 0x0000
    SHIFT = 0x0003
    CTRL = 0x00C0
    ALT = 0x0300


class KeySym(enum.IntEnum):
    """Keyboard key symbols. Same integer values as SDL3.

    Only the keys the demo reacts to are enumerated. The ``_missing_`` hook
    creates ad-hoc members for any other value so constructing
    ``KeySym(some_int)`` never raises.
    """

    UNKNOWN = 0

    RETURN = 13
    ESCAPE = 27
    SPACE = 32

    # Letters a-z (lowercase, matching SDL3 convention)
    # Not enumerated individually - use ``KeySym(ord("a"))`` or ``Keys``.

    RIGHT = 0x4000004F
    LEFT = 0x40000050
    DOWN = 0x40000051
    UP = 0x40000052

    @classmethod
    def _missing_(cls, value: object) -> KeySym | None:
        """Create an ad-hoc member for unrecognised key codes."""
        if not isinstance(value, int):
            return None
        obj = int.__new__(cls, value)
        obj._name_ = f"UNKNOWN_{value}"
        obj._value_ = value
        return obj


class Keys:
    """Named constants for the letter keys the controls use.

    Both QWERTY (W/A/S/D) and AZERTY (Z/Q/S/D) layouts are covered.
    """

    KEY_W: Final[KeySym] = KeySym(ord("w"))
    KEY_A: Final[KeySym] = KeySym(ord("a"))
    KEY_S: Final[KeySym] = KeySym(ord("s"))
    KEY_D: Final[KeySym] = KeySym(ord("d"))
    KEY_Z: Final[KeySym] = KeySym(ord("z"))
    KEY_Q: Final[KeySym] = KeySym(ord("q"))


# ---------------------------------------------------------------------------
# Event hierarchy
# ---------------------------------------------------------------------------


class InputEvent:
    """Base input event type. Used for isinstance checks and match/case."""


@dataclass
class KeyDown(InputEvent):
    """A keyboard key was pressed or repeated."""

    sym: KeySym
    mod: Modifier = Modifier.NONE
    repeat: bool = False
    scancode: int = 0


@dataclass
class KeyUp(InputEvent):
    """A keyboard key was released."""

    sym: KeySym
    mod: Modifier = Modifier.NONE
    scancode: int = 0
