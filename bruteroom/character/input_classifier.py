"""Turns one frame of key edges into at most one logical intent.

Precedence, highest first:

1. Releasing a forward or backward key is a STOP, whatever else is going on.
   Stop is never blocked so locomotion cannot get stuck.
2. While the character is busy, every other edge is swallowed.
3. While the previous action's timer or rotation is still running, every
   other edge is swallowed.
4. Otherwise the first press edge wins, checked in this order: forward,
   backward, turn left, turn right, attack, jump. Movement keys come first
   because they are held; turns come before attack and jump because
   correcting direction is the more common action.
"""

from __future__ import annotations

from bruteroom.character.enums import Intent
from bruteroom.input.keyboard import Keyboard
from bruteroom.input_events import KeySym, Keys

FORWARD_KEYS = frozenset({KeySym.UP, Keys.KEY_Z, Keys.KEY_W})
BACKWARD_KEYS = frozenset({KeySym.DOWN, Keys.KEY_S})
TURN_LEFT_KEYS = frozenset({KeySym.LEFT, Keys.KEY_A, Keys.KEY_Q})
TURN_RIGHT_KEYS = frozenset({KeySym.RIGHT, Keys.KEY_D})
ATTACK_KEYS = frozenset({KeySym.SPACE})
JUMP_KEYS = frozenset({KeySym.RETURN})

STOP_KEYS = FORWARD_KEYS | BACKWARD_KEYS

# Checked in order; the first pressed group wins.
PRESS_BINDINGS: tuple[tuple[frozenset[KeySym], Intent], ...] = (
    (FORWARD_KEYS, Intent.MOVE_FORWARD),
    (BACKWARD_KEYS, Intent.MOVE_BACKWARD),
    (TURN_LEFT_KEYS, Intent.TURN_LEFT),
    (TURN_RIGHT_KEYS, Intent.TURN_RIGHT),
    (ATTACK_KEYS, Intent.ATTACK),
    (JUMP_KEYS, Intent.JUMP),
)


class InputClassifier:
    """Stateless mapping from key edges to an ``Intent``."""

    def is_stop(self, keyboard: Keyboard) -> bool:
        return keyboard.any_just_released(STOP_KEYS)

    def press_intent(self, keyboard: Keyboard) -> Intent:
        """The highest-priority press edge this frame, ignoring any locks."""
        for keys, intent in PRESS_BINDINGS:
            if keyboard.any_just_pressed(keys):
                return intent
        return Intent.NONE

    def classify(self, keyboard: Keyboard, *, busy: bool, ready: bool) -> Intent:
        """Apply the full precedence.

        Args:
            keyboard: Key edges for the current frame.
            busy: Whether an action is in progress.
            ready: Whether the action timer and any rotation have finished.
        """
        if self.is_stop(keyboard):
            return Intent.STOP
        if busy or not ready:
            return Intent.NONE
        return self.press_intent(keyboard)
