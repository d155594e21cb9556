"""The character action state machine.

One ``update()`` runs per frame. Within a frame the steps always run in this
order, and each step may end the frame early:

1. Resolve the animation player. Until the character has spawned there is
   nothing to drive, so the frame is skipped without touching any state.
2. A stop edge returns the character to Idle at once, even in the middle of
   a turn or an attack.
3. The action timer advances. The frame it runs out, the character starts
   blending back to Idle; a turn additionally releases its rotation timer so
   the body rotates during that final blend.
4. A released rotation advances, turning the body a little each frame, then
   snaps to the exact canonical orientation when it finishes.
5. A new intent is classified and, if the character is free, started.

Timers advance by the measured frame delta, so clip playback and rotation
stay in step with real animation time regardless of frame rate.
"""

from __future__ import annotations

import logging
import math
from typing import Protocol

from bruteroom import config
from bruteroom.animation.player import AnimationPlayer
from bruteroom.character.enums import ActionKind, FacingDirection, Intent
from bruteroom.character.input_classifier import InputClassifier
from bruteroom.character.state import (
    CharacterState,
    Idle,
    RotationProgress,
    state_for_action,
)
from bruteroom.character.timers import ActionTimer
from bruteroom.events import (
    ActionEndedEvent,
    ActionEndReason,
    ActionStartedEvent,
    FacingChangedEvent,
    publish_event,
)
from bruteroom.input.keyboard import Keyboard
from bruteroom.types import ClipId, DeltaTime, Quat, Seconds
from bruteroom.world.transform import (
    Transform,
    quat_from_rotation_x,
    quat_from_rotation_y,
    quat_mul,
)

logger = logging.getLogger(__name__)


class ClipSource(Protocol):
    """What the controller needs from the animation library."""

    def clip_duration(self, clip_id: ClipId) -> Seconds: ...

    def single_player(self) -> AnimationPlayer | None: ...


def facing_rotation(facing: FacingDirection) -> Quat:
    """Canonical world rotation of the character when facing ``facing``."""
    return quat_mul(
        quat_from_rotation_y(facing.yaw), quat_from_rotation_x(config.RIG_TILT)
    )


class CharacterController:
    """Owns the ``CharacterState`` and turns input into clip commands."""

    def __init__(
        self,
        library: ClipSource,
        state: CharacterState | None = None,
        classifier: InputClassifier | None = None,
    ) -> None:
        self.library = library
        self.state = state if state is not None else CharacterState()
        self.classifier = classifier if classifier is not None else InputClassifier()

    def update(self, keyboard: Keyboard, delta_time: DeltaTime) -> None:
        """Run one frame of the state machine."""
        player = self.library.single_player()
        if player is None:
            return

        if self.classifier.is_stop(keyboard):
            self._stop(player)
            return

        if self._advance_action_timer(player, delta_time):
            return

        if self._advance_rotation(player, delta_time):
            return

        intent = self.classifier.classify(
            keyboard, busy=self.state.busy, ready=self.state.ready
        )
        self._start(intent, player)

    # ------------------------------------------------------------------
    # Frame steps
    # ------------------------------------------------------------------

    def _stop(self, player: AnimationPlayer) -> None:
        player.play_with_transition(
            ActionKind.IDLE.clip_id, config.STOP_BLEND
        ).repeat()
        if self.state.rotation is not None:
            # The facing was decided when the turn began; only the cosmetic
            # interpolation is cut short.
            self._snap_to_facing(player.transform)
        self.state.action_timer.finish()
        self._end_action("stopped")

    def _advance_action_timer(
        self, player: AnimationPlayer, delta_time: DeltaTime
    ) -> bool:
        """Advance the action timer. Returns True if the frame is consumed."""
        timer = self.state.action_timer
        if timer.tick(delta_time).just_finished:
            player.play_with_transition(
                ActionKind.IDLE.clip_id, config.TRANSITION_OVERLAP
            ).repeat()
            rotation = self.state.rotation
            if rotation is not None:
                rotation.timer.unpause()
                logger.debug(f"Rotating {rotation.turn.name} to {rotation.target.name}")
            else:
                self._end_action("completed")
            return True
        return not timer.finished

    def _advance_rotation(
        self, player: AnimationPlayer, delta_time: DeltaTime
    ) -> bool:
        """Advance a released rotation. Returns True if the frame is consumed."""
        rotation = self.state.rotation
        if rotation is None:
            return False
        if rotation.timer.paused:
            return True

        if rotation.timer.tick(delta_time).just_finished:
            self._snap_to_facing(player.transform)
            self._end_action("completed")
            return False

        fraction = delta_time / rotation.timer.duration
        player.transform.rotate_y(rotation.turn.sign * (math.pi / 2) * fraction)
        return True

    def _start(self, intent: Intent, player: AnimationPlayer) -> None:
        action = intent.action
        if action is None:
            return

        if action.looping:
            player.play_with_transition(
                action.clip_id, config.LOCOMOTION_BLEND
            ).enable_root_motion(config.ROOT_MOTION_BONE_PATH).repeat()
            self._set_action(action)
            return

        # Validate before touching the player so a bad clip leaves no trace.
        duration = self._bounded_duration(action)
        player.play_with_transition(action.clip_id, config.ONE_SHOT_BLEND)
        self.state.action_timer = ActionTimer(duration)

        rotation = None
        if action.turn is not None:
            previous = self.state.facing
            self.state.facing = previous.turned(action.turn)
            rotation = RotationProgress(turn=action.turn, target=self.state.facing)
            publish_event(FacingChangedEvent(previous, self.state.facing))
        self._set_action(action, rotation)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _bounded_duration(self, action: ActionKind) -> Seconds:
        """How long a bounded action holds before blending back to Idle.

        Raises:
            ValueError: If the clip is not longer than the transition
                overlap, which means the asset was authored wrong.
        """
        clip_duration = self.library.clip_duration(action.clip_id)
        duration = clip_duration - config.TRANSITION_OVERLAP
        if duration <= 0:
            raise ValueError(
                f"Clip {action.clip_id!r} lasts {clip_duration}s, which is not "
                f"longer than the {config.TRANSITION_OVERLAP}s transition overlap"
            )
        return duration

    def _snap_to_facing(self, transform: Transform) -> None:
        transform.rotation = facing_rotation(self.state.facing)

    def _set_action(
        self, action: ActionKind, rotation: RotationProgress | None = None
    ) -> None:
        self.state.action_state = state_for_action(action, rotation)
        self.state.validate()
        logger.debug(f"Started {action.name} facing {self.state.facing.name}")
        publish_event(ActionStartedEvent(action, self.state.facing))

    def _end_action(self, reason: ActionEndReason) -> None:
        previous = self.state.current_action
        self.state.action_state = Idle()
        self.state.validate()
        if previous is not ActionKind.IDLE:
            logger.debug(f"{previous.name} {reason}, back to IDLE")
            publish_event(ActionEndedEvent(previous, reason))
