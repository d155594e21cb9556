"""Clip playback for the character.

``AnimationPlayer`` is the interface the character controller talks to.
``ClipPlayer`` is the in-process implementation: it tracks which clip is
playing, the cross-fade from the previous clip, looping, and root motion.
It does not pose a skeleton; rendering is out of scope.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import numpy as np

from bruteroom.animation.clips import ClipDefinition
from bruteroom.types import BonePath, ClipId, DeltaTime, Seconds
from bruteroom.world.transform import Transform

logger = logging.getLogger(__name__)


class PlaybackHandle(Protocol):
    """Returned by the play methods so options can be chained."""

    def repeat(self) -> PlaybackHandle: ...

    def enable_root_motion(self, bone_path: BonePath) -> PlaybackHandle: ...


class AnimationPlayer(Protocol):
    """
    Defines the structural interface for the thing that plays clips on the
    character.

    The player is attached to the character, so it also exposes the
    character's world transform for the controller's turn rotation.
    """

    transform: Transform

    def play_looping(self, clip_id: ClipId) -> PlaybackHandle:
        """Cut to ``clip_id`` immediately and loop it."""
        ...

    def play_with_transition(
        self, clip_id: ClipId, blend_seconds: Seconds
    ) -> PlaybackHandle:
        """Cross-fade to ``clip_id`` over ``blend_seconds``. Plays once unless
        the returned handle's ``repeat()`` is called."""
        ...


class ClipPlaybackHandle:
    def __init__(self, player: ClipPlayer) -> None:
        self._player = player

    def repeat(self) -> ClipPlaybackHandle:
        self._player.repeating = True
        return self

    def enable_root_motion(self, bone_path: BonePath) -> ClipPlaybackHandle:
        self._player.root_motion_bone = tuple(bone_path)
        return self


class ClipPlayer:
    """Plays clips from a clip table on one character.

    Attributes:
        transform: The character's world transform.
        current_clip: The clip being faded in (or fully playing).
        previous_clip: The clip being faded out, if a transition is running.
        blend_duration: Length of the running transition.
        elapsed: Playback time within ``current_clip``.
        repeating: Whether ``current_clip`` loops.
        root_motion_bone: Bone whose motion drives the transform, or None.
    """

    def __init__(
        self, clips: Mapping[ClipId, ClipDefinition], transform: Transform
    ) -> None:
        self._clips = clips
        self.transform = transform
        self.current_clip: ClipId | None = None
        self.previous_clip: ClipId | None = None
        self.blend_duration: Seconds = 0.0
        self.blend_elapsed: Seconds = 0.0
        self.elapsed: Seconds = 0.0
        self.repeating = False
        self.root_motion_bone: BonePath | None = None

    def play_looping(self, clip_id: ClipId) -> ClipPlaybackHandle:
        return self.play_with_transition(clip_id, 0.0).repeat()

    def play_with_transition(
        self, clip_id: ClipId, blend_seconds: Seconds
    ) -> ClipPlaybackHandle:
        if clip_id not in self._clips:
            raise KeyError(f"Unknown animation clip: {clip_id}")
        if blend_seconds < 0:
            raise ValueError(f"Blend must not be negative, got {blend_seconds}")
        logger.debug(f"Playing {clip_id} (blend {blend_seconds:.2f}s)")
        self.previous_clip = self.current_clip if blend_seconds > 0 else None
        self.current_clip = clip_id
        self.blend_duration = blend_seconds
        self.blend_elapsed = 0.0
        self.elapsed = 0.0
        self.repeating = False
        self.root_motion_bone = None
        return ClipPlaybackHandle(self)

    @property
    def blend_weight(self) -> float:
        """Weight of ``current_clip`` in the cross-fade, 0.0 to 1.0."""
        if self.blend_duration <= 0:
            return 1.0
        return min(1.0, self.blend_elapsed / self.blend_duration)

    @property
    def finished(self) -> bool:
        """True once a non-repeating clip has played to its end."""
        if self.current_clip is None or self.repeating:
            return False
        return self.elapsed >= self._clips[self.current_clip].duration

    def advance(self, delta_time: DeltaTime) -> None:
        """Advance playback and apply root motion for one frame."""
        if self.current_clip is None:
            return
        clip = self._clips[self.current_clip]

        self.blend_elapsed += delta_time
        if self.blend_weight >= 1.0:
            self.previous_clip = None

        self.elapsed += delta_time
        if self.repeating:
            self.elapsed %= clip.duration
        else:
            self.elapsed = min(self.elapsed, clip.duration)

        if self.root_motion_bone is not None and not self.finished:
            self._apply_root_motion(clip, delta_time)

    def _apply_root_motion(self, clip: ClipDefinition, delta_time: DeltaTime) -> None:
        if clip.root_velocity == 0.0:
            return
        # The rig's local up axis points along the body's heading once the
        # skeleton tilt is applied. Keep the motion on the floor plane.
        heading = self.transform.up()
        heading[1] = 0.0
        length = np.linalg.norm(heading)
        if length == 0:
            return
        distance = clip.root_velocity * self.blend_weight * delta_time
        self.transform.translate(heading / length * distance)
