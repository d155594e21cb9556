"""Animation clip definitions for the brute character asset."""

from __future__ import annotations

from dataclasses import dataclass

from bruteroom.character.enums import ActionKind
from bruteroom.types import ClipId, Seconds


@dataclass(frozen=True)
class ClipDefinition:
    """Metadata for one animation clip.

    Parsing the asset file is out of scope; the clip table below carries the
    numbers the controller and the player need.
    """

    clip_id: ClipId  # Unique identifier inside the asset
    duration: Seconds  # Length of one play-through
    root_velocity: float = 0.0  # Metres per second along the body's heading

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError(
                f"Clip {self.clip_id!r} must have a positive duration, "
                f"got {self.duration}"
            )


# Built-in clip table for brute.glb.
# In a real implementation, these would be read from the asset file
BRUTE_CLIPS: dict[ClipId, ClipDefinition] = {
    definition.clip_id: definition
    for definition in (
        ClipDefinition(ActionKind.IDLE.clip_id, duration=2.3),
        ClipDefinition(
            ActionKind.RUN_FORWARD.clip_id, duration=0.73, root_velocity=4.5
        ),
        ClipDefinition(
            ActionKind.RUN_BACKWARD.clip_id, duration=0.73, root_velocity=-3.0
        ),
        ClipDefinition(ActionKind.TURN_LEFT.clip_id, duration=2.2),
        ClipDefinition(ActionKind.TURN_RIGHT.clip_id, duration=2.2),
        ClipDefinition(ActionKind.ATTACK.clip_id, duration=2.4),
        ClipDefinition(ActionKind.JUMP.clip_id, duration=2.2),
    )
}


def get_clip_definition(clip_id: ClipId) -> ClipDefinition:
    """Look up a built-in clip.

    Raises:
        KeyError: If the clip is not part of the brute asset.
    """
    return BRUTE_CLIPS[clip_id]
