"""Third-person follow camera.

The camera sits behind and above the character and looks at a point just
above its origin. It only reads the character's transform; nothing flows
back into the character controller.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bruteroom import config
from bruteroom.types import Vec3
from bruteroom.world.transform import Y_AXIS, Transform, vec3


@dataclass
class LookTransform:
    """A camera pose described by where it is and what it looks at."""

    eye: Vec3 = field(default_factory=vec3)
    target: Vec3 = field(default_factory=vec3)
    up: Vec3 = field(default_factory=lambda: Y_AXIS.copy())

    def copy(self) -> LookTransform:
        return LookTransform(self.eye.copy(), self.target.copy(), self.up.copy())


class Smoother:
    """Exponential smoothing of a ``LookTransform`` between frames.

    ``lag_weight`` is the share of the previous frame kept each update:
    0.0 follows exactly, values approaching 1.0 trail further behind.
    """

    def __init__(self, lag_weight: float = config.CAMERA_LAG_WEIGHT) -> None:
        if not 0.0 <= lag_weight < 1.0:
            raise ValueError(f"lag_weight must be in [0, 1), got {lag_weight}")
        self.lag_weight = lag_weight
        self._smoothed: LookTransform | None = None

    def smooth(self, desired: LookTransform) -> LookTransform:
        previous = self._smoothed if self._smoothed is not None else desired
        lead = 1.0 - self.lag_weight
        self._smoothed = LookTransform(
            eye=previous.eye * self.lag_weight + desired.eye * lead,
            target=previous.target * self.lag_weight + desired.target * lead,
            up=desired.up.copy(),
        )
        return self._smoothed.copy()


class FollowCamera:
    def __init__(self, smoother: Smoother | None = None) -> None:
        self.desired = LookTransform()
        self.smoother = smoother if smoother is not None else Smoother()
        self.look = LookTransform()

    def update(self, character: Transform) -> None:
        """Aim at ``character`` for this frame."""
        position = character.translation
        self.desired = LookTransform(
            eye=position
            - character.up() * config.CAMERA_DISTANCE
            + Y_AXIS * config.CAMERA_HEIGHT,
            target=position + Y_AXIS * config.CAMERA_TARGET_HEIGHT,
        )
        self.look = self.smoother.smooth(self.desired)
