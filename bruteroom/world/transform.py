"""Rigid transforms for world objects.

Quaternions are numpy arrays in (x, y, z, w) order. Composition follows the
usual convention: ``quat_mul(a, b)`` applies ``b`` first, then ``a``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from bruteroom.types import Quat, Vec3

X_AXIS = np.array([1.0, 0.0, 0.0])
Y_AXIS = np.array([0.0, 1.0, 0.0])
Z_AXIS = np.array([0.0, 0.0, 1.0])

IDENTITY_QUAT = np.array([0.0, 0.0, 0.0, 1.0])


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Vec3:
    return np.array([x, y, z], dtype=np.float64)


def quat_from_axis_angle(axis: Vec3, angle: float) -> Quat:
    axis = np.asarray(axis, dtype=np.float64)
    axis = axis / np.linalg.norm(axis)
    half = angle / 2
    return np.array([*(axis * math.sin(half)), math.cos(half)])


def quat_from_rotation_x(angle: float) -> Quat:
    return quat_from_axis_angle(X_AXIS, angle)


def quat_from_rotation_y(angle: float) -> Quat:
    return quat_from_axis_angle(Y_AXIS, angle)


def quat_from_rotation_z(angle: float) -> Quat:
    return quat_from_axis_angle(Z_AXIS, angle)


def quat_from_euler_zyx(z: float, y: float, x: float) -> Quat:
    """Rotation by ``z`` about Z, then ``y`` about Y, then ``x`` about X
    (intrinsic order, i.e. ``Rz * Ry * Rx``)."""
    return quat_mul(
        quat_from_rotation_z(z),
        quat_mul(quat_from_rotation_y(y), quat_from_rotation_x(x)),
    )


def quat_mul(a: Quat, b: Quat) -> Quat:
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return np.array(
        [
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
            aw * bw - ax * bx - ay * by - az * bz,
        ]
    )


def quat_normalize(q: Quat) -> Quat:
    return q / np.linalg.norm(q)


def quat_rotate(q: Quat, v: Vec3) -> Vec3:
    """Rotate vector ``v`` by unit quaternion ``q``."""
    u = q[:3]
    w = q[3]
    t = 2.0 * np.cross(u, v)
    return v + w * t + np.cross(u, t)


def quat_angle_between(a: Quat, b: Quat) -> float:
    """Smallest rotation angle taking ``a`` to ``b`` (sign of q ignored)."""
    dot = min(1.0, abs(float(np.dot(quat_normalize(a), quat_normalize(b)))))
    return 2.0 * math.acos(dot)


@dataclass
class Transform:
    """Position and orientation of an object in world space."""

    translation: Vec3 = field(default_factory=vec3)
    rotation: Quat = field(default_factory=lambda: IDENTITY_QUAT.copy())

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> Transform:
        return cls(translation=vec3(x, y, z))

    @classmethod
    def from_rotation(cls, rotation: Quat) -> Transform:
        return cls(rotation=np.asarray(rotation, dtype=np.float64))

    def with_rotation(self, rotation: Quat) -> Transform:
        return Transform(self.translation.copy(), np.asarray(rotation, np.float64))

    def rotate(self, rotation: Quat) -> None:
        """Apply ``rotation`` in world space on top of the current rotation."""
        self.rotation = quat_normalize(quat_mul(rotation, self.rotation))

    def rotate_y(self, angle: float) -> None:
        self.rotate(quat_from_rotation_y(angle))

    def translate(self, offset: Vec3) -> None:
        self.translation = self.translation + offset

    def up(self) -> Vec3:
        """The local +Y axis in world space."""
        return quat_rotate(self.rotation, Y_AXIS)

    def forward(self) -> Vec3:
        """The local -Z axis in world space."""
        return quat_rotate(self.rotation, -Z_AXIS)

    def copy(self) -> Transform:
        return Transform(self.translation.copy(), self.rotation.copy())
