import math

from bruteroom import config
from bruteroom.world.scene import DirectionalLight
from bruteroom.world.transform import quat_from_euler_zyx


def light_yaw(elapsed_seconds: float) -> float:
    """Sun yaw after ``elapsed_seconds``; one full turn per rotation period."""
    return elapsed_seconds * 2 * math.pi / config.LIGHT_ROTATION_PERIOD


def animate_light_direction(light: DirectionalLight, elapsed_seconds: float) -> None:
    """Swing the sun slowly around the room at a fixed tilt."""
    light.transform.rotation = quat_from_euler_zyx(
        0.0, light_yaw(elapsed_seconds), config.LIGHT_TILT
    )
