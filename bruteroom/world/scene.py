"""Static room geometry and the sun.

The room is a square floor of tiles enclosed by walls two tiles high. All
tiles share one square plane mesh; walls are the same plane stood on edge and
turned to face inwards. Nothing here changes after startup except the light's
rotation, which ``lighting.animate_light_direction`` drives.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum

from bruteroom import config
from bruteroom.world.transform import (
    Transform,
    quat_from_euler_zyx,
    quat_from_rotation_x,
    quat_from_rotation_z,
)

logger = logging.getLogger(__name__)


class TileKind(Enum):
    FLOOR = config.FLOOR_TEXTURE
    WALL = config.WALL_TEXTURE

    @property
    def texture(self) -> str:
        return self.value


@dataclass
class Tile:
    kind: TileKind
    transform: Transform
    size: float = config.TILE_SIZE
    roughness: float = config.SURFACE_ROUGHNESS


@dataclass
class FogSettings:
    color: tuple[float, float, float, float]
    start: float
    end: float


@dataclass
class DirectionalLight:
    """The sun. Shadow cascades cover the whole room."""

    transform: Transform
    shadows_enabled: bool = config.LIGHT_SHADOWS_ENABLED
    first_cascade_far_bound: float = 0.0
    maximum_distance: float = 0.0


@dataclass
class Scene:
    tiles: list[Tile] = field(default_factory=list)
    light: DirectionalLight | None = None
    fog: FogSettings | None = None

    def tiles_of(self, kind: TileKind) -> list[Tile]:
        return [tile for tile in self.tiles if tile.kind is kind]


def _wall_tiles(index: int, row: float, size: float, count: int) -> list[Tile]:
    """The four wall tiles at position ``index`` along each side."""
    along = index * size
    edge = (count + 0.5) * size
    height = row * size
    placements = (
        (along, edge, quat_from_rotation_x(-math.pi / 2)),
        (along, -edge, quat_from_rotation_x(math.pi / 2)),
    )
    tiles = [
        Tile(TileKind.WALL, Transform.from_xyz(x, height, z).with_rotation(rot), size)
        for x, z, rot in placements
    ]
    for x, rot in (
        (edge, quat_from_rotation_z(math.pi / 2)),
        (-edge, quat_from_rotation_z(-math.pi / 2)),
    ):
        tiles.append(
            Tile(
                TileKind.WALL,
                Transform.from_xyz(x, height, along).with_rotation(rot),
                size,
            )
        )
    return tiles


def build_scene(
    size: float = config.TILE_SIZE,
    count: int = config.TILE_COUNT,
    wall_rows: int = config.WALL_ROWS,
) -> Scene:
    """Lay out the floor, the walls and the light.

    Args:
        size: Edge length of one tile.
        count: Tiles from the centre to each wall.
        wall_rows: Wall height in tiles.
    """
    if size <= 0 or count < 0 or wall_rows < 0:
        raise ValueError(
            f"Invalid room dimensions: size={size}, count={count}, rows={wall_rows}"
        )

    scene = Scene()
    span = range(-count, count + 1)
    for i in span:
        for row in range(wall_rows):
            scene.tiles.extend(_wall_tiles(i, row + 0.5, size, count))
        for j in span:
            scene.tiles.append(
                Tile(TileKind.FLOOR, Transform.from_xyz(i * size, 0.0, j * size), size)
            )

    room_extent = size * count * 2.0
    scene.light = DirectionalLight(
        transform=Transform.from_rotation(
            quat_from_euler_zyx(0.0, config.LIGHT_INITIAL_YAW, config.LIGHT_TILT)
        ),
        first_cascade_far_bound=room_extent / config.SHADOW_CASCADE_COUNT,
        maximum_distance=room_extent,
    )
    scene.fog = FogSettings(
        color=config.FOG_COLOR, start=size * 2.0, end=size * count
    )

    logger.info(
        f"Built room: {len(scene.tiles_of(TileKind.FLOOR))} floor tiles, "
        f"{len(scene.tiles_of(TileKind.WALL))} wall tiles"
    )
    return scene
