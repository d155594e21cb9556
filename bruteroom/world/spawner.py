"""Spawns the character once its asset is available."""

from __future__ import annotations

import logging

from bruteroom.animation.library import AnimationLibrary
from bruteroom.animation.player import ClipPlayer
from bruteroom.character.controller import facing_rotation
from bruteroom.character.enums import ActionKind, FacingDirection
from bruteroom.world.transform import Transform

logger = logging.getLogger(__name__)


class CharacterSpawner:
    """Runs every frame until the character exists and is idling.

    Spawning and starting the first clip are separate steps because the
    player only becomes resolvable after the spawn; either step may have to
    wait for a later frame.
    """

    def __init__(self, facing: FacingDirection = FacingDirection.NORTH) -> None:
        self.facing = facing
        self.spawned = False
        self.animated = False

    @property
    def done(self) -> bool:
        return self.spawned and self.animated

    def update(self, library: AnimationLibrary) -> ClipPlayer | None:
        """Advance spawning. Returns the player once it is idling."""
        if not self.spawned and library.loaded:
            library.spawn_player(Transform.from_rotation(facing_rotation(self.facing)))
            self.spawned = True
            logger.info(f"Spawned character from {library.asset_name}")

        if self.spawned and not self.animated:
            player = library.single_player()
            if player is None:
                return None
            player.play_looping(ActionKind.IDLE.clip_id)
            self.animated = True

        return library.single_player() if self.done else None
