"""Loaded clips and the players spawned from them.

The library starts empty. The host loads the clip table at startup, and the
spawner creates the character's player once the clips are available. Until
both have happened the library reports "not ready" by returning None from
``single_player()``; callers skip the frame and try again on the next one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bruteroom import config
from bruteroom.animation.clips import ClipDefinition
from bruteroom.animation.player import ClipPlayer
from bruteroom.types import ClipId, Seconds
from bruteroom.world.transform import Transform

logger = logging.getLogger(__name__)


class AnimationLibrary:
    def __init__(self) -> None:
        self._clips: dict[ClipId, ClipDefinition] = {}
        self._players: list[ClipPlayer] = []
        self.asset_name: str | None = None

    @property
    def loaded(self) -> bool:
        return bool(self._clips)

    def load(
        self,
        definitions: Iterable[ClipDefinition],
        asset_name: str = config.CHARACTER_ASSET,
    ) -> None:
        """Make ``definitions`` available for playback."""
        for definition in definitions:
            self._clips[definition.clip_id] = definition
        self.asset_name = asset_name
        logger.info(f"Loaded {len(self._clips)} animation clips from {asset_name}")

    def clip_duration(self, clip_id: ClipId) -> Seconds:
        """Length of one play-through of ``clip_id``.

        Raises:
            KeyError: If the clip has not been loaded.
        """
        try:
            return self._clips[clip_id].duration
        except KeyError:
            raise KeyError(f"Animation clip not loaded: {clip_id}") from None

    def spawn_player(self, transform: Transform) -> ClipPlayer:
        """Create a player driving ``transform``."""
        if not self.loaded:
            raise RuntimeError("Cannot spawn a player before clips are loaded")
        player = ClipPlayer(self._clips, transform)
        self._players.append(player)
        return player

    def single_player(self) -> ClipPlayer | None:
        """The one spawned player, or None while nothing has spawned yet.

        The demo has exactly one animated character.

        Raises:
            RuntimeError: If more than one player exists.
        """
        if not self.loaded or not self._players:
            return None
        if len(self._players) > 1:
            raise RuntimeError(
                f"Expected exactly one animation player, found {len(self._players)}"
            )
        return self._players[0]

    @property
    def players(self) -> tuple[ClipPlayer, ...]:
        return tuple(self._players)
