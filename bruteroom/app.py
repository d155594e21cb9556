from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from bruteroom import config
from bruteroom.animation.clips import BRUTE_CLIPS, ClipDefinition
from bruteroom.animation.library import AnimationLibrary
from bruteroom.character.controller import CharacterController
from bruteroom.character.enums import ActionKind, FacingDirection
from bruteroom.events import (
    ActionEndedEvent,
    ActionStartedEvent,
    FacingChangedEvent,
    subscribe_to_event,
)
from bruteroom.input.keyboard import Keyboard
from bruteroom.types import DeltaTime
from bruteroom.util.clock import Clock
from bruteroom.world.camera import FollowCamera
from bruteroom.world.lighting import animate_light_direction
from bruteroom.world.scene import Scene, build_scene
from bruteroom.world.spawner import CharacterSpawner

logger = logging.getLogger(__name__)


@dataclass
class AppConfig:
    """Configuration for an App implementation."""

    width: int
    height: int
    title: str
    vsync: bool
    target_fps: float | None = None


class App(Protocol):
    """
    Defines the structural interface for an application driver.

    An App bridges the frame-stepped ``Game`` with a concrete windowing and
    event-handling backend. It owns the main loop.

    Responsibilities:
    -----------------
    - Window Management: Creates and manages the main application window.

    - Main Loop Execution: Each iteration clears last frame's key edges,
      polls the backend for input, measures the frame's delta time and calls
      ``Game.update()`` exactly once.

    - Input Event Translation: Captures backend-specific key events and
      translates them into ``input_events`` objects for the game's keyboard.
    """

    def __init__(self, app_config: AppConfig) -> None:
        """Initializes the window and the game."""
        ...

    def run(self) -> None:
        """Starts the main application loop and runs the game."""
        ...


class Game:
    """Everything that happens in one frame, independent of the backend.

    Order within a frame: spawn check, character controller, clip playback
    (which applies root motion), follow camera, sun.
    """

    def __init__(
        self,
        clips: dict[str, ClipDefinition] | None = None,
        scene: Scene | None = None,
    ) -> None:
        self.clock = Clock()
        self.keyboard = Keyboard()
        self.scene = scene if scene is not None else build_scene()
        self.library = AnimationLibrary()
        self.library.load((clips if clips is not None else BRUTE_CLIPS).values())
        self.spawner = CharacterSpawner()
        self.controller = CharacterController(self.library)
        self.camera = FollowCamera()
        self.status = self._format_status(ActionKind.IDLE, FacingDirection.NORTH)

        subscribe_to_event(ActionStartedEvent, self._on_action_started)
        subscribe_to_event(ActionEndedEvent, self._on_action_ended)
        subscribe_to_event(FacingChangedEvent, self._on_facing_changed)

    def update(self, delta_time: DeltaTime) -> None:
        self.spawner.update(self.library)
        self.controller.update(self.keyboard, delta_time)

        player = self.library.single_player()
        if player is not None:
            player.advance(delta_time)
            self.camera.update(player.transform)

        if self.scene.light is not None:
            animate_light_direction(self.scene.light, self.clock.elapsed)

    # ------------------------------------------------------------------
    # Status display
    # ------------------------------------------------------------------

    @staticmethod
    def _format_status(action: ActionKind, facing: FacingDirection) -> str:
        return f"{config.WINDOW_TITLE} - {action.clip_id}, facing {facing.name.title()}"

    def _on_action_started(self, event: ActionStartedEvent) -> None:
        self.status = self._format_status(event.action, event.facing)

    def _on_action_ended(self, event: ActionEndedEvent) -> None:
        self.status = self._format_status(
            ActionKind.IDLE, self.controller.state.facing
        )

    def _on_facing_changed(self, event: FacingChangedEvent) -> None:
        logger.info(f"Facing {event.previous.name} -> {event.facing.name}")
