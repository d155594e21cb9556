"""GLFW implementation of the application driver."""

from __future__ import annotations

import logging

import glfw

from bruteroom import input_events
from bruteroom.app import AppConfig, Game

logger = logging.getLogger(__name__)


class GlfwApp:
    """
    The GLFW implementation of the application driver.

    Uses GLFW's callback-based key events with a polling main loop. The
    window shows the character's status in its title bar; drawing the scene
    is left to a renderer.
    """

    def __init__(self, app_config: AppConfig, game: Game | None = None) -> None:
        self.app_config = app_config
        self.game = game if game is not None else Game()
        self._title = app_config.title
        self._initialize_window(app_config)
        glfw.set_key_callback(self.window, self._on_key)

    def _initialize_window(self, app_config: AppConfig) -> None:
        """Initialize GLFW and create the window."""
        if not glfw.init():
            raise RuntimeError("Failed to initialize GLFW")

        glfw.window_hint(glfw.RESIZABLE, glfw.TRUE)

        self.window = glfw.create_window(
            app_config.width, app_config.height, app_config.title, None, None
        )
        if not self.window:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")

        glfw.make_context_current(self.window)
        glfw.swap_interval(1 if app_config.vsync else 0)

    def run(self) -> None:
        """Starts the main application loop and runs the game."""
        logger.info("Starting main loop")
        try:
            while not glfw.window_should_close(self.window):
                # --- Input Phase ---
                self.game.keyboard.begin_frame()
                glfw.poll_events()

                # --- Time and Logic Phase ---
                dt = self.game.clock.sync(fps=self.app_config.target_fps)
                self.game.update(dt)

                # --- Presentation Phase ---
                self._update_title()
                glfw.swap_buffers(self.window)
        finally:
            glfw.terminate()
            logger.info("Main loop stopped")

    def _update_title(self) -> None:
        if self.game.status != self._title:
            self._title = self.game.status
            glfw.set_window_title(self.window, self._title)

    # Event callback methods
    def _on_key(self, window, key, scancode, action, mods):
        """Handle keyboard events."""
        if key == glfw.KEY_ESCAPE and action == glfw.PRESS:
            glfw.set_window_should_close(window, True)
            return

        sym = self._glfw_key_to_keysym(key)
        if action == glfw.PRESS or action == glfw.REPEAT:
            self.game.keyboard.dispatch(
                input_events.KeyDown(
                    sym=sym,
                    scancode=scancode,
                    mod=self._glfw_mods_to_modifier(mods),
                    repeat=action == glfw.REPEAT,
                )
            )
        elif action == glfw.RELEASE:
            self.game.keyboard.dispatch(
                input_events.KeyUp(
                    sym=sym,
                    scancode=scancode,
                    mod=self._glfw_mods_to_modifier(mods),
                )
            )

    def _glfw_key_to_keysym(self, key: int) -> input_events.KeySym:
        """Converts a GLFW key code to a KeySym."""
        # Handle ASCII letters A-Z
        if glfw.KEY_A <= key <= glfw.KEY_Z:
            # SDL3 convention: letter KeySym values are lowercase ASCII
            return input_events.KeySym(ord("a") + (key - glfw.KEY_A))

        return {
            glfw.KEY_SPACE: input_events.KeySym.SPACE,
            glfw.KEY_ENTER: input_events.KeySym.RETURN,
            glfw.KEY_ESCAPE: input_events.KeySym.ESCAPE,
            glfw.KEY_RIGHT: input_events.KeySym.RIGHT,
            glfw.KEY_LEFT: input_events.KeySym.LEFT,
            glfw.KEY_DOWN: input_events.KeySym.DOWN,
            glfw.KEY_UP: input_events.KeySym.UP,
        }.get(key, input_events.KeySym.UNKNOWN)

    def _glfw_mods_to_modifier(self, mods: int) -> input_events.Modifier:
        """Converts GLFW modifier flags to Modifier flags."""
        mod = input_events.Modifier.NONE
        if mods & glfw.MOD_SHIFT:
            mod |= input_events.Modifier.SHIFT
        if mods & glfw.MOD_CONTROL:
            mod |= input_events.Modifier.CTRL
        if mods & glfw.MOD_ALT:
            mod |= input_events.Modifier.ALT
        return mod
