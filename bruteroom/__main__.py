"""Main entry point for the demo."""

import logging

from . import config
from .app import AppConfig


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app_config = AppConfig(
        title=config.WINDOW_TITLE,
        width=config.WINDOW_WIDTH,
        height=config.WINDOW_HEIGHT,
        vsync=config.VSYNC,
        target_fps=config.TARGET_FPS,
    )

    from bruteroom.backends.glfw.app import GlfwApp

    GlfwApp(app_config).run()


if __name__ == "__main__":
    main()
