"""The window, the main loop and switching between screens."""

from __future__ import annotations

import argparse
import logging
import os
import time
from typing import Any, Callable

import pygame

from .clock import FrameClock
from .core import (
    FONT_CONSOLE,
    FONT_LITTLE_SIZE,
    FONT_PATH,
    FONT_REGULAR_SIZE,
    FONT_STANDARD,
    FONT_TITLE,
    FONT_TITLE_BIG,
    FONT_TITLE_SIZE,
    FONT_TITLES_PATH,
    RANKING_FILE_PATH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TABLE_PATH,
    TEXTURE_BALLS,
    TEXTURE_BALLS_PATH,
    TEXTURE_TABLE,
    Rect,
    SceneType,
)
from .renderer import Renderer
from .scene import Scene
from .screens import InGameScreen, MainMenu
from .widgets import MouseProvider

logger = logging.getLogger(__name__)

TITLE = "8all Game"
TARGET_FRAME_SECONDS = 1.0 / 60.0
CONSOLE_FONT_SIZE = 10


class Game:
    """Owns the window and the active scene and runs the frame loop."""

    def __init__(
        self,
        ranking_path: str | os.PathLike[str] = RANKING_FILE_PATH,
        mouse: MouseProvider | None = None,
        clock: FrameClock | None = None,
    ) -> None:
        self.window: pygame.Surface | None = None
        self.renderer: Renderer | None = None
        self.is_running = False
        self.show_stats = False
        self.clock = clock if clock is not None else FrameClock()
        self.ranking_path = ranking_path
        self._mouse = mouse
        self.current_scene: Scene | None = None
        self.active_scene_type = SceneType.MAIN_MENU
        self.requested_scene_type = SceneType.MAIN_MENU
        self.is_scene_change_requested = False
        self._load_scene(SceneType.MAIN_MENU)

    def _scene_factories(self) -> dict[SceneType, Callable[[], Scene]]:
        return {
            SceneType.MAIN_MENU: lambda: MainMenu(self, self.ranking_path, self._mouse),
            SceneType.GAME: lambda: InGameScreen(self, self._mouse, self.ranking_path),
            SceneType.RESULT: lambda: MainMenu(self, self.ranking_path, self._mouse),
        }

    def _load_scene(self, scene_type: SceneType) -> None:
        factory = self._scene_factories().get(scene_type)
        if factory is None:
            return
        self.current_scene = factory()
        self.active_scene_type = scene_type
        self.current_scene.enter()

    def start(self, title: str) -> None:
        """Open the window and load fonts and textures.

        Raises RuntimeError if the display cannot be set up.
        """
        pygame.init()
        if not pygame.display.get_init():
            raise RuntimeError(f"Couldn't initialize the display: {pygame.get_error()}")
        pygame.font.init()
        try:
            self.window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            raise RuntimeError(f"Could not create window: {exc}") from exc
        pygame.display.set_caption(title)

        self.renderer = Renderer(self.window)
        self.renderer.load_font(FONT_CONSOLE, FONT_PATH, CONSOLE_FONT_SIZE)
        self.renderer.load_font(FONT_STANDARD, FONT_PATH, FONT_LITTLE_SIZE)
        self.renderer.load_font(FONT_TITLE, FONT_TITLES_PATH, FONT_REGULAR_SIZE)
        self.renderer.load_font(FONT_TITLE_BIG, FONT_TITLES_PATH, FONT_TITLE_SIZE)
        self.renderer.load_texture(TEXTURE_TABLE, TABLE_PATH)
        self.renderer.load_texture(TEXTURE_BALLS, TEXTURE_BALLS_PATH)

        self.is_running = True

    def _handle_input(self) -> None:
        for event in pygame.event.get():
            if self.current_scene is not None:
                self.current_scene.handle_input(event)
            if event.type == pygame.QUIT:
                self.is_running = False

    def _update(self) -> None:
        if self.current_scene is not None:
            self.current_scene.update(self.clock.delta_time)

    def _render(self) -> None:
        self.renderer.clear()
        if self.current_scene is not None:
            self.current_scene.render(self.renderer)
        if self.show_stats:
            self._show_stats()
        self.renderer.present()

    def _show_stats(self) -> None:
        color: Any = (0, 255, 0, 255)
        self.renderer.draw_rect(Rect(0.0, 0.0, SCREEN_WIDTH, 25.0), (0, 50, 0, 50))
        delta = self.clock.delta_time
        fps = int(1.0 / delta) if delta > 0 else 0
        self.renderer.draw_text(f"FPS: {fps}", FONT_CONSOLE, color, 75.0, 10.0)
        self.renderer.draw_text(f"Delta Time: {delta:.6f}", FONT_CONSOLE, color, 250.0, 10.0)

    def _change_scene(self) -> None:
        if not self.is_scene_change_requested:
            return
        if self.current_scene is not None:
            self.current_scene.exit()
            self.current_scene = None
        self._load_scene(self.requested_scene_type)
        self.is_scene_change_requested = False

    def run(self) -> None:
        """Run frames at up to sixty per second until the game stops."""
        while self.is_running:
            frame_start = time.perf_counter()

            self.clock.update()
            self._handle_input()
            self._update()
            self._render()
            self._change_scene()

            elapsed = time.perf_counter() - frame_start
            if elapsed < TARGET_FRAME_SECONDS:
                time.sleep(TARGET_FRAME_SECONDS - elapsed)

    def cleanup(self) -> None:
        """Close the window."""
        if self.window is not None:
            pygame.display.quit()
        self.window = None

    def request_change_scene(self, scene_type: SceneType) -> None:
        """Switch to another scene at the end of the frame, unless already there."""
        if scene_type == self.active_scene_type or self.is_scene_change_requested:
            return
        self.requested_scene_type = scene_type
        self.is_scene_change_requested = True

    def request_restart_scene(self, scene_type: SceneType) -> None:
        """Load the scene afresh at the end of the frame, even if it is active."""
        self.is_scene_change_requested = True
        self.requested_scene_type = scene_type


def main(argv: list[str] | None = None) -> int:
    """Start the game and run it until the window is closed."""
    parser = argparse.ArgumentParser(prog="eightball", description="Two-player eight-ball pool.")
    parser.parse_args(argv)

    game = Game()
    try:
        game.start(TITLE)
    except RuntimeError as exc:
        logger.error("%s", exc)
        return -1

    game.run()
    game.cleanup()
    return 0