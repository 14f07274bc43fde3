"""The main menu and the table screen."""

from __future__ import annotations

import logging
import os
import random
from typing import Any

import pygame

from .core import (
    FONT_STANDARD,
    FONT_TITLE,
    FONT_TITLE_BIG,
    RANKING_FILE_PATH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TEXTURE_TABLE,
    WHITE,
    Color,
    Rect,
    SceneType,
    Vec2,
)
from .objects import Ball, HoleTrigger, Wall
from .physics import PhysicsObject
from .rack import generate_rack
from .ranking import Ranking, RankingEntry
from .rules import GameRules
from .scene import Scene
from .ui_manager import GameUIManager
from .widgets import MouseProvider, UITextButton

logger = logging.getLogger(__name__)

BUTTON_COLOR: Color = (170, 170, 170, 255)
BUTTON_HOVER_COLOR: Color = (0, 170, 0, 255)
RANKING_PANEL_COLOR: Color = (0, 0, 0, 50)
RANKING_ROWS_SHOWN = 5

WALLS = (
    ("topLeft", Vec2(275.0, 55.0), Vec2(338.0, 50.0)),
    ("topRight", Vec2(668.0, 55.0), Vec2(338.0, 50.0)),
    ("bottomLeft", Vec2(275.0, 575.0), Vec2(338.0, 50.0)),
    ("bottomRight", Vec2(668.0, 575.0), Vec2(338.0, 50.0)),
    ("left", Vec2(200.0, 138.0), Vec2(50.0, 410.0)),
    ("right", Vec2(1030.0, 138.0), Vec2(50.0, 410.0)),
)

HOLE_SIZE = 20.0
HOLES = (
    Vec2(243.0, 105.0),
    Vec2(243.0, 580.0),
    Vec2(SCREEN_WIDTH * 0.5, 598.0),
    Vec2(SCREEN_WIDTH * 0.5, 88.0),
    Vec2(1037.0, 580.0),
    Vec2(1037.0, 105.0),
)

TABLE_MIDDLE = Vec2(640.0, 340.0)
BALL_SPACING = 30.0
RACK_OFFSET_X = 100.0
WHITE_BALL_OFFSET_X = 200.0
WHITE_BALL_ID = 15
STOP_THRESHOLD = 0.05


class MainMenu(Scene):
    """Title screen with start, quit and ranking-reset buttons and the top scores."""

    def __init__(
        self,
        game: Any,
        ranking_path: str | os.PathLike[str] = RANKING_FILE_PATH,
        mouse: MouseProvider | None = None,
    ) -> None:
        super().__init__()
        self.game = game
        self.ranking_path = ranking_path
        self._mouse = mouse
        self.ranking_entries: list[RankingEntry] = []

    def _load_ranking(self) -> None:
        self.ranking_entries = list(Ranking(self.ranking_path).entries)

    def _button(self, position: Vec2, size: Vec2, action: Any, caption: str) -> UITextButton:
        return self.instantiate(
            UITextButton(
                position, size, action, caption, BUTTON_COLOR, BUTTON_HOVER_COLOR, self._mouse
            )
        )

    def _quit(self) -> None:
        self.game.is_running = False

    def enter(self) -> None:
        """Load the ranking and create the menu buttons."""
        self._load_ranking()
        self._button(
            Vec2(SCREEN_WIDTH * 0.2, SCREEN_HEIGHT * 0.5 + 75.0),
            Vec2(200.0, 50.0),
            lambda: self.game.request_change_scene(SceneType.GAME),
            "Start Game",
        )
        self._button(
            Vec2(SCREEN_WIDTH * 0.2, SCREEN_HEIGHT * 0.5 + 75.0 * 2.0),
            Vec2(200.0, 50.0),
            self._quit,
            "Quit",
        )
        self._button(
            Vec2(SCREEN_WIDTH * 0.75 - 50.0, SCREEN_HEIGHT * 0.8),
            Vec2(100.0, 25.0),
            self.reset_ranking,
            "Reset",
        )

    def exit(self) -> None:
        """Nothing is held beyond the scene's own objects."""

    def handle_input(self, event: Any) -> None:
        """Log the escape key; other input is handled by the buttons."""
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            logger.info("Escape key pressed. Exiting...")

    def reset_ranking(self) -> None:
        """Erase every stored score."""
        Ranking(self.ranking_path).clear()
        self.ranking_entries = []

    def render(self, renderer: Any) -> None:
        super().render(renderer)
        renderer.draw_text(
            "8all",
            FONT_TITLE_BIG,
            WHITE,
            SCREEN_WIDTH * 0.2 + 100.0,
            SCREEN_HEIGHT * 0.25,
        )
        renderer.draw_rect(
            Rect(
                SCREEN_WIDTH * 0.6,
                SCREEN_HEIGHT * 0.2,
                SCREEN_WIDTH * 0.3,
                SCREEN_HEIGHT * 0.6,
            ),
            RANKING_PANEL_COLOR,
        )
        renderer.draw_text(
            "*-* RANKING *-*", FONT_TITLE, WHITE, SCREEN_WIDTH * 0.75, SCREEN_HEIGHT * 0.25
        )
        for index, entry in enumerate(self.ranking_entries[:RANKING_ROWS_SHOWN]):
            renderer.draw_text(
                f"{index + 1}->{entry.player_name}____{entry.score}",
                FONT_STANDARD,
                WHITE,
                SCREEN_WIDTH * 0.75,
                SCREEN_HEIGHT * 0.4 + index * 50,
            )


class InGameScreen(Scene):
    """The pool table with its balls, rules and overlay."""

    def __init__(
        self,
        game: Any,
        mouse: MouseProvider | None = None,
        ranking_path: str | os.PathLike[str] = RANKING_FILE_PATH,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self.game = game
        self._mouse = mouse
        self.ranking_path = ranking_path
        self._rng = rng
        self.white_ball: Ball | None = None
        self.balls: list[Ball] = []
        self.game_rules: GameRules | None = None
        self.ui_manager: GameUIManager | None = None

    def enter(self) -> None:
        """Build the table, rack the balls and set up the rules and overlay."""
        self._setup_table()
        self._setup_balls()
        self.game_rules = GameRules(self.white_ball, self.balls)
        self._setup_ui()

    def exit(self) -> None:
        """Nothing is held beyond the scene's own objects."""

    def _on_hole(self, obj: PhysicsObject) -> None:
        self.game_rules.on_hole_trigger(obj)

    def _setup_table(self) -> None:
        for name, position, size in WALLS:
            self.instantiate(Wall(name, position, size, False))
        for position in HOLES:
            self.instantiate(HoleTrigger("trigger", position, HOLE_SIZE, self._on_hole))

    def _setup_balls(self) -> None:
        middle = TABLE_MIDDLE
        for placement in generate_rack(self._rng):
            x = middle.x + RACK_OFFSET_X + placement.row * BALL_SPACING
            y = middle.y - placement.row * 0.5 * BALL_SPACING + BALL_SPACING * placement.column
            ball = Ball(f"ball_{placement.number}", placement.number, Vec2(x, y))
            self.balls.append(self.instantiate(ball))
        self.white_ball = self.instantiate(
            Ball("white ball", WHITE_BALL_ID, Vec2(middle.x - WHITE_BALL_OFFSET_X, middle.y))
        )

    def _setup_ui(self) -> None:
        self.ui_manager = GameUIManager(
            self.game, self.game_rules, self.white_ball, self._mouse, self.ranking_path
        )
        self.game_rules.ui_manager = self.ui_manager

    def handle_input(self, event: Any) -> None:
        """Drive the shot with the mouse and toggle the pause menu with escape."""
        shot = self.ui_manager.shot_controller
        if event.type == pygame.MOUSEMOTION:
            shot.update(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == pygame.BUTTON_LEFT:
            shot.handle_mouse_up(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == pygame.BUTTON_LEFT:
            shot.handle_mouse_down(*event.pos)
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.ui_manager.toggle_pause()
        self.ui_manager.handle_input(event)

    def _is_frozen(self) -> bool:
        return self.game_rules.game_over or self.ui_manager.pause_canvas.is_active

    def logic_update(self, delta_time: float) -> None:
        """Update the overlay and end the turn once every ball has stopped."""
        self.ui_manager.update(delta_time)
        if self._is_frozen():
            return

        super().logic_update(delta_time)

        rules = self.game_rules
        if rules.turn_in_progress and self.physics_system.are_all_objects_stopped(STOP_THRESHOLD):
            rules.evaluate_turn()
            if rules.game_over:
                self.ui_manager.show_game_over(rules.winner)
                return
            rules.next_turn()
            self.ui_manager.prepare_next_turn(
                rules.current_player, rules.player_info(0), rules.player_info(1)
            )

    def physics_update(self, delta_time: float) -> None:
        """Advance physics unless the game is over or paused."""
        if self._is_frozen():
            return
        super().physics_update(delta_time)

    def render(self, renderer: Any) -> None:
        renderer.draw_texture(TEXTURE_TABLE, Rect(0.0, 0.0, SCREEN_WIDTH, SCREEN_HEIGHT))
        super().render(renderer)
        self.ui_manager.render(renderer)