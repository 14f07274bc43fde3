"""Everything drawn over the table during a game."""

from __future__ import annotations

import os
from dataclasses import replace
from typing import Any

from .canvases import PauseCanvas, ResultsCanvas
from .core import (
    FONT_STANDARD,
    FONT_TITLE,
    RANKING_FILE_PATH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SceneType,
    Vec2,
)
from .rules import PlayerInfo
from .shot import ShotController
from .widgets import MouseProvider, UIBallSpin

INACTIVE_ALPHA = 50


class GameUIManager:
    """Owns the pause and results canvases, the spin selector and the shot aim."""

    def __init__(
        self,
        game: Any,
        game_rules: Any,
        white_ball: Any,
        mouse: MouseProvider | None = None,
        ranking_path: str | os.PathLike[str] = RANKING_FILE_PATH,
    ) -> None:
        self.game = game
        self.game_rules = game_rules
        self.pause_canvas = PauseCanvas(
            lambda: self.pause_canvas.hide(),
            lambda: game.request_change_scene(SceneType.MAIN_MENU),
            lambda: game.request_restart_scene(SceneType.GAME),
            False,
            mouse,
        )
        self.ball_spin_ui = UIBallSpin(
            Vec2(SCREEN_WIDTH * 0.5, SCREEN_HEIGHT - 45.0),
            Vec2(75.0, 75.0),
            mouse,
        )
        self.shot_controller = ShotController(game_rules, white_ball, self.ball_spin_ui)
        self.results = ResultsCanvas(game, ranking_path=ranking_path, mouse=mouse)
        self.players = [PlayerInfo(), PlayerInfo()]
        self.current_player = 0

    def update(self, delta_time: float) -> None:
        """Update the results screen, or the pause menu and spin selector."""
        if self.results.is_active:
            self.results.update(delta_time)
            return
        self.pause_canvas.update(delta_time)
        if not self.shot_controller.is_charging:
            self.ball_spin_ui.update(delta_time)

    def handle_input(self, event: Any) -> None:
        """Pass input events to the results screen."""
        self.results.handle_input(event)

    def render(self, renderer: Any) -> None:
        """Draw the active overlay, or the spin selector, aim and scoreboard."""
        if self.results.is_active:
            self.results.render(renderer)
            return
        if self.pause_canvas.is_active:
            self.pause_canvas.render(renderer)
            return

        self.ball_spin_ui.render(renderer)
        self.shot_controller.render(renderer)

        dimmed = (255, 255, 255, INACTIVE_ALPHA)
        bright = (255, 255, 255, 255)
        first_color = bright if self.current_player == 0 else dimmed
        second_color = dimmed if self.current_player == 0 else bright
        first, second = self.players

        renderer.draw_text("PLAYER 01", FONT_TITLE, first_color, 120, 25)
        renderer.draw_text(f"Turn : {first.turns}", FONT_STANDARD, first_color, 100, 70)
        renderer.draw_text(f"Points : {first.points}", FONT_STANDARD, first_color, 100, 110)
        renderer.draw_text(f"Fails : {first.fails}", FONT_STANDARD, first_color, 100, 150)

        x = SCREEN_WIDTH - 100
        renderer.draw_text("PLAYER 02", FONT_TITLE, second_color, x - 20, 25)
        renderer.draw_text(f"Turn {second.turns}", FONT_STANDARD, second_color, x, 70)
        renderer.draw_text(f"Points : {second.points}", FONT_STANDARD, second_color, x, 110)
        renderer.draw_text(f"Fails : {second.fails}", FONT_STANDARD, second_color, x, 150)

    def show_game_over(self, winner: int, ball8_fail: bool = False) -> None:
        """Open the results screen for the winner."""
        self.results.show_results(winner, self.players[winner], ball8_fail)

    def toggle_pause(self) -> None:
        """Show or hide the pause menu, cancelling any shot being charged."""
        if self.pause_canvas.is_active:
            self.pause_canvas.hide()
        else:
            self.pause_canvas.show()
            self.shot_controller.disable()

    def prepare_next_turn(self, next_player: int, first: PlayerInfo, second: PlayerInfo) -> None:
        """Take a snapshot of the players' statistics for the next turn."""
        self.current_player = next_player
        self.ball_spin_ui.reset()
        self.players = [replace(first), replace(second)]