"""The pause overlay and the end-of-game results screen."""

from __future__ import annotations

import os
from dataclasses import replace
from typing import Any, Callable

import pygame

from .core import (
    FONT_STANDARD,
    FONT_TITLE,
    FONT_TITLE_BIG,
    RANKING_FILE_PATH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WHITE,
    Color,
    Rect,
    SceneType,
    Vec2,
)
from .ranking import Ranking, RankingEntry
from .rules import PlayerInfo
from .widgets import Canvas, MouseProvider, UITextButton

BUTTON_SIZE = Vec2(200.0, 50.0)
BUTTON_COLOR: Color = (170, 170, 170, 255)
BUTTON_HOVER_COLOR: Color = (0, 170, 0, 255)
OVERLAY_COLOR: Color = (0, 0, 0, 150)

BASE_SCORE = 1000
EIGHT_BALL_PENALTY = 500
TURN_PENALTY = 30
POINT_BONUS = 20
FAIL_PENALTY = 100

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 14
RANKING_ROWS_SHOWN = 5


def _overlay(renderer: Any) -> None:
    renderer.draw_rect(Rect(0.0, 0.0, SCREEN_WIDTH, SCREEN_HEIGHT), OVERLAY_COLOR)


class PauseCanvas(Canvas):
    """Overlay with resume, restart and main-menu buttons."""

    def __init__(
        self,
        on_resume: Callable[[], None],
        on_exit: Callable[[], None],
        on_restart: Callable[[], None],
        start_active: bool = False,
        mouse: MouseProvider | None = None,
    ) -> None:
        super().__init__(start_active)
        self.on_resume = on_resume
        self.on_exit = on_exit
        self.on_restart = on_restart
        x = SCREEN_WIDTH * 0.5 - 100.0
        y = SCREEN_HEIGHT * 0.45 - 25.0
        buttons = (
            ("Resume", 0.0, lambda: self.on_resume()),
            ("Reset", 75.0, lambda: self.on_restart()),
            ("Main Menu", 150.0, lambda: self.on_exit()),
        )
        for caption, offset, action in buttons:
            self.elements.append(
                UITextButton(
                    Vec2(x, y + offset),
                    BUTTON_SIZE,
                    action,
                    caption,
                    BUTTON_COLOR,
                    BUTTON_HOVER_COLOR,
                    mouse,
                )
            )

    def update(self, delta_time: float) -> None:
        """Update the buttons while the overlay is shown."""
        super().update(delta_time)

    def render(self, renderer: Any) -> None:
        """Dim the table and draw the buttons and title while shown."""
        if not self.is_active:
            return
        _overlay(renderer)
        for element in list(self.elements):
            element.render(renderer)
        renderer.draw_text(
            "Pause", FONT_TITLE_BIG, WHITE, SCREEN_WIDTH * 0.5, SCREEN_HEIGHT * 0.2
        )


class ResultsCanvas(Canvas):
    """Shows the winner, asks for a name and stores the score in the ranking."""

    def __init__(
        self,
        game: Any,
        start_active: bool = False,
        ranking_path: str | os.PathLike[str] = RANKING_FILE_PATH,
        mouse: MouseProvider | None = None,
    ) -> None:
        super().__init__(start_active)
        self.game = game
        self.ranking_path = ranking_path
        self._mouse = mouse
        self.input_name = ""
        self.winner = -1
        self.winner_info = PlayerInfo()
        self.ball8 = False
        self.score = 0
        self.ranking_entries: list[RankingEntry] = []
        self._add_button(
            Vec2(SCREEN_WIDTH * 0.5 - 100.0, SCREEN_HEIGHT * 0.7 - 25.0),
            "Save Score",
            self.save_score,
        )

    def _add_button(self, position: Vec2, caption: str, action: Callable[[], None]) -> None:
        self.elements.append(
            UITextButton(
                position,
                BUTTON_SIZE,
                action,
                caption,
                BUTTON_COLOR,
                BUTTON_HOVER_COLOR,
                self._mouse,
            )
        )

    def calculate_final_score(self) -> int:
        """Score of the winner: turns and fouls cost, pocketed balls earn."""
        info = self.winner_info
        score = BASE_SCORE
        if self.ball8:
            score -= EIGHT_BALL_PENALTY
        score -= info.turns * TURN_PENALTY
        score += info.points * POINT_BONUS
        score -= info.fails * FAIL_PENALTY
        return max(score, 0)

    def save_score(self) -> None:
        """Store the score under the entered name and offer menu or retry."""
        self.elements.clear()
        ranking = Ranking(self.ranking_path)
        ranking.add_entry(self.input_name, self.score)
        self.ranking_entries = ranking.entries
        ranking.save()

        y = SCREEN_HEIGHT * 0.7 - 25.0
        self._add_button(
            Vec2(SCREEN_WIDTH * 0.4 - 100.0, y),
            "Main Menu",
            lambda: self.game.request_change_scene(SceneType.MAIN_MENU),
        )
        self._add_button(
            Vec2(SCREEN_WIDTH * 0.6 - 100.0, y),
            "Retry",
            lambda: self.game.request_restart_scene(SceneType.GAME),
        )

    def update(self, delta_time: float) -> None:
        """Update the buttons once a long enough name has been entered."""
        if len(self.input_name) < MIN_NAME_LENGTH:
            return
        for element in list(self.elements):
            element.update(delta_time)

    def render(self, renderer: Any) -> None:
        """Draw the name prompt, or the ranking once the score is saved."""
        _overlay(renderer)
        if not self.ranking_entries:
            renderer.draw_text(
                f"Player 0{self.winner + 1} Won!",
                FONT_TITLE_BIG,
                WHITE,
                SCREEN_WIDTH * 0.5,
                SCREEN_HEIGHT * 0.2,
            )
            renderer.draw_text(
                "Enter your Name", FONT_STANDARD, WHITE, SCREEN_WIDTH * 0.5, SCREEN_HEIGHT * 0.4
            )
            renderer.draw_text(
                self.input_name, FONT_STANDARD, WHITE, SCREEN_WIDTH * 0.5, SCREEN_HEIGHT * 0.45
            )
        else:
            renderer.draw_text(
                "Ranking", FONT_TITLE_BIG, WHITE, SCREEN_WIDTH * 0.5, SCREEN_HEIGHT * 0.2
            )
            for index, entry in enumerate(self.ranking_entries[:RANKING_ROWS_SHOWN]):
                text = f"{index + 1} -> {entry.player_name} _____________________ {entry.score}"
                renderer.draw_text(
                    text,
                    FONT_STANDARD,
                    WHITE,
                    SCREEN_WIDTH * 0.5,
                    SCREEN_HEIGHT * 0.4 + index * 30,
                )

        renderer.draw_text(
            f"Your Score = {self.score}",
            FONT_TITLE,
            WHITE,
            SCREEN_WIDTH * 0.5,
            SCREEN_HEIGHT * 0.3,
        )
        for element in list(self.elements):
            element.render(renderer)

    def handle_input(self, event: Any) -> None:
        """Edit the entered name from key presses and text input."""
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_DELETE, pygame.K_BACKSPACE) and self.input_name:
                self.input_name = self.input_name[:-1]
        elif event.type == pygame.TEXTINPUT:
            text = event.text
            if text and len(self.input_name) < MAX_NAME_LENGTH:
                self.input_name += "_" if text[0] == " " else text

    def show_results(self, winner: int, player_info: PlayerInfo, ball8_fail: bool) -> None:
        """Show the results of the finished game for the winner."""
        self.winner = winner
        self.winner_info = replace(player_info)
        self.ball8 = ball8_fail
        self.score = self.calculate_final_score()
        self.show()
        if pygame.display.get_init():
            pygame.key.start_text_input()

    def go_to_main_menu(self) -> None:
        """Ask the game to return to the main menu."""
        self.game.request_change_scene(SceneType.MAIN_MENU)