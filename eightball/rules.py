"""Eight-ball rules: groups, scoring, fouls, turns and the end of the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Sequence

from .core import SCREEN_HEIGHT, SCREEN_WIDTH, Vec2
from .objects import Ball
from .physics import PhysicsObject

EIGHT_BALL = 7
WHITE_BALL_SPOT = (350.0, SCREEN_HEIGHT * 0.5)


class BallGroup(Enum):
    NONE = auto()
    SOLID = auto()
    STRIPES = auto()


@dataclass
class PlayerInfo:
    """Per-player statistics."""

    balls_group: BallGroup = BallGroup.NONE
    turns: int = 1
    points: int = 0
    fails: int = 0


def _is_solid(ball_num: int) -> bool:
    return ball_num <= 6


def _is_stripe(ball_num: int) -> bool:
    return 8 <= ball_num <= 14


_GROUP_IDS = {
    BallGroup.SOLID: frozenset(range(0, 7)),
    BallGroup.STRIPES: frozenset(range(8, 15)),
}


class GameRules:
    """Tracks the state of a two-player game and applies the rules."""

    def __init__(self, white_ball: Ball, balls: Sequence[Ball], ui_manager: Any = None) -> None:
        self.white_ball = white_ball
        self.balls = balls
        self.ui_manager = ui_manager
        self.turn_in_progress = False
        self._players = (PlayerInfo(), PlayerInfo())
        self._turn_sunk_balls: list[Ball] = []
        self._sunk_counts = [0, 0]
        self._current_player = 0
        self._winner = -1
        self._foul_committed = False
        self._player_scored_this_turn = False
        self._game_over = False

    @property
    def current_player(self) -> int:
        return self._current_player

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def winner(self) -> int:
        """Index of the winning player, or -1 while the game is running."""
        return self._winner

    def player_info(self, player: int) -> PlayerInfo:
        """The live statistics of player 0 or 1."""
        return self._players[player]

    def _assign_balls_group(self, ball: Ball) -> None:
        current = self._players[self._current_player]
        other = self._players[1 - self._current_player]
        if _is_solid(ball.id):
            current.balls_group, other.balls_group = BallGroup.SOLID, BallGroup.STRIPES
        elif _is_stripe(ball.id):
            current.balls_group, other.balls_group = BallGroup.STRIPES, BallGroup.SOLID

    def _target_player_for_ball(self, ball_num: int) -> int:
        first, second = self._players
        if first.balls_group is BallGroup.NONE and second.balls_group is BallGroup.NONE:
            return self._current_player
        if _is_solid(ball_num) and first.balls_group is BallGroup.SOLID:
            return 0
        if _is_solid(ball_num) and second.balls_group is BallGroup.SOLID:
            return 1
        if _is_stripe(ball_num) and first.balls_group is BallGroup.STRIPES:
            return 0
        return 1

    def _has_balls_remaining(self, player: int) -> bool:
        group = self._players[player].balls_group
        if group is BallGroup.NONE:
            return True
        ids = _GROUP_IDS[group]
        return any(ball.id in ids and not ball.rigidbody.is_static for ball in self.balls)

    def evaluate_turn(self) -> None:
        """Score the balls sunk this turn and decide who plays next."""
        if self._game_over:
            return

        self._player_scored_this_turn = False
        for ball in self._turn_sunk_balls:
            info = self._players[self._current_player]
            if info.balls_group is BallGroup.NONE:
                self._assign_balls_group(ball)

            if (info.balls_group is BallGroup.SOLID and _is_solid(ball.id)) or (
                info.balls_group is BallGroup.STRIPES and _is_stripe(ball.id)
            ):
                info.points += 1
                self._player_scored_this_turn = True
            else:
                info.fails += 1
                self._foul_committed = True

        if self._foul_committed or not self._player_scored_this_turn:
            self._current_player = 1 - self._current_player

    def next_turn(self) -> None:
        """Clear the per-turn state."""
        self.turn_in_progress = False
        self._foul_committed = False
        self._turn_sunk_balls.clear()

    def reset_white_ball(self) -> None:
        """Put the cue ball back on its spot, at rest."""
        self.white_ball.transform.position = Vec2(*WHITE_BALL_SPOT)
        self.white_ball.rigidbody.reset_states()

    def on_hole_trigger(self, obj: PhysicsObject) -> None:
        """Handle a body falling into a pocket."""
        if not isinstance(obj, Ball):
            return

        ball_num = obj.id
        if obj is self.white_ball:
            self._foul_committed = True
            self.reset_white_ball()
        elif ball_num == EIGHT_BALL:
            self.check_black_ball()
        else:
            self._turn_sunk_balls.append(obj)
            obj.rigidbody.set_static(True)

            is_solid = 1 <= ball_num <= 6
            is_stripe = _is_stripe(ball_num)
            target_player = self._target_player_for_ball(ball_num)

            if is_solid:
                self._sunk_counts[0] += 1
            elif is_stripe:
                self._sunk_counts[1] += 1

            ball_x = 100.0 if target_player == 0 else SCREEN_WIDTH - 100.0
            ball_y = 300.0 + self._sunk_counts[0 if is_solid else 1] * 25.0
            obj.transform.position = Vec2(ball_x, ball_y)

    def on_player_shot(self) -> None:
        """Start a turn after the current player has shot."""
        self.turn_in_progress = True
        self._players[self._current_player].turns += 1

    def check_black_ball(self) -> None:
        """End the game after the eight ball has been sunk."""
        self.turn_in_progress = False
        self._game_over = True

        ball8_fail = self._has_balls_remaining(self._current_player)
        self._winner = 1 - self._current_player if ball8_fail else self._current_player
        if self.ui_manager is not None:
            self.ui_manager.show_game_over(self._winner, ball8_fail)