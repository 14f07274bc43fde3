"""Aiming and striking the cue ball with the mouse."""

from __future__ import annotations

from typing import Any

from .core import Rect, Vec2

MIN_SHOT_LENGTH_SQ = 100.0
SPIN_ANGULAR_SCALE = 100.0
AIM_DOTS = 9


class ShotController:
    """Turns a drag away from the cue ball into a shot."""

    def __init__(self, game_rules: Any, white_ball: Any, ball_spin_ui: Any) -> None:
        self.game_rules = game_rules
        self.white_ball = white_ball
        self.ball_spin_ui = ball_spin_ui
        self.charging_vector = Vec2(0.0, 0.0)
        self.is_charging = False

    def handle_mouse_down(self, mouse_x: float, mouse_y: float) -> None:
        """Start charging if the press lands on the cue ball between turns."""
        if self.game_rules.turn_in_progress:
            return
        transform = self.white_ball.transform
        ball_rect = Rect(
            transform.position.x - transform.scale.x * 0.5,
            transform.position.y - transform.scale.y * 0.5,
            transform.scale.x,
            transform.scale.y,
        )
        self.is_charging = ball_rect.contains(Vec2(mouse_x, mouse_y))

    def handle_mouse_up(self, mouse_x: float, mouse_y: float) -> None:
        """Release the shot if one was being charged."""
        if self.is_charging:
            self.execute_shot()
        self.is_charging = False
        self.charging_vector = Vec2(0.0, 0.0)

    def update(self, mouse_x: float, mouse_y: float) -> None:
        """Aim away from the mouse while charging."""
        if self.is_charging:
            position = self.white_ball.transform.position
            self.charging_vector = Vec2(position.x - mouse_x, position.y - mouse_y)

    def execute_shot(self) -> None:
        """Strike the cue ball if the drag was long enough."""
        vector = self.charging_vector
        if vector.x * vector.x + vector.y * vector.y <= MIN_SHOT_LENGTH_SQ:
            return
        body = self.white_ball.rigidbody
        body.apply_force(Vec2(vector.x, vector.y))
        body.angular_velocity = self.ball_spin_ui.x * SPIN_ANGULAR_SCALE
        body.spin_forward = self.ball_spin_ui.y
        self.game_rules.on_player_shot()

    def disable(self) -> None:
        """Cancel any shot being charged."""
        self.is_charging = False

    def render(self, renderer: Any) -> None:
        """Draw the aiming line while charging."""
        if not self.is_charging:
            return
        position = self.white_ball.transform.position
        for step in range(1, AIM_DOTS + 1):
            fraction = 0.1 * step
            renderer.draw_rect(
                Rect(
                    position.x + self.charging_vector.x * fraction - 2.5,
                    position.y + self.charging_vector.y * fraction - 2.5,
                    5.0,
                    5.0,
                ),
                (255, 0, 0, 255),
            )