"""Balls, cushions and pocket triggers on the table."""

from __future__ import annotations

import math
from typing import Any, Callable

from .colliders import BoxCollider, CircleCollider
from .core import BALLS_ROWS_COLUMNS, TEXTURE_BALLS, GameObjectType, Rect, Vec2
from .physics import PhysicsObject
from .rigidbody import Rigidbody

BALL_RADIUS = 15.0
BALL_MASS = 0.3
POCKET_PULL = 0.5
POCKET_CAPTURE_DISTANCE = 5.0


class Ball(PhysicsObject):
    """A billiard ball identified by its number on the sprite sheet."""

    def __init__(self, name: str, ball_id: int, start_pos: Vec2) -> None:
        super().__init__(name, GameObjectType.BALL)
        self.id = ball_id
        self.transform.position = Vec2(start_pos.x, start_pos.y)
        self.transform.scale = Vec2(BALL_RADIUS * 2, BALL_RADIUS * 2)
        self.collider = CircleCollider(Vec2(start_pos.x, start_pos.y), BALL_RADIUS)
        self.rigidbody = Rigidbody(self.transform, False, BALL_MASS)

    def physics_update(self, delta_time: float) -> None:
        """Move the ball and keep its collider on it."""
        self.rigidbody.update(delta_time)
        position = self.transform.position
        self.collider.center = Vec2(position.x, position.y)

    def render(self, renderer: Any) -> None:
        renderer.draw_sprite_shadowed(
            TEXTURE_BALLS,
            self.transform,
            self.transform.rotation,
            BALLS_ROWS_COLUMNS,
            BALLS_ROWS_COLUMNS,
            self.id,
        )


class Wall(PhysicsObject):
    """A static rectangular cushion."""

    def __init__(self, name: str, start_pos: Vec2, size: Vec2, visible: bool = False) -> None:
        super().__init__(name, GameObjectType.WALL)
        self.visible = visible
        self.transform.position = Vec2(start_pos.x, start_pos.y)
        self.collider = BoxCollider(Rect(start_pos.x, start_pos.y, size.x, size.y))
        self.rigidbody = Rigidbody(self.transform, True)

    def render(self, renderer: Any) -> None:
        if self.visible:
            self.collider.draw_debug(renderer)


class HoleTrigger(PhysicsObject):
    """A pocket that pulls balls in and reports the ones it captures."""

    def __init__(
        self,
        name: str,
        pos: Vec2,
        radius: float,
        trigger_action: Callable[[PhysicsObject], None],
    ) -> None:
        super().__init__(name, GameObjectType.HOLE)
        self.on_trigger_action = trigger_action
        self.show_debug = False
        self.transform.position = Vec2(pos.x, pos.y)
        self.transform.scale = Vec2(radius, radius)
        self.collider = CircleCollider(Vec2(pos.x, pos.y), radius)
        self.collider.is_trigger = True
        self.rigidbody = Rigidbody(self.transform, True)

    def on_trigger(self, other: PhysicsObject) -> None:
        """Pull the other body towards the pocket centre and capture it when close."""
        other.rigidbody.attract_to_point(self.transform.position, POCKET_PULL)
        distance = abs(other.transform.position - self.transform.position)
        if distance < POCKET_CAPTURE_DISTANCE:
            self.on_trigger_action(other)

    def render(self, renderer: Any) -> None:
        """Pockets are part of the table image; an outline is drawn only in debug mode."""
        if not self.show_debug:
            return
        position = self.transform.position
        center = (round(position.x), round(position.y))
        renderer.draw_circle(center, round(self.transform.scale.x), (0, 0, 255, 255))