"""Circle and box colliders with double-dispatch collision tests."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any

from .core import CollisionInfo, Rect, Vec2


class Collider(ABC):
    """A shape that can be tested against other colliders."""

    def __init__(self) -> None:
        self.is_trigger = False

    @abstractmethod
    def check_collision(self, other: Collider) -> CollisionInfo | None:
        """Test against any collider; return the collision or None."""

    @abstractmethod
    def check_collision_with_circle(self, other: CircleCollider) -> CollisionInfo | None:
        """Test against a circle collider."""

    @abstractmethod
    def check_collision_with_box(self, other: BoxCollider) -> CollisionInfo | None:
        """Test against a box collider."""

    @abstractmethod
    def draw_debug(self, renderer: Any) -> None:
        """Draw the collider outline for debugging."""


class BoxCollider(Collider):
    """An axis-aligned box collider."""

    def __init__(self, rect: Rect) -> None:
        super().__init__()
        self.rect = Rect(rect.x, rect.y, rect.w, rect.h)

    def check_collision(self, other: Collider) -> CollisionInfo | None:
        return other.check_collision_with_box(self)

    def check_collision_with_circle(self, other: CircleCollider) -> CollisionInfo | None:
        return other.check_collision_with_box(self)

    def check_collision_with_box(self, other: BoxCollider) -> CollisionInfo | None:
        a, b = self.rect, other.rect
        half_wa, half_ha = a.w * 0.5, a.h * 0.5
        half_wb, half_hb = b.w * 0.5, b.h * 0.5
        center_ax, center_ay = a.x + half_wa, a.y + half_ha
        center_bx, center_by = b.x + half_wb, b.y + half_hb

        dx = center_bx - center_ax
        dy = center_by - center_ay
        overlap_x = half_wa + half_wb - abs(dx)
        overlap_y = half_ha + half_hb - abs(dy)

        if overlap_x <= 0 or overlap_y <= 0:
            return None

        if overlap_x < overlap_y:
            normal = Vec2(-1.0 if dx < 0 else 1.0, 0.0)
            contact = Vec2(center_ax + half_wa * normal.x, center_by)
            return CollisionInfo(normal, contact, overlap_x)

        normal = Vec2(0.0, -1.0 if dy < 0 else 1.0)
        contact = Vec2(center_bx, center_ax + half_ha * normal.y)
        return CollisionInfo(normal, contact, overlap_y)

    def draw_debug(self, renderer: Any) -> None:
        renderer.draw_rect(self.rect, (0, 255, 0, 120))


class CircleCollider(Collider):
    """A circle collider given by its centre and radius."""

    def __init__(self, center: Vec2, radius: float) -> None:
        super().__init__()
        self.center = Vec2(*center)
        self.radius = radius

    def check_collision(self, other: Collider) -> CollisionInfo | None:
        return other.check_collision_with_circle(self)

    def check_collision_with_circle(self, other: CircleCollider) -> CollisionInfo | None:
        dx = self.center.x - other.center.x
        dy = self.center.y - other.center.y
        dist_sq = dx * dx + dy * dy
        radius_sum = self.radius + other.radius

        if dist_sq >= radius_sum * radius_sum:
            return None

        dist = math.sqrt(dist_sq)
        normal = Vec2(dx / dist, dy / dist) if dist != 0.0 else Vec2(1.0, 0.0)
        contact = Vec2(
            self.center.x - normal.x * self.radius,
            self.center.y - normal.y * self.radius,
        )
        return CollisionInfo(normal, contact, radius_sum - dist)

    def check_collision_with_box(self, other: BoxCollider) -> CollisionInfo | None:
        rect = other.rect
        contact = Vec2(
            max(rect.x, min(self.center.x, rect.x + rect.w)),
            max(rect.y, min(self.center.y, rect.y + rect.h)),
        )
        dx = self.center.x - contact.x
        dy = self.center.y - contact.y
        dist_sq = dx * dx + dy * dy

        if dist_sq >= self.radius * self.radius:
            return None

        dist = math.sqrt(dist_sq)
        normal = Vec2(dx / dist, dy / dist) if dist != 0.0 else Vec2(1.0, 0.0)
        return CollisionInfo(normal, contact, self.radius - dist)

    def draw_debug(self, renderer: Any) -> None:
        center = (int(self.center.x), int(self.center.y))
        renderer.draw_circle(center, int(self.radius), (0, 255, 0, 255))