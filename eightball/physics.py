"""Game objects with physics and the system that makes them collide."""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import combinations
from typing import Any

from .colliders import Collider
from .core import CollisionInfo, GameObjectType, Transform
from .rigidbody import Rigidbody

CORRECTION_PERCENT = 0.8
CORRECTION_SLOP = 0.01
BOUNCINESS = 0.90


class GameObject(ABC):
    """Anything that lives in a scene and can be drawn."""

    def __init__(self, name: str, object_type: GameObjectType = GameObjectType.NONE) -> None:
        self.name = name
        self.type = object_type
        self.transform = Transform()

    def update(self, delta_time: float) -> None:
        """Advance game logic by one frame; objects without logic ignore it."""

    def physics_update(self, delta_time: float) -> None:
        """Advance physics by one sub-step; objects without physics ignore it."""

    @abstractmethod
    def render(self, renderer: Any) -> None:
        """Draw the object."""


class PhysicsObject(GameObject):
    """A game object with a collider and a rigid body."""

    def __init__(self, name: str, object_type: GameObjectType) -> None:
        super().__init__(name, object_type)
        self.collider: Collider | None = None
        self.rigidbody: Rigidbody | None = None

    def on_trigger(self, other: PhysicsObject) -> None:
        """React to overlapping a trigger collider; ignored by default."""


class PhysicsSystem:
    """Detects and resolves collisions between registered bodies."""

    def __init__(self) -> None:
        self.bodies: list[PhysicsObject] = []

    def add_body(self, body: PhysicsObject) -> None:
        """Register a body for collision handling."""
        self.bodies.append(body)

    def clear_bodies(self) -> None:
        """Forget every registered body."""
        self.bodies.clear()

    def are_all_objects_stopped(self, threshold: float = 1.0) -> bool:
        """Return True if no moving body is faster than the threshold."""
        return all(
            body.rigidbody.is_static or body.rigidbody.speed <= threshold
            for body in self.bodies
        )

    def update(self, delta_time: float) -> None:
        """Test every pair of bodies, firing triggers or resolving contacts."""
        for a, b in combinations(self.bodies, 2):
            info = a.collider.check_collision(b.collider)
            if info is None:
                continue
            if a.collider.is_trigger or b.collider.is_trigger:
                a.on_trigger(b)
                b.on_trigger(a)
            else:
                self.resolve_collision(a, b, info)

    def resolve_collision(
        self, body_a: PhysicsObject, body_b: PhysicsObject, info: CollisionInfo
    ) -> None:
        """Push two overlapping bodies apart and exchange an impulse."""
        rb_a, rb_b = body_a.rigidbody, body_b.rigidbody
        inv_mass_a = 0.0 if rb_a.is_static else 1.0 / rb_a.mass
        inv_mass_b = 0.0 if rb_b.is_static else 1.0 / rb_b.mass
        total_inv_mass = inv_mass_a + inv_mass_b
        if total_inv_mass == 0.0:
            return

        normal = info.normal
        magnitude = max(info.penetration - CORRECTION_SLOP, 0.0) / total_inv_mass * CORRECTION_PERCENT
        correction = normal * magnitude

        if not rb_a.is_static:
            share = inv_mass_a / total_inv_mass
            body_a.transform.position.x -= correction.x * share
            body_a.transform.position.y -= correction.y * share
        if not rb_b.is_static:
            share = inv_mass_b / total_inv_mass
            body_b.transform.position.x += correction.x * share
            body_b.transform.position.y += correction.y * share

        relative = rb_b.velocity - rb_a.velocity
        vel_along_normal = relative.x * normal.x + relative.y * normal.y
        if vel_along_normal > 0:
            return

        j = -(1 + BOUNCINESS) * vel_along_normal / total_inv_mass
        impulse = normal * j

        if not rb_a.is_static:
            rb_a.velocity = rb_a.velocity - impulse * inv_mass_a
        if not rb_b.is_static:
            rb_b.velocity = rb_b.velocity + impulse * inv_mass_b

        rb_a.apply_torque_from_impulse(info.contact_point, impulse)
        rb_b.apply_torque_from_impulse(info.contact_point, impulse)