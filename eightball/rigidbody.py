"""Rigid body motion with friction, side spin and forward spin."""

from __future__ import annotations

import math

from .core import Transform, Vec2

FRICTION_FACTOR = 0.4
ANGULAR_FRICTION_FACTOR = 0.3
ANGULAR_IMPULSE = 0.0025
SPIN_FORWARD_FRICTION_FACTOR = 0.5
MAX_SPIN_FORWARD_EFFECT = 200.0
MAX_SPIN_FORWARD_CHANGE = 70.0


class Rigidbody:
    """Moves a transform according to velocity, spin and friction."""

    def __init__(self, transform: Transform, is_static: bool = False, mass: float = 1.0) -> None:
        self.transform = transform
        self.mass = mass
        self.is_static = is_static
        self.velocity = Vec2(0.0, 0.0)
        self.angular_velocity = 0.0
        self.spin_forward = 0.0

    @property
    def speed(self) -> float:
        """Magnitude of the linear velocity."""
        return abs(self.velocity)

    def set_static(self, is_static: bool) -> None:
        """Change whether the body moves, clearing its motion."""
        self.is_static = is_static
        self.reset_states()

    def reset_states(self) -> None:
        """Stop all linear and angular motion."""
        self.velocity = Vec2(0.0, 0.0)
        self.angular_velocity = 0.0
        self.spin_forward = 0.0

    def apply_force(self, force: Vec2) -> None:
        """Add an instantaneous force, scaled by the inverse mass."""
        if self.is_static:
            return
        self.velocity = self.velocity + Vec2(force.x / self.mass, force.y / self.mass)

    def apply_torque_from_impulse(self, contact_point: Vec2, impulse: Vec2) -> None:
        """Change angular velocity from an impulse applied at a contact point."""
        if self.is_static:
            return
        r = contact_point - self.transform.position
        r_cross_impulse = r.x * impulse.y - r.y * impulse.x
        inertia = 0.5 * self.mass * 2.5
        if inertia == 0.0:
            return
        torque_boost_factor = 1.2
        self.angular_velocity += (r_cross_impulse / inertia) * torque_boost_factor

    def attract_to_point(self, point: Vec2, force: float) -> None:
        """Steer the velocity towards a point with the given blend factor."""
        if self.is_static:
            return
        desired = point - self.transform.position
        length = abs(desired)
        direction = desired / length if length != 0.0 else Vec2(0.0, 0.0)
        desired = direction * max(self.speed, 50.0)
        self.velocity = self.velocity + (desired - self.velocity) * force

    def update(self, delta_time: float) -> None:
        """Advance the body by one time step."""
        if self.is_static:
            return

        speed = self.speed
        if speed > 0.0:
            v = self.velocity
            perpendicular = Vec2(-v.y / speed, v.x / speed)
            spin_strength = ANGULAR_IMPULSE * speed
            self.velocity = v + perpendicular * (self.angular_velocity * spin_strength * delta_time)

        speed = self.speed
        forward = self.velocity / speed if speed > 0 else Vec2(0.0, 0.0)
        desired_spin_speed = self.spin_forward * MAX_SPIN_FORWARD_CHANGE
        max_change = MAX_SPIN_FORWARD_CHANGE * delta_time
        delta_speed = min(max(desired_spin_speed - speed, -max_change), max_change)
        self.velocity = self.velocity + forward * delta_speed

        position = self.transform.position
        position.x += self.velocity.x * delta_time
        position.y += self.velocity.y * delta_time

        rotation = math.fmod(self.transform.rotation + self.angular_velocity * 2.0 * delta_time, 360.0)
        if rotation < 0.0:
            rotation += 360.0
        self.transform.rotation = rotation

        self.velocity = self.velocity * math.exp(-FRICTION_FACTOR * delta_time)
        self.angular_velocity *= math.exp(-ANGULAR_FRICTION_FACTOR * delta_time)
        self.spin_forward *= math.exp(-SPIN_FORWARD_FRICTION_FACTOR * delta_time)

        if abs(self.velocity.x) < 0.01:
            self.velocity.x = 0.0
        if abs(self.velocity.y) < 0.01:
            self.velocity.y = 0.0
        if abs(self.angular_velocity) < 1.0:
            self.angular_velocity = 0.0
        if abs(self.spin_forward) < 0.01:
            self.spin_forward = 0.0