"""Base class for screens holding game objects and a physics system."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from .physics import GameObject, PhysicsObject, PhysicsSystem

PHYSICS_SUBSTEPS = 4

_T = TypeVar("_T", bound=GameObject)


class Scene(ABC):
    """A screen with its own objects, updated and drawn every frame."""

    def __init__(self) -> None:
        self.physics_system = PhysicsSystem()
        self.game_objects: list[GameObject] = []

    def instantiate(self, obj: _T) -> _T:
        """Add an object to the scene, registering it for physics if it has any."""
        self.game_objects.append(obj)
        if isinstance(obj, PhysicsObject):
            self.physics_system.add_body(obj)
        return obj

    @abstractmethod
    def enter(self) -> None:
        """Build the scene when it becomes active."""

    @abstractmethod
    def exit(self) -> None:
        """Tear the scene down when it is left."""

    @abstractmethod
    def handle_input(self, event: Any) -> None:
        """React to an input event."""

    def logic_update(self, delta_time: float) -> None:
        """Run the game logic of every object."""
        for obj in list(self.game_objects):
            obj.update(delta_time)

    def physics_update(self, delta_time: float) -> None:
        """Resolve collisions, then move every object by one sub-step."""
        self.physics_system.update(delta_time)
        for obj in list(self.game_objects):
            obj.physics_update(delta_time)

    def update(self, delta_time: float) -> None:
        """Advance physics in several sub-steps, then the logic once."""
        sub_delta = delta_time / PHYSICS_SUBSTEPS
        for _ in range(PHYSICS_SUBSTEPS):
            self.physics_update(sub_delta)
        self.logic_update(delta_time)

    def render(self, renderer: Any) -> None:
        """Draw every object in the order it was added."""
        for obj in list(self.game_objects):
            obj.render(renderer)