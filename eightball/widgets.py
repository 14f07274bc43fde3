"""User-interface elements: canvases, buttons and the spin selector."""

from __future__ import annotations

from typing import Any, Callable, Tuple

import pygame

from .core import (
    BALLS_ROWS_COLUMNS,
    FONT_STANDARD,
    TEXTURE_BALLS,
    WHITE,
    Color,
    GameObjectType,
    Rect,
    Vec2,
)
from .physics import GameObject

MouseState = Tuple[Vec2, bool]
MouseProvider = Callable[[], MouseState]

CUE_BALL_FRAME = 15


def _pygame_mouse() -> MouseState:
    x, y = pygame.mouse.get_pos()
    return Vec2(float(x), float(y)), bool(pygame.mouse.get_pressed()[0])


class Canvas:
    """A group of UI elements that is shown or hidden together."""

    def __init__(self, start_active: bool = False) -> None:
        self.is_active = start_active
        self.elements: list[GameObject] = []

    def show(self) -> None:
        self.is_active = True

    def hide(self) -> None:
        self.is_active = False

    def update(self, delta_time: float) -> None:
        """Update every element while the canvas is shown."""
        if not self.is_active:
            return
        for element in list(self.elements):
            element.update(delta_time)

    def render(self, renderer: Any) -> None:
        """Draw every element while the canvas is shown."""
        if not self.is_active:
            return
        for element in list(self.elements):
            element.render(renderer)

    def handle_input(self, event: Any) -> None:
        """React to an input event; ignored by default."""


class UIButton(GameObject):
    """A rectangular button that fires its action on a left click."""

    def __init__(
        self,
        position: Vec2,
        size: Vec2,
        on_click: Callable[[], None] | None,
        mouse: MouseProvider | None = None,
    ) -> None:
        super().__init__("button", GameObjectType.UI_BUTTON)
        self.on_click = on_click
        self.is_hovered = False
        # Starts as pressed so a click held while the button appears does not fire it.
        self._was_mouse_down = True
        self._mouse = mouse if mouse is not None else _pygame_mouse
        self.transform.position = Vec2(position.x, position.y)
        self.transform.scale = Vec2(size.x, size.y)

    @property
    def bounds(self) -> Rect:
        position, scale = self.transform.position, self.transform.scale
        return Rect(position.x, position.y, scale.x, scale.y)

    def update(self, delta_time: float) -> None:
        """Track hovering and fire the action when the button is pressed."""
        mouse_pos, is_mouse_down = self._mouse()
        self.is_hovered = self.bounds.contains(mouse_pos)
        if self.is_hovered and is_mouse_down and not self._was_mouse_down and self.on_click:
            self.on_click()
        self._was_mouse_down = is_mouse_down

    def _label_center(self) -> Vec2:
        position, scale = self.transform.position, self.transform.scale
        return Vec2(position.x + scale.x * 0.5, position.y + scale.y * 0.5)

    def render(self, renderer: Any) -> None:
        color = (0, 255, 0, 255) if self.is_hovered else (255, 0, 0, 255)
        renderer.draw_transform_rect(self.transform, color)
        center = self._label_center()
        renderer.draw_text("Click Me", FONT_STANDARD, WHITE, center.x, center.y)


class UITextButton(UIButton):
    """A button with a caption and separate idle and hover colours."""

    def __init__(
        self,
        position: Vec2,
        size: Vec2,
        on_click: Callable[[], None] | None,
        text: str,
        default_color: Color,
        hover_color: Color,
        mouse: MouseProvider | None = None,
    ) -> None:
        super().__init__(position, size, on_click, mouse)
        self.text = text
        self.default_color = default_color
        self.hover_color = hover_color

    def render(self, renderer: Any) -> None:
        color = self.hover_color if self.is_hovered else self.default_color
        renderer.draw_transform_rect(self.transform, color)
        center = self._label_center()
        renderer.draw_text(self.text, FONT_STANDARD, WHITE, center.x, center.y)


class UIBallSpin(GameObject):
    """A cue-ball picture on which the player picks where to strike."""

    def __init__(self, position: Vec2, size: Vec2, mouse: MouseProvider | None = None) -> None:
        super().__init__("UIBallSpin", GameObjectType.NONE)
        self._mouse = mouse if mouse is not None else _pygame_mouse
        self.transform.position = Vec2(position.x, position.y)
        self.transform.scale = Vec2(size.x, size.y)
        self._x = 0.0
        self._y = 0.0

    @property
    def x(self) -> float:
        """Horizontal strike offset, relative to the widget size."""
        return self._x

    @property
    def y(self) -> float:
        """Vertical strike offset, positive above the centre."""
        return -self._y

    def reset(self) -> None:
        """Return the strike point to the centre."""
        self._x = 0.0
        self._y = 0.0

    def update(self, delta_time: float) -> None:
        """Move the strike point to the mouse while it is pressed over the widget."""
        mouse_pos, is_mouse_down = self._mouse()
        position, scale = self.transform.position, self.transform.scale
        bounds = Rect(
            position.x - scale.x * 0.5,
            position.y - scale.y * 0.5,
            scale.x,
            scale.y,
        )
        if bounds.contains(mouse_pos) and is_mouse_down:
            self._x = (mouse_pos.x - position.x) / scale.x
            self._y = (mouse_pos.y - position.y) / scale.y

    def render(self, renderer: Any) -> None:
        renderer.draw_sprite(
            TEXTURE_BALLS, self.transform, BALLS_ROWS_COLUMNS, BALLS_ROWS_COLUMNS, CUE_BALL_FRAME
        )
        position, scale = self.transform.position, self.transform.scale
        marker = Rect(
            position.x - 2.5 + self._x * scale.x,
            position.y - 2.5 + self._y * scale.y,
            5.0,
            5.0,
        )
        renderer.draw_rect(marker, (255, 0, 0, 255))