"""Drawing of shapes, sprites and text onto a pygame surface."""

from __future__ import annotations

import math
import os
from typing import Sequence

import pygame

from .core import Color, Rect, Transform

BACKGROUND_COLOR: Color = (20, 112, 69, 255)
CIRCLE_SEGMENTS = 100
SHADOW_OFFSET = 5.0
SHADOW_ALPHA = 70


def _int_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(round(rect.x), round(rect.y), round(rect.w), round(rect.h))


def _sprite_rect(transform: Transform) -> Rect:
    position, scale = transform.position, transform.scale
    return Rect(
        position.x - scale.x * 0.5,
        position.y - scale.y * 0.5,
        scale.x,
        scale.y,
    )


class ResourceManager:
    """Keeps loaded textures and fonts under string identifiers."""

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}
        self._fonts: dict[str, pygame.font.Font] = {}

    def load_texture(self, texture_id: str, path: str | os.PathLike[str]) -> bool:
        """Load an image file; return False if it cannot be read."""
        try:
            surface = pygame.image.load(os.fspath(path))
        except (pygame.error, OSError):
            return False
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        self._textures[texture_id] = surface
        return True

    def texture(self, texture_id: str) -> pygame.Surface | None:
        """The texture stored under the identifier, or None."""
        return self._textures.get(texture_id)

    def load_font(self, font_id: str, path: str | os.PathLike[str], size: int) -> bool:
        """Load a TrueType font; return False if it cannot be read."""
        pygame.font.init()
        try:
            font = pygame.font.Font(os.fspath(path), int(size))
        except (pygame.error, OSError):
            return False
        self._fonts[font_id] = font
        return True

    def font(self, font_id: str) -> pygame.font.Font | None:
        """The font stored under the identifier, or None."""
        return self._fonts.get(font_id)

    def cleanup(self) -> None:
        """Forget every loaded texture and font."""
        self._textures.clear()
        self._fonts.clear()


class Renderer:
    """Draws onto a target surface with alpha blending."""

    def __init__(self, target: pygame.Surface, resources: ResourceManager | None = None) -> None:
        self.target = target
        self.resources = resources if resources is not None else ResourceManager()

    def clear(self) -> None:
        """Fill the whole target with the table background colour."""
        self.target.fill(BACKGROUND_COLOR)

    def present(self) -> None:
        """Show the frame if the target is the display surface."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.target:
            pygame.display.flip()

    def load_texture(self, texture_id: str, path: str | os.PathLike[str]) -> bool:
        return self.resources.load_texture(texture_id, path)

    def load_font(self, font_id: str, path: str | os.PathLike[str], size: int) -> bool:
        return self.resources.load_font(font_id, path, size)

    def draw_rect(self, rect: Rect, color: Color) -> None:
        """Fill a rectangle, blending by the colour's alpha."""
        area = _int_rect(rect)
        if area.width <= 0 or area.height <= 0:
            return
        overlay = pygame.Surface(area.size, pygame.SRCALPHA)
        overlay.fill(color)
        self.target.blit(overlay, area.topleft)

    def draw_transform_rect(self, transform: Transform, color: Color) -> None:
        """Fill the rectangle whose corner is the position and whose size is the scale."""
        position, scale = transform.position, transform.scale
        self.draw_rect(Rect(position.x, position.y, scale.x, scale.y), color)

    def draw_circle(self, center: Sequence[int], radius: int, color: Color) -> None:
        """Draw a dotted circle outline."""
        cx, cy = int(center[0]), int(center[1])
        for segment in range(CIRCLE_SEGMENTS):
            theta = 2.0 * math.pi * segment / CIRCLE_SEGMENTS
            x = int(radius * math.cos(theta))
            y = int(radius * math.sin(theta))
            self._plot(cx + x, cy + y, color)

    def draw_texture(self, texture_id: str, rect: Rect, rotation: float = 0.0) -> None:
        """Stretch a whole texture over a rectangle, rotated clockwise in degrees."""
        texture = self.resources.texture(texture_id)
        if texture is None:
            return
        destination = _int_rect(rect)
        if destination.width <= 0 or destination.height <= 0:
            return
        image = pygame.transform.scale(texture, destination.size)
        self._blit_rotated(image, destination, rotation)

    def draw_sprite(
        self, texture_id: str, transform: Transform, columns: int, rows: int, frame: int
    ) -> None:
        """Draw one frame of a sprite sheet centred on the transform."""
        image, destination = self._prepare_frame(texture_id, transform, columns, rows, frame)
        if image is not None:
            self.target.blit(image, destination.topleft)

    def draw_sprite_shadowed(
        self,
        texture_id: str,
        transform: Transform,
        rotation: float,
        columns: int,
        rows: int,
        frame: int,
    ) -> None:
        """Draw a rotated sprite frame over a faint offset shadow."""
        image, destination = self._prepare_frame(texture_id, transform, columns, rows, frame)
        if image is None:
            return
        shadow = image.copy()
        shadow.fill((0, 0, 0, SHADOW_ALPHA), special_flags=pygame.BLEND_RGBA_MULT)
        offset = round(SHADOW_OFFSET)
        self._blit_rotated(shadow, destination.move(offset, offset), rotation)
        self._blit_rotated(image, destination, rotation)

    def draw_text(self, text: str, font_id: str, color: Color, x: float, y: float) -> None:
        """Draw text centred on the given point."""
        font = self.resources.font(font_id)
        if font is None or not text:
            return
        surface = font.render(text, True, tuple(color[:3]))
        if len(color) > 3 and color[3] < 255:
            surface.set_alpha(color[3])
        width, height = surface.get_size()
        self.target.blit(surface, (round(x - width * 0.5), round(y - height * 0.5)))

    def _plot(self, x: int, y: int, color: Color) -> None:
        if not self.target.get_rect().collidepoint(x, y):
            return
        alpha = color[3] if len(color) > 3 else 255
        if alpha >= 255:
            self.target.set_at((x, y), tuple(color[:3]))
            return
        existing = self.target.get_at((x, y))
        factor = alpha / 255.0
        blended = tuple(
            round(new * factor + old * (1.0 - factor))
            for new, old in zip(color[:3], (existing.r, existing.g, existing.b))
        )
        self.target.set_at((x, y), blended)

    def _blit_rotated(self, image: pygame.Surface, destination: pygame.Rect, rotation: float) -> None:
        if rotation:
            image = pygame.transform.rotate(image, -rotation)
        self.target.blit(image, image.get_rect(center=destination.center).topleft)

    def _prepare_frame(
        self, texture_id: str, transform: Transform, columns: int, rows: int, frame: int
    ) -> tuple[pygame.Surface | None, pygame.Rect]:
        destination = _int_rect(_sprite_rect(transform))
        texture = self.resources.texture(texture_id)
        if texture is None or destination.width <= 0 or destination.height <= 0:
            return None, destination
        frame_width = texture.get_width() // columns
        frame_height = texture.get_height() // rows
        if frame_width <= 0:
            return None, destination
        source = pygame.Rect(
            (frame % columns) * frame_width,
            (frame // rows) * frame_height,
            frame_width,
            frame_width,
        )
        image = pygame.Surface((frame_width, frame_width), pygame.SRCALPHA)
        image.blit(texture, (0, 0), source)
        return pygame.transform.scale(image, destination.size), destination