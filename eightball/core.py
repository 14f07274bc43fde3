"""Basic value types, enumerations and game-wide constants."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Tuple

Color = Tuple[int, int, int, int]

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
FRAME_DELAY = 1000 // FPS

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)

RANKING_FILE_PATH = "../assets/data/ranking.txt"

FONT_TITLES_PATH = "../assets/fonts/m04.ttf"
FONT_PATH = "../assets/fonts/Minitel.ttf"
FONT_LITTLE_SIZE = 15
FONT_REGULAR_SIZE = 23
FONT_TITLE_SIZE = 70

FONT_CONSOLE = "console"
FONT_TITLE = "titleFont"
FONT_TITLE_BIG = "titleBig"
FONT_STANDARD = "standar"

TEXTURE_BALLS_PATH = "../assets/images/balls.png"
TEXTURE_BALLS = "balls"
BALLS_ROWS_COLUMNS = 4

TABLE_PATH = "../assets/images/table.png"
TEXTURE_TABLE = "table"


@dataclass
class Vec2:
    """A mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __abs__(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def contains(self, point: Vec2) -> bool:
        """Return True if the point lies inside the rectangle, edges included."""
        return (
            self.x <= point.x <= self.x + self.w
            and self.y <= point.y <= self.y + self.h
        )


@dataclass
class Transform:
    """Position, rotation in degrees and scale of an object."""

    position: Vec2 = field(default_factory=Vec2)
    rotation: float = 0.0
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))


@dataclass
class CollisionInfo:
    """Result of a successful collision test."""

    normal: Vec2 = field(default_factory=Vec2)
    contact_point: Vec2 = field(default_factory=Vec2)
    penetration: float = 0.0


class SceneType(Enum):
    MAIN_MENU = auto()
    GAME = auto()
    RESULT = auto()


class GameObjectType(Enum):
    NONE = auto()
    BALL = auto()
    WALL = auto()
    HOLE = auto()
    UI_BUTTON = auto()