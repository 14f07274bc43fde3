"""Two-player eight-ball pool game with a small 2D physics engine."""

__version__ = "0.1.0"