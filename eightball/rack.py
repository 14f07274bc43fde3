"""Generation of the triangular rack of object balls."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class BallPlacement:
    """A ball id and its row and column within the rack."""

    number: int
    row: int
    column: int


def generate_rack(rng: random.Random | None = None) -> list[BallPlacement]:
    """Return the fifteen ball placements of a fresh rack, row by row."""
    rng = rng if rng is not None else random.Random()

    solids = [1, 2, 3, 4, 5, 6]
    stripes = [8, 9, 10, 11, 12, 13, 14]
    corner_left = solids.pop()
    corner_right = stripes.pop()

    mixed = solids + stripes
    rng.shuffle(mixed)
    remaining = iter(mixed)

    fixed = {
        (0, 0): 0,
        (2, 1): 7,
        (1, 0): corner_left,
        (1, 1): corner_right,
    }

    return [
        BallPlacement(fixed.get((row, column)) if (row, column) in fixed else next(remaining), row, column)
        for row in range(5)
        for column in range(row + 1)
    ]