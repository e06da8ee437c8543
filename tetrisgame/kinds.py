"""Piece kinds and block colours."""

from __future__ import annotations

import random
from enum import IntEnum


class TetrisType(IntEnum):
    """The seven tetromino shapes."""

    I = 0  # noqa: E741
    J = 1
    L = 2
    O = 3  # noqa: E741
    S = 4
    T = 5
    Z = 6


class TetrisColor(IntEnum):
    """Block colours; each value is an index into the texture palette."""

    RED = 1
    ORANGE = 2
    YELLOW = 3
    GREEN = 4
    TEAL = 5
    BLUE = 6
    PURPLE = 7
    WHITE = 8
    GREY = 9


def random_type(rng: random.Random) -> TetrisType:
    """Draw a piece type uniformly from all seven shapes."""
    return TetrisType(rng.randint(min(TetrisType), max(TetrisType)))


def random_color(rng: random.Random) -> TetrisColor:
    """Draw a colour uniformly from all nine colours."""
    return TetrisColor(rng.randint(min(TetrisColor), max(TetrisColor)))