"""Playfield state: locked blocks, the falling piece, collisions and line clears."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Sequence

from tetrisgame.kinds import TetrisColor, random_color, random_type
from tetrisgame.pieces import (
    GAME_BOTTOM,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    TetrisPiece,
    get_max_x,
)

PIECE_SIZE = 30
BLOCK_HEIGHT = 30
BLOCK_WIDTH = 31
CLEAR_DURATION = 0.3
BLINK_INTERVAL = 0.1

Position = tuple[int, int]

__all__ = [
    "BLINK_INTERVAL",
    "BLOCK_HEIGHT",
    "BLOCK_WIDTH",
    "CLEAR_DURATION",
    "GAME_BOTTOM",
    "PIECE_SIZE",
    "WINDOW_HEIGHT",
    "WINDOW_WIDTH",
    "Board",
    "OccupiedCell",
    "bottommost_block",
    "leftmost_block",
    "rightmost_block",
]


def _row(y: int) -> int:
    """Row index of a pixel y, truncating toward zero."""
    return int(y / BLOCK_HEIGHT)


def leftmost_block(positions: Sequence[Position]) -> Position:
    """Return the block with the smallest x; the first one wins a tie."""
    return min(positions, key=lambda block: block[0])


def rightmost_block(positions: Sequence[Position]) -> Position:
    """Return the block with the largest x; the first one wins a tie."""
    best = positions[0]
    for block in positions:
        if block[0] > best[0]:
            best = block
    return best


def bottommost_block(positions: Sequence[Position]) -> Position:
    """Return the block with the largest y; the first one wins a tie."""
    best = positions[0]
    for block in positions:
        if block[1] > best[1]:
            best = block
    return best


@dataclass(frozen=True)
class OccupiedCell:
    """A locked block on the playfield."""

    x: int
    y: int
    color: TetrisColor


def _in_bounds(positions: Sequence[Position]) -> bool:
    left_x, _ = leftmost_block(positions)
    right_x, _ = rightmost_block(positions)
    return left_x >= 0 and right_x + BLOCK_WIDTH <= WINDOW_WIDTH


class Board:
    """The playfield with its locked blocks and the piece currently falling."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.occupied_blocks: list[OccupiedCell] = []
        self.clear_rows: list[int] = []
        self.is_clearing = False
        self.piece = TetrisPiece()
        self.spawn_piece()

    def spawn_piece(self) -> TetrisPiece:
        """Put a new random piece at a random column on the top row."""
        piece_type = random_type(self.rng)
        max_x = get_max_x(piece_type, BLOCK_WIDTH, WINDOW_WIDTH)
        x = self.rng.randint(0, max_x // BLOCK_WIDTH) * BLOCK_WIDTH
        color = random_color(self.rng)
        self.piece = TetrisPiece(x, 0, piece_type, color)
        return self.piece

    def add_occupied_blocks(
        self, block_positions: Iterable[Position], color: TetrisColor
    ) -> None:
        """Lock the given block positions in the given colour."""
        self.occupied_blocks.extend(
            OccupiedCell(x, y, color) for x, y in block_positions
        )

    def is_occupied(self, x: int, y: int) -> bool:
        """Whether a locked block sits at pixel position (x, y)."""
        return any(cell.x == x and cell.y == y for cell in self.occupied_blocks)

    def _hits_stack(self, positions: Iterable[Position]) -> bool:
        return any(self.is_occupied(x, y) for x, y in positions)

    def is_valid_position(self, piece: TetrisPiece) -> bool:
        """Whether the piece, laid out afresh, lies within the walls and off the stack."""
        test = piece.copy()
        test.update_position()
        return _in_bounds(test.block_positions) and not self._hits_stack(
            test.block_positions
        )

    def check_side_collision(self, piece: TetrisPiece, direction: int) -> bool:
        """Whether moving the piece one column in direction (-1 or 1) would collide."""
        test = piece.copy()
        test.x += direction * BLOCK_WIDTH
        test.update_position()
        if not _in_bounds(test.block_positions):
            return True
        return self._hits_stack(test.block_positions)

    def check_collision(self, piece: TetrisPiece) -> bool:
        """Whether any of the piece's current blocks overlaps a locked block."""
        return self._hits_stack(piece.block_positions)

    def highest_occupied_y(self, bottom_surface_blocks: Iterable[Position]) -> int:
        """Return the top of the stack beneath the given columns."""
        if not self.occupied_blocks:
            return GAME_BOTTOM
        highest = 0
        for x, _ in bottom_surface_blocks:
            at_x = GAME_BOTTOM
            for cell in self.occupied_blocks:
                if cell.x == x and cell.y < at_x:
                    at_x = cell.y
            if at_x < highest or highest == 0:
                highest = at_x
        return highest

    def find_full_lines(self) -> list[int]:
        """Return the indices of full rows, in ascending order."""
        cols = WINDOW_WIDTH // BLOCK_WIDTH
        counts: dict[int, int] = {}
        for cell in self.occupied_blocks:
            row = _row(cell.y)
            counts[row] = counts.get(row, 0) + 1
        return sorted(row for row, count in counts.items() if count >= cols)

    def remove_lines(self, rows: Iterable[int]) -> None:
        """Remove the given rows and drop everything above them."""
        cleared = sorted(rows)
        cleared_set = set(cleared)
        kept: list[OccupiedCell] = []
        for cell in self.occupied_blocks:
            row = _row(cell.y)
            if row in cleared_set:
                continue
            shift = sum(1 for cleared_row in cleared if cleared_row > row)
            kept.append(OccupiedCell(cell.x, (row + shift) * BLOCK_HEIGHT, cell.color))
        self.occupied_blocks = kept
        full = self.find_full_lines()
        if full:
            self.clear_rows = full
            self.is_clearing = True

    def _lock_piece(self) -> None:
        self.piece.update_position()
        self.add_occupied_blocks(self.piece.block_positions, self.piece.color)
        self.clear_rows = self.find_full_lines()
        if self.clear_rows:
            self.is_clearing = True
        else:
            self.spawn_piece()

    def move_sideways(self, direction: int) -> bool:
        """Move the piece one column left (-1) or right (1); return whether it moved."""
        self.piece.layout()
        if self.check_side_collision(self.piece, direction):
            return False
        self.piece.x += direction * BLOCK_WIDTH
        return True

    def soft_drop(self) -> bool:
        """Move the piece down one row, locking it if it cannot move; return whether it locked."""
        self.piece.layout()
        _, bottom_y = bottommost_block(self.piece.block_positions)
        if bottom_y + BLOCK_HEIGHT >= GAME_BOTTOM:
            self._lock_piece()
            return True
        test = self.piece.copy()
        test.y += BLOCK_HEIGHT
        test.layout()
        if self.check_collision(test):
            self._lock_piece()
            return True
        self.piece.y += BLOCK_HEIGHT
        self.piece.update_position()
        return False

    def hard_drop(self) -> None:
        """Drop the piece as far as it goes and lock it."""
        while True:
            test = self.piece.copy()
            test.y += BLOCK_HEIGHT
            test.update_position()
            _, bottom_y = bottommost_block(test.block_positions)
            if bottom_y + BLOCK_HEIGHT > GAME_BOTTOM:
                break
            if not self.is_valid_position(test):
                break
            self.piece = test
        self._lock_piece()

    def rotate(self) -> bool:
        """Turn the piece to its next spin state if it fits; return whether it turned."""
        test = self.piece.copy()
        test.spin_state = (self.piece.spin_state + 1) % 4
        test.update_position()
        test.adjust_position(WINDOW_WIDTH, GAME_BOTTOM)
        if not _in_bounds(test.block_positions) or self._hits_stack(
            test.block_positions
        ):
            return False
        test.update_position()
        self.piece = test
        return True

    def finish_clearing(self) -> None:
        """Remove the rows being cleared and spawn the next piece."""
        self.remove_lines(self.clear_rows)
        self.is_clearing = False
        self.spawn_piece()