"""A falling tetromino and its placement on the playfield."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from tetrisgame.kinds import TetrisColor, TetrisType
from tetrisgame.shapes import DISPLAY_BLOCK_HEIGHT, DISPLAY_BLOCK_WIDTH, layout_blocks

WINDOW_WIDTH = 465
WINDOW_HEIGHT = 1080
GAME_BOTTOM = WINDOW_HEIGHT - 30

Position = tuple[int, int]

_BLOCKS_FROM_LEFT_TO_RIGHT: dict[TetrisType, int] = {
    TetrisType.I: 3,
    TetrisType.O: 1,
    TetrisType.T: 2,
    TetrisType.S: 1,
    TetrisType.Z: 1,
    TetrisType.J: 2,
    TetrisType.L: 2,
}


def _default_blocks() -> tuple[Position, ...]:
    return ((0, 0), (0, 0), (0, 0), (0, 0))


@dataclass
class TetrisPiece:
    """A tetromino anchored at pixel position (x, y)."""

    x: int = 0
    y: int = 0
    piece_type: TetrisType = TetrisType.I
    color: TetrisColor = TetrisColor.RED
    block_positions: tuple[Position, ...] = field(default_factory=_default_blocks)
    spin_state: int = 0

    def update_position(self) -> None:
        """Recompute the block positions from the anchor, type and spin state."""
        self.block_positions = layout_blocks(
            self.piece_type, self.spin_state, self.x, self.y
        )

    def adjust_position(self, screen_width: int, screen_height: int) -> None:
        """Shift the piece so that its blocks lie inside the given area.

        The left edge is fixed first, then the right edge takes precedence;
        only the bottom edge is enforced vertically.
        """
        xs = [bx for bx, _ in self.block_positions]
        ys = [by for _, by in self.block_positions]
        min_x, max_x, max_y = min(xs), max(xs), max(ys)

        adjust_x = 0
        adjust_y = 0
        if min_x < 0:
            adjust_x = -min_x
        if max_x + DISPLAY_BLOCK_WIDTH > screen_width:
            adjust_x = screen_width - (max_x + DISPLAY_BLOCK_WIDTH)
        if max_y + DISPLAY_BLOCK_HEIGHT > screen_height:
            adjust_y = screen_height - (max_y + DISPLAY_BLOCK_HEIGHT)

        if adjust_x or adjust_y:
            self.x += adjust_x
            self.y += adjust_y
            self.block_positions = tuple(
                (bx + adjust_x, by + adjust_y) for bx, by in self.block_positions
            )

    def layout(self) -> tuple[Position, ...]:
        """Lay the piece out for drawing, keeping it inside the playfield."""
        self.update_position()
        self.adjust_position(WINDOW_WIDTH, GAME_BOTTOM)
        return self.block_positions

    def bottom_surface_blocks(self) -> list[Position]:
        """Return the lowest block of each occupied column, left to right."""
        lowest: dict[int, int] = {}
        for bx, by in sorted(self.block_positions, key=lambda block: block[0]):
            lowest[bx] = max(by, lowest.get(bx, by))
        return list(lowest.items())

    def copy(self) -> TetrisPiece:
        """Return an independent copy of this piece."""
        return replace(self)


def get_max_x(piece_type: TetrisType | int, block_width: int, window_width: int) -> int:
    """Return the largest anchor x at which a freshly spawned piece may appear."""
    blocks = _BLOCKS_FROM_LEFT_TO_RIGHT.get(TetrisType(piece_type), 2)
    return window_width - blocks * block_width - block_width