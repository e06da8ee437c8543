"""Block layouts of every piece type in every spin state."""

from __future__ import annotations

from tetrisgame.kinds import TetrisType

DISPLAY_BLOCK_WIDTH = 31
DISPLAY_BLOCK_HEIGHT = 30

Offsets = tuple[tuple[int, int], tuple[int, int], tuple[int, int], tuple[int, int]]

_I_FLAT: Offsets = ((0, 0), (1, 0), (2, 0), (3, 0))
_I_UPRIGHT: Offsets = ((0, 0), (0, 1), (0, 2), (0, 3))
_O: Offsets = ((0, 0), (1, 0), (0, 1), (1, 1))
_Z_FLAT: Offsets = ((0, 0), (1, 0), (1, 1), (2, 1))
_Z_UPRIGHT: Offsets = ((0, 0), (0, 1), (-1, 1), (-1, 2))
_S_FLAT: Offsets = ((0, 0), (1, 0), (0, 1), (-1, 1))
_S_UPRIGHT: Offsets = ((0, 0), (0, 1), (1, 1), (1, 2))

# Offsets in grid units (column, row) from the anchor block, in spin order 0..3.
# The anchor block always comes first; the order of the rest is significant.
_SHAPES: dict[TetrisType, tuple[Offsets, Offsets, Offsets, Offsets]] = {
    TetrisType.I: (_I_FLAT, _I_UPRIGHT, _I_FLAT, _I_UPRIGHT),
    TetrisType.J: (
        ((0, 0), (0, -1), (1, 0), (2, 0)),
        ((0, 0), (1, 0), (0, 1), (0, 2)),
        ((0, 0), (1, 0), (2, 0), (2, 1)),
        ((0, 0), (0, 1), (0, 2), (-1, 2)),
    ),
    TetrisType.L: (
        ((0, 0), (0, -1), (-1, 0), (-2, 0)),
        ((0, 0), (0, 1), (0, 2), (1, 2)),
        ((0, 0), (1, 0), (2, 0), (0, 1)),
        ((0, 0), (1, 0), (1, 1), (1, 2)),
    ),
    TetrisType.O: (_O, _O, _O, _O),
    TetrisType.S: (_S_FLAT, _S_UPRIGHT, _S_FLAT, _S_UPRIGHT),
    TetrisType.T: (
        ((0, 0), (1, 0), (-1, 0), (0, 1)),
        ((0, 0), (1, 0), (1, 1), (1, -1)),
        ((0, 0), (0, 1), (1, 1), (-1, 1)),
        ((0, 0), (0, 1), (1, 1), (0, 2)),
    ),
    TetrisType.Z: (_Z_FLAT, _Z_UPRIGHT, _Z_FLAT, _Z_UPRIGHT),
}


def block_offsets(piece_type: TetrisType | int, spin_state: int) -> Offsets:
    """Return the grid offsets of the four blocks of a piece.

    Raises ValueError for an unknown piece type or a spin state outside 0..3.
    """
    kind = TetrisType(piece_type)
    if not 0 <= spin_state <= 3:
        raise ValueError(f"spin state must be in 0..3, got {spin_state}")
    return _SHAPES[kind][spin_state]


def layout_blocks(
    piece_type: TetrisType | int, spin_state: int, x: int, y: int
) -> tuple[tuple[int, int], ...]:
    """Return the pixel positions of the four blocks of a piece anchored at (x, y)."""
    return tuple(
        (x + dx * DISPLAY_BLOCK_WIDTH, y + dy * DISPLAY_BLOCK_HEIGHT)
        for dx, dy in block_offsets(piece_type, spin_state)
    )