import pytest

from tetrisgame.kinds import TetrisColor, TetrisType
from tetrisgame.pieces import (
    GAME_BOTTOM,
    WINDOW_WIDTH,
    TetrisPiece,
    get_max_x,
)
from tetrisgame.shapes import DISPLAY_BLOCK_HEIGHT, DISPLAY_BLOCK_WIDTH, layout_blocks


def test_default_piece():
    piece = TetrisPiece()
    assert piece.x == 0
    assert piece.y == 0
    assert piece.piece_type is TetrisType.I
    assert piece.color is TetrisColor.RED
    assert piece.spin_state == 0
    assert piece.block_positions == ((0, 0), (0, 0), (0, 0), (0, 0))


def test_game_bottom_constant():
    piece = TetrisPiece(x=1000, y=2000, piece_type=TetrisType.O)
    blocks = piece.layout()
    assert max(by for _, by in blocks) + DISPLAY_BLOCK_HEIGHT == 1050
    assert max(bx for bx, _ in blocks) + DISPLAY_BLOCK_WIDTH == 465
    assert GAME_BOTTOM == 1050
    assert WINDOW_WIDTH == 465


@pytest.mark.parametrize("kind", list(TetrisType))
@pytest.mark.parametrize("spin", [0, 1, 2, 3])
def test_update_position_matches_layout(kind, spin):
    piece = TetrisPiece(x=124, y=300, piece_type=kind, spin_state=spin)
    piece.update_position()
    assert piece.block_positions == layout_blocks(kind, spin, 124, 300)
    assert len(piece.block_positions) == 4
    assert piece.block_positions[0] == (124, 300)


def test_update_position_rejects_bad_spin():
    piece = TetrisPiece(spin_state=4)
    with pytest.raises(ValueError):
        piece.update_position()


def test_adjust_position_left_edge():
    piece = TetrisPiece(x=0, y=100, piece_type=TetrisType.L)
    piece.update_position()
    before_min = min(bx for bx, _ in piece.block_positions)
    assert before_min < 0
    piece.adjust_position(WINDOW_WIDTH, GAME_BOTTOM)
    assert min(bx for bx, _ in piece.block_positions) == 0
    assert piece.x == -before_min
    assert piece.y == 100


def test_adjust_position_bottom_edge():
    piece = TetrisPiece(x=62, y=1000, piece_type=TetrisType.I, spin_state=1)
    piece.update_position()
    piece.adjust_position(WINDOW_WIDTH, GAME_BOTTOM)
    assert max(by for _, by in piece.block_positions) + DISPLAY_BLOCK_HEIGHT == GAME_BOTTOM
    assert piece.block_positions[0] == (piece.x, piece.y)
    assert piece.x == 62


def test_adjust_position_inside_is_unchanged():
    piece = TetrisPiece(x=93, y=300, piece_type=TetrisType.O)
    piece.update_position()
    before = piece.block_positions
    piece.adjust_position(WINDOW_WIDTH, GAME_BOTTOM)
    assert piece.block_positions == before
    assert (piece.x, piece.y) == (93, 300)


@pytest.mark.parametrize("kind", list(TetrisType))
@pytest.mark.parametrize("spin", [0, 1, 2, 3])
def test_layout_stays_in_playfield(kind, spin):
    piece = TetrisPiece(
        x=get_max_x(kind, DISPLAY_BLOCK_WIDTH, WINDOW_WIDTH),
        y=GAME_BOTTOM,
        piece_type=kind,
        spin_state=spin,
    )
    blocks = piece.layout()
    assert blocks == piece.block_positions
    assert max(bx for bx, _ in blocks) + DISPLAY_BLOCK_WIDTH <= WINDOW_WIDTH
    assert max(by for _, by in blocks) + DISPLAY_BLOCK_HEIGHT <= GAME_BOTTOM


def test_bottom_surface_of_vertical_i():
    piece = TetrisPiece(x=31, y=60, piece_type=TetrisType.I, spin_state=1)
    piece.update_position()
    assert piece.bottom_surface_blocks() == [(31, 60 + 3 * DISPLAY_BLOCK_HEIGHT)]


def test_bottom_surface_of_o():
    piece = TetrisPiece(x=0, y=0, piece_type=TetrisType.O)
    piece.update_position()
    assert piece.bottom_surface_blocks() == [
        (0, DISPLAY_BLOCK_HEIGHT),
        (DISPLAY_BLOCK_WIDTH, DISPLAY_BLOCK_HEIGHT),
    ]


@pytest.mark.parametrize("kind", list(TetrisType))
def test_bottom_surface_invariants(kind):
    piece = TetrisPiece(x=155, y=300, piece_type=kind, spin_state=1)
    piece.update_position()
    surface = piece.bottom_surface_blocks()
    columns = [sx for sx, _ in surface]
    assert columns == sorted(set(bx for bx, _ in piece.block_positions))
    for sx, sy in surface:
        assert sy == max(by for bx, by in piece.block_positions if bx == sx)


def test_copy_is_independent():
    piece = TetrisPiece(x=31, y=30, piece_type=TetrisType.T, color=TetrisColor.BLUE)
    piece.update_position()
    twin = piece.copy()
    assert twin == piece
    twin.x += DISPLAY_BLOCK_WIDTH
    twin.spin_state = 2
    twin.update_position()
    assert piece.x == 31
    assert piece.spin_state == 0
    assert piece.block_positions == layout_blocks(TetrisType.T, 0, 31, 30)


def test_get_max_x_i_piece():
    assert get_max_x(TetrisType.I, 31, 465) == 341


def test_get_max_x_shares_widths():
    assert get_max_x(TetrisType.S, 31, 465) == get_max_x(TetrisType.Z, 31, 465)
    assert get_max_x(TetrisType.S, 31, 465) == get_max_x(TetrisType.O, 31, 465)
    assert get_max_x(TetrisType.J, 31, 465) == get_max_x(TetrisType.T, 31, 465)
    assert get_max_x(TetrisType.L, 31, 465) == get_max_x(TetrisType.T, 31, 465)


def test_get_max_x_accepts_int():
    assert get_max_x(0, 31, 465) == get_max_x(TetrisType.I, 31, 465)


def test_get_max_x_rejects_unknown_type():
    with pytest.raises(ValueError):
        get_max_x(7, 31, 465)