from __future__ import annotations

from dataclasses import replace

import pytest

from scrabcore.core.board import Board, OutOfBoundsError, board_statistics, validate_board_layout
from scrabcore.core.tiles import create_tile
from scrabcore.core.types import Placement, Position, PremiumKind


def test_empty_board_queries(empty_board: Board) -> None:
    assert empty_board.is_empty
    assert not empty_board.is_center_occupied()
    assert empty_board.tiles_on_board() == []
    assert len(empty_board.empty_positions()) == 225
    cell = empty_board.cell_at(Position(7, 7))
    assert cell.is_empty
    assert cell.premium is PremiumKind.CENTER


def test_with_tile_placed_leaves_original_untouched(empty_board: Board) -> None:
    tile = create_tile("Q", tile_id="q1")
    pos = Position(7, 7)
    after = empty_board.with_tile_placed(pos, tile)

    assert empty_board.cell_at(pos).is_empty
    assert empty_board.is_empty
    placed = after.cell_at(pos).tile
    assert placed is not None
    assert placed.id == "q1"
    assert placed.position == pos
    assert after.is_center_occupied()
    assert after.tiles_on_board() == [(pos, placed)]
    assert len(after.empty_positions()) == 224


def test_cell_position_matches_tile_position(board_with_word) -> None:
    board = board_with_word("CAT", (3, 4))
    for pos, tile in board.tiles_on_board():
        assert tile.position == pos
        assert board.cell_at(pos).position == pos


def test_with_tile_removed(empty_board: Board) -> None:
    pos = Position(2, 2)
    board = empty_board.with_tile_placed(pos, create_tile("A"))
    cleared = board.with_tile_removed(pos)
    assert cleared.cell_at(pos).is_empty
    assert board.has_tile(pos)
    assert cleared == empty_board


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (15, 3), (3, 15)])
def test_out_of_bounds_is_fatal(empty_board: Board, row: int, col: int) -> None:
    with pytest.raises(OutOfBoundsError):
        empty_board.with_tile_placed(Position(row, col), create_tile("A"))
    with pytest.raises(OutOfBoundsError):
        empty_board.cell_at(Position(row, col))
    assert empty_board.get_cell(Position(row, col)) is None
    assert empty_board.is_empty


def test_grid_round_trip_keeps_blanks() -> None:
    rows = ["." * 15] * 7 + ["....CAT........"] + ["." * 15] * 7
    board = Board.from_grid(rows, blanks=[Position(7, 5)])
    assert board.to_grid() == rows
    blank = board.cell_at(Position(7, 5)).tile
    assert blank is not None
    assert blank.is_blank
    assert blank.face == "A"
    assert blank.score_value == 0


def test_from_grid_rejects_bad_shape() -> None:
    with pytest.raises(ValueError):
        Board.from_grid(["..."])


def test_apply_placements_uses_assigned_letter(empty_board: Board) -> None:
    blank = create_tile("BLANK")
    board = empty_board.apply_placements([Placement(blank, Position(7, 7), "E")])
    tile = board.cell_at(Position(7, 7)).tile
    assert tile is not None
    assert tile.face == "E"
    assert tile.is_blank
    assert empty_board.is_empty


def test_line_from_clips_to_board(empty_board: Board) -> None:
    from scrabcore.core.types import Direction

    line = empty_board.line_from(Position(0, 12), Direction.HORIZONTAL, 5)
    assert line == [Position(0, 12), Position(0, 13), Position(0, 14)]


def test_neighbors_stay_on_board() -> None:
    assert set(Position(0, 0).neighbors()) == {Position(1, 0), Position(0, 1)}
    assert len(list(Position(7, 7).neighbors())) == 4


def test_board_statistics(board_with_word) -> None:
    stats = board_statistics(board_with_word("CAT", (7, 7)))
    assert stats.occupied_cells == 3
    assert stats.empty_cells == 222
    assert stats.is_center_occupied
    assert not stats.is_empty
    assert stats.premium_count(PremiumKind.DOUBLE_LETTER) == 24
    assert stats.premium_count(PremiumKind.CENTER) == 1
    assert hash(stats) == hash(board_statistics(board_with_word("CAT", (7, 7))))


def test_standard_layout_is_valid(empty_board: Board, board_with_word) -> None:
    assert validate_board_layout(empty_board) == []
    assert validate_board_layout(board_with_word("CAT", (7, 7))) == []


def test_layout_reports_wrong_premium() -> None:
    rows = [list(row) for row in Board.empty().rows]
    rows[0][0] = replace(rows[0][0], premium=PremiumKind.NORMAL)
    board = Board(tuple(tuple(row) for row in rows))
    assert validate_board_layout(board) == [
        "Premium square mismatch at (0, 0): expected TRIPLE_WORD, got NORMAL",
        "Expected 8 TW squares, found 7",
    ]


def test_layout_reports_short_board() -> None:
    board = Board(Board.empty().rows[:14])
    errors = validate_board_layout(board)
    assert errors[0] == "Board height is 14, expected 15"
    assert "Expected 8 TW squares, found 5" in errors
