from __future__ import annotations

from scrabcore.core.board import Board
from scrabcore.core.types import Direction, Position
from scrabcore.core.words import analyze_words_formed, find_main_word, find_word_at


def _analyze(board: Board, placements):
    return analyze_words_formed(board.apply_placements(placements), placements)


def test_first_word_on_empty_board(empty_board: Board, word_placements) -> None:
    words = _analyze(empty_board, word_placements("CAT", (7, 7)))
    assert len(words) == 1
    w = words[0]
    assert w.word == "CAT"
    assert w.direction is Direction.HORIZONTAL
    assert w.positions == (Position(7, 7), Position(7, 8), Position(7, 9))
    assert w.existing_tiles == ()
    assert w.is_main_word


def test_extension_partitions_new_and_existing(board_with_word, word_placements) -> None:
    board = board_with_word("CAT", (7, 7))
    words = _analyze(board, word_placements("S", (7, 10)))
    assert [w.word for w in words] == ["CATS"]
    cats = words[0]
    assert cats.new_tiles == (Position(7, 10),)
    assert cats.existing_tiles == (Position(7, 7), Position(7, 8), Position(7, 9))
    assert cats.is_main_word


def test_vertical_main_word_through_existing_tile(board_with_word, word_placements) -> None:
    board = board_with_word("CAT", (7, 7))
    words = _analyze(board, word_placements("OX", (8, 7), horizontal=False))
    assert [w.word for w in words] == ["COX"]
    assert words[0].direction is Direction.VERTICAL
    assert words[0].existing_tiles == (Position(7, 7),)


def test_parallel_play_forms_cross_words(board_with_word, word_placements) -> None:
    board = board_with_word("CAT", (7, 7))
    words = _analyze(board, word_placements("AT", (8, 8)))
    assert [w.word for w in words] == ["AT", "AA", "TT"]
    main, *cross = words
    assert main.direction is Direction.HORIZONTAL
    assert all(w.direction is Direction.VERTICAL for w in cross)
    assert cross[0].existing_tiles == (Position(7, 8),)
    assert cross[0].new_tiles == (Position(8, 8),)


def test_single_tile_forms_two_words(grid, word_placements) -> None:
    board = Board.from_grid(grid((7, 6, "H"), (7, 7, "E"), (6, 8, "A")))
    words = _analyze(board, word_placements("S", (7, 8)))
    assert [w.word for w in words] == ["HES", "AS"]
    assert words[0].direction is Direction.HORIZONTAL
    # one new tile in a word longer than one letter counts as a main word
    assert all(w.is_main_word for w in words)


def test_single_tile_tie_prefers_horizontal(grid, word_placements) -> None:
    board = Board.from_grid(grid((7, 6, "A"), (6, 7, "A")))
    ps = word_placements("T", (7, 7))
    main = find_main_word(board.apply_placements(ps), ps)
    assert main is not None
    assert main.word == "AT"
    assert main.direction is Direction.HORIZONTAL


def test_single_tile_vertical_when_strictly_longer(grid, word_placements) -> None:
    board = Board.from_grid(grid((7, 6, "A"), (5, 7, "C"), (6, 7, "A")))
    ps = word_placements("T", (7, 7))
    words = _analyze(board, ps)
    assert [w.word for w in words] == ["CAT", "AT"]
    assert words[0].direction is Direction.VERTICAL


def test_isolated_single_tile_forms_no_word(empty_board: Board, word_placements) -> None:
    assert _analyze(empty_board, word_placements("A", (3, 3))) == []


def test_find_word_at_empty_square(empty_board: Board) -> None:
    assert find_word_at(empty_board, Position(0, 0), Direction.HORIZONTAL, set()) is None


def test_word_reaches_board_edge(board_with_word, word_placements) -> None:
    board = board_with_word("CA", (7, 12))
    words = _analyze(board, word_placements("T", (7, 14)))
    assert [w.word for w in words] == ["CAT"]
    assert words[0].positions[-1] == Position(7, 14)


def test_blank_reads_as_assigned_letter(empty_board: Board, word_placements) -> None:
    words = _analyze(empty_board, word_placements("CaT", (7, 7)))
    assert words[0].word == "CAT"
