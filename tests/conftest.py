"""Pytest configuration and shared fixtures.

- `empty_board`: a fresh 15x15 board
- `word_placements`: builds placements for a word (lowercase letter = blank)
- `word_list`: small in-memory dictionary
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from scrabcore.core.board import Board
from scrabcore.core.dictionary import WordList
from scrabcore.core.tiles import create_tile
from scrabcore.core.types import Placement, Position

WORDS = [
    "CAT", "CATS", "COX", "AT", "AA", "TA", "TT", "AS", "HES", "QI", "QIS",
    "QUITE", "PLAYING", "ATE", "AXE",
]


def make_word_placements(
    word: str, start: tuple[int, int], horizontal: bool = True
) -> list[Placement]:
    r, c = start
    placements: list[Placement] = []
    for i, ch in enumerate(word):
        pos = Position(r, c + i) if horizontal else Position(r + i, c)
        if ch.islower():
            placements.append(Placement(create_tile("BLANK"), pos, ch.upper()))
        else:
            placements.append(Placement(create_tile(ch), pos))
    return placements


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def word_placements() -> Callable[..., list[Placement]]:
    return make_word_placements


@pytest.fixture
def word_list() -> WordList:
    return WordList.from_words(WORDS)


def grid_with(*entries: tuple[int, int, str]) -> list[str]:
    """15x15 grid with single letters at (row, col)."""
    rows = [["."] * 15 for _ in range(15)]
    for r, c, ch in entries:
        rows[r][c] = ch
    return ["".join(row) for row in rows]


@pytest.fixture
def grid() -> Callable[..., list[str]]:
    return grid_with


def word_grid(word: str, start: tuple[int, int], horizontal: bool = True) -> list[str]:
    r, c = start
    cells = [(r, c + i, ch) if horizontal else (r + i, c, ch) for i, ch in enumerate(word)]
    return grid_with(*cells)


@pytest.fixture
def board_with_word() -> Callable[..., Board]:
    """Board holding a single word, e.g. board_with_word("CAT", (7, 7))."""

    def _make(word: str, start: tuple[int, int], horizontal: bool = True) -> Board:
        return Board.from_grid(word_grid(word, start, horizontal))

    return _make
