"""Word extraction from a board that already carries the move's tiles.

The move's tiles form one main word along the placement axis; every newly
placed tile may also start a perpendicular cross word. Each word keeps the
split between new and pre-existing positions, which the scorer needs to
apply premiums to new tiles only.
"""
from __future__ import annotations

from collections.abc import Collection, Sequence

from .board import Board
from .rules import placement_direction
from .types import Direction, Placement, Position, WordAnalysis


def find_word_at(
    board: Board,
    start: Position,
    direction: Direction,
    new_positions: Collection[Position],
) -> WordAnalysis | None:
    """Contiguous run of tiles through `start` along `direction`.

    Walks back to the first tile of the run, then forward to the first empty
    square or the board edge. Returns None if `start` holds no tile.
    """
    if not board.has_tile(start):
        return None
    dr, dc = direction.step
    pos = start
    while board.has_tile(pos.shifted(-dr, -dc)):
        pos = pos.shifted(-dr, -dc)

    letters: list[str] = []
    positions: list[Position] = []
    new_tiles: list[Position] = []
    existing_tiles: list[Position] = []
    while board.has_tile(pos):
        tile = board.cell_at(pos).tile
        assert tile is not None
        letters.append(tile.face)
        positions.append(pos)
        (new_tiles if pos in new_positions else existing_tiles).append(pos)
        pos = pos.shifted(dr, dc)

    return WordAnalysis(
        word="".join(letters),
        positions=tuple(positions),
        direction=direction,
        new_tiles=tuple(new_tiles),
        existing_tiles=tuple(existing_tiles),
    )


def find_main_word(board: Board, placements: Sequence[Placement]) -> WordAnalysis | None:
    """Word along the move's axis.

    A single tile takes the longer of its two runs; vertical wins only when
    strictly longer. Several tiles use their shared row or column, scanned
    from the leftmost/topmost placement.
    """
    if not placements:
        return None
    new_positions = {p.position for p in placements}
    if len(placements) == 1:
        pos = placements[0].position
        horizontal = find_word_at(board, pos, Direction.HORIZONTAL, new_positions)
        vertical = find_word_at(board, pos, Direction.VERTICAL, new_positions)
        if vertical and (not horizontal or len(vertical.word) > len(horizontal.word)):
            return vertical
        return horizontal

    positions = [p.position for p in placements]
    direction = placement_direction(positions)
    if direction is None:
        return None
    start = min(positions, key=lambda p: p.col if direction is Direction.HORIZONTAL else p.row)
    return find_word_at(board, start, direction, new_positions)


def analyze_words_formed(board: Board, placements: Sequence[Placement]) -> list[WordAnalysis]:
    """Main word (if longer than one letter) followed by cross words."""
    new_positions = {p.position for p in placements}
    words: list[WordAnalysis] = []
    seen: set[tuple[Position, Direction]] = set()

    main = find_main_word(board, placements)
    if main is not None:
        axis = main.direction
        if len(main.word) > 1:
            words.append(main)
            seen.add((main.start, main.direction))
    else:
        axis = placement_direction([p.position for p in placements]) or Direction.HORIZONTAL

    cross_axis = axis.perpendicular
    for placement in placements:
        cross = find_word_at(board, placement.position, cross_axis, new_positions)
        if cross is None or len(cross.word) <= 1:
            continue
        key = (cross.start, cross.direction)
        if key in seen:
            continue
        seen.add(key)
        words.append(cross)

    return words
