from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..config import DEFAULT_VALIDATOR_CONFIG, ValidatorConfig
from .board import CENTER, Board
from .tiles import is_valid_letter
from .types import Direction, Placement, PlacementValidation, Position

log = logging.getLogger("scrabcore.rules")


def placement_direction(positions: Sequence[Position]) -> Direction | None:
    """Shared axis of two or more positions, or None (also for a single one)."""
    if len(positions) < 2:
        return None
    if all(p.row == positions[0].row for p in positions):
        return Direction.HORIZONTAL
    if all(p.col == positions[0].col for p in positions):
        return Direction.VERTICAL
    return None


def positions_in_line(positions: Sequence[Position]) -> bool:
    """True when all positions share a row or a column."""
    return len(positions) < 2 or placement_direction(positions) is not None


def are_positions_adjacent(a: Position, b: Position) -> bool:
    return abs(a.row - b.row) + abs(a.col - b.col) == 1


def position_distance(a: Position, b: Position) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


def sort_positions(positions: Iterable[Position]) -> list[Position]:
    """Row-major order."""
    return sorted(positions)


def covers_center(placements: Iterable[Placement]) -> bool:
    return any(p.position == CENTER for p in placements)


def is_adjacent_to_existing(board: Board, position: Position) -> bool:
    return any(board.has_tile(n) for n in position.neighbors())


def connected_to_existing(board: Board, placements: Iterable[Placement]) -> bool:
    """At least one placement touches a tile already on `board` (4-connected)."""
    return any(is_adjacent_to_existing(board, p.position) for p in placements)


def alignment_error(positions: Sequence[Position]) -> str | None:
    """Straight-line and gap-free check for the positions of one move."""
    if len(positions) <= 1:
        return None
    direction = placement_direction(positions)
    if direction is None:
        return "All tiles must be placed in the same row or column"
    if direction is Direction.HORIZONTAL:
        coords = sorted(p.col for p in positions)
    else:
        coords = sorted(p.row for p in positions)
    if any(b - a != 1 for a, b in zip(coords, coords[1:])):
        return "Tiles must be placed consecutively without gaps"
    return None


def validate_placements(
    board: Board,
    placements: Sequence[Placement],
    config: ValidatorConfig = DEFAULT_VALIDATOR_CONFIG,
) -> PlacementValidation:
    """Geometric legality of a batch of placements against `board`.

    Independent problems are all reported. A placement that is out of bounds,
    duplicated or on an occupied square is not checked any further.
    """
    result = PlacementValidation()
    seen: set[Position] = set()

    for placement in placements:
        pos = placement.position
        if not pos.in_bounds:
            result.fail(f"Position {pos} is out of bounds")
            continue
        if pos in seen:
            result.fail(f"Multiple tiles placed at position {pos}")
            continue
        seen.add(pos)
        if board.has_tile(pos):
            result.fail(f"Position {pos} is already occupied")
            continue

        tile = placement.tile
        if tile.is_blank:
            if not config.allow_blank_tiles:
                result.fail("Blank tiles are not allowed")
                continue
            letter = placement.assigned_letter
            if not letter or len(letter) != 1:
                result.fail(f"Blank tile at {pos} must be assigned a letter")
                continue
            if not is_valid_letter(letter):
                result.fail(f"Invalid letter '{letter}' assigned to blank tile")
                continue
        elif placement.assigned_letter is not None:
            result.warnings.append(f"Assigned letter ignored for non-blank tile at {pos}")

        result.affected_positions.append(pos)

    error = alignment_error([p.position for p in placements])
    if error:
        result.fail(error)

    if not result.is_valid:
        log.debug("Placement rejected: %s", "; ".join(result.errors))
    return result
