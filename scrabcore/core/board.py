from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace

from .tiles import create_tile, designate_blank_tile
from .types import BOARD_SIZE, Cell, Direction, Placement, Position, PremiumKind, Tile

__all__ = [
    "BOARD_SIZE",
    "CENTER",
    "Board",
    "BoardStatistics",
    "OutOfBoundsError",
    "board_statistics",
    "premium_kind",
    "validate_board_layout",
]

CENTER = Position(7, 7)

# Premium square coordinates (0-indexed). The centre star is classified separately.
TRIPLE_WORD_SQUARES: frozenset[tuple[int, int]] = frozenset({
    (0, 0), (0, 7), (0, 14),
    (7, 0), (7, 14),
    (14, 0), (14, 7), (14, 14),
})

DOUBLE_WORD_SQUARES: frozenset[tuple[int, int]] = frozenset({
    (1, 1), (2, 2), (3, 3), (4, 4),
    (1, 13), (2, 12), (3, 11), (4, 10),
    (10, 4), (11, 3), (12, 2), (13, 1),
    (10, 10), (11, 11), (12, 12), (13, 13),
})

TRIPLE_LETTER_SQUARES: frozenset[tuple[int, int]] = frozenset({
    (1, 5), (1, 9),
    (5, 1), (5, 5), (5, 9), (5, 13),
    (9, 1), (9, 5), (9, 9), (9, 13),
    (13, 5), (13, 9),
})

DOUBLE_LETTER_SQUARES: frozenset[tuple[int, int]] = frozenset({
    (0, 3), (0, 11),
    (2, 6), (2, 8),
    (3, 0), (3, 7), (3, 14),
    (6, 2), (6, 6), (6, 8), (6, 12),
    (7, 3), (7, 11),
    (8, 2), (8, 6), (8, 8), (8, 12),
    (11, 0), (11, 7), (11, 14),
    (12, 6), (12, 8),
    (14, 3), (14, 11),
})


class OutOfBoundsError(ValueError):
    """Position outside the 15x15 grid passed to a low-level board operation."""

    def __init__(self, position: Position) -> None:
        super().__init__(f"Invalid board position: ({position.row}, {position.col})")
        self.position = position


def premium_kind(row: int, col: int) -> PremiumKind:
    """Classify a square: centre first, then TW, DW, TL, DL, else normal."""
    if (row, col) == (CENTER.row, CENTER.col):
        return PremiumKind.CENTER
    if (row, col) in TRIPLE_WORD_SQUARES:
        return PremiumKind.TRIPLE_WORD
    if (row, col) in DOUBLE_WORD_SQUARES:
        return PremiumKind.DOUBLE_WORD
    if (row, col) in TRIPLE_LETTER_SQUARES:
        return PremiumKind.TRIPLE_LETTER
    if (row, col) in DOUBLE_LETTER_SQUARES:
        return PremiumKind.DOUBLE_LETTER
    return PremiumKind.NORMAL


def _check(position: Position) -> None:
    if not position.in_bounds:
        raise OutOfBoundsError(position)


class Board:
    """Immutable 15x15 board.

    Every update returns a new board. Untouched rows are shared between
    snapshots, so an old board stays valid after a tile is placed on a new one.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: tuple[tuple[Cell, ...], ...]) -> None:
        self._rows = rows

    @classmethod
    def empty(cls) -> Board:
        return cls(tuple(
            tuple(Cell(Position(r, c), premium_kind(r, c)) for c in range(BOARD_SIZE))
            for r in range(BOARD_SIZE)
        ))

    @classmethod
    def from_grid(cls, grid: Sequence[str], blanks: Iterable[Position] = ()) -> Board:
        """Build a board from 15 strings of 15 chars ('.' empty, 'A'..'Z' tiles).

        Positions listed in `blanks` hold designated blank tiles (0 points).
        """
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise ValueError(f"grid must be {BOARD_SIZE} rows of {BOARD_SIZE} characters")
        blank_set = set(blanks)
        board = cls.empty()
        for r, line in enumerate(grid):
            for c, ch in enumerate(line):
                if ch == ".":
                    continue
                pos = Position(r, c)
                letter = ch.upper()
                if pos in blank_set:
                    tile = designate_blank_tile(create_tile("BLANK"), letter)
                else:
                    tile = create_tile(letter)
                board = board.with_tile_placed(pos, tile)
        return board

    def to_grid(self) -> list[str]:
        return [
            "".join(cell.tile.face if cell.tile else "." for cell in row)
            for row in self._rows
        ]

    @property
    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        return self._rows

    def __iter__(self) -> Iterator[Cell]:
        for row in self._rows:
            yield from row

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    # --- Queries -------------------------------------------------------

    def cell_at(self, position: Position) -> Cell:
        _check(position)
        return self._rows[position.row][position.col]

    def get_cell(self, position: Position) -> Cell | None:
        """Like `cell_at` but returns None off the board."""
        if not position.in_bounds:
            return None
        return self._rows[position.row][position.col]

    def has_tile(self, position: Position) -> bool:
        cell = self.get_cell(position)
        return cell is not None and not cell.is_empty

    def tiles_on_board(self) -> list[tuple[Position, Tile]]:
        return [(cell.position, cell.tile) for cell in self if cell.tile is not None]

    def empty_positions(self) -> list[Position]:
        return [cell.position for cell in self if cell.is_empty]

    @property
    def is_empty(self) -> bool:
        return all(cell.is_empty for cell in self)

    def is_center_occupied(self) -> bool:
        return self.has_tile(CENTER)

    def line_from(self, start: Position, direction: Direction, length: int) -> list[Position]:
        """In-bounds positions of a run starting at `start`."""
        dr, dc = direction.step
        run = (start.shifted(dr * i, dc * i) for i in range(length))
        return [pos for pos in run if pos.in_bounds]

    # --- Copy-on-write updates -----------------------------------------

    def _with_cell(self, cell: Cell) -> Board:
        r, c = cell.position.row, cell.position.col
        row = self._rows[r]
        new_row = row[:c] + (cell,) + row[c + 1:]
        return Board(self._rows[:r] + (new_row,) + self._rows[r + 1:])

    def with_tile_placed(self, position: Position, tile: Tile) -> Board:
        """Return a new board with `tile` on `position` (tile.position is set)."""
        cell = self.cell_at(position)
        return self._with_cell(replace(cell, tile=replace(tile, position=position)))

    def with_tile_removed(self, position: Position) -> Board:
        cell = self.cell_at(position)
        return self._with_cell(replace(cell, tile=None))

    def apply_placements(self, placements: Iterable[Placement]) -> Board:
        """Return a new board with every placement applied.

        Blank tiles take their assigned letter as face.
        """
        board = self
        for p in placements:
            tile = p.tile
            if tile.is_blank:
                letter = p.assigned_letter or ""
                tile = replace(tile, letter=letter, assigned_letter=letter or None)
            board = board.with_tile_placed(p.position, tile)
        return board


@dataclass(frozen=True)
class BoardStatistics:
    total_cells: int
    occupied_cells: int
    empty_cells: int
    occupancy_percentage: float
    premium_counts: tuple[tuple[PremiumKind, int], ...]
    is_center_occupied: bool
    is_empty: bool

    def premium_count(self, kind: PremiumKind) -> int:
        return dict(self.premium_counts).get(kind, 0)


def board_statistics(board: Board) -> BoardStatistics:
    counts = {kind: 0 for kind in PremiumKind}
    occupied = 0
    for cell in board:
        counts[cell.premium] += 1
        if not cell.is_empty:
            occupied += 1
    total = BOARD_SIZE * BOARD_SIZE
    return BoardStatistics(
        total_cells=total,
        occupied_cells=occupied,
        empty_cells=total - occupied,
        occupancy_percentage=occupied / total * 100,
        premium_counts=tuple(counts.items()),
        is_center_occupied=board.is_center_occupied(),
        is_empty=occupied == 0,
    )


_EXPECTED_PREMIUM_COUNTS: dict[PremiumKind, int] = {
    PremiumKind.TRIPLE_WORD: len(TRIPLE_WORD_SQUARES),
    PremiumKind.DOUBLE_WORD: len(DOUBLE_WORD_SQUARES),
    PremiumKind.TRIPLE_LETTER: len(TRIPLE_LETTER_SQUARES),
    PremiumKind.DOUBLE_LETTER: len(DOUBLE_LETTER_SQUARES),
}


def validate_board_layout(board: Board) -> list[str]:
    """Sanity checks of the grid shape and premium squares; returns a list of problems."""
    errors: list[str] = []
    rows = board.rows
    if len(rows) != BOARD_SIZE:
        errors.append(f"Board height is {len(rows)}, expected {BOARD_SIZE}")
    for r, row in enumerate(rows):
        if len(row) != BOARD_SIZE:
            errors.append(f"Row {r} has {len(row)} columns, expected {BOARD_SIZE}")

    center_row = rows[CENTER.row] if len(rows) > CENTER.row else ()
    if len(center_row) <= CENTER.col or not center_row[CENTER.col].is_center:
        errors.append("Center position is not correctly configured")

    counts = {kind: 0 for kind in _EXPECTED_PREMIUM_COUNTS}
    for r, row in enumerate(rows[:BOARD_SIZE]):
        for c, cell in enumerate(row[:BOARD_SIZE]):
            expected = premium_kind(r, c)
            if cell.premium is not expected:
                errors.append(
                    f"Premium square mismatch at ({r}, {c}): "
                    f"expected {expected.name}, got {cell.premium.name}"
                )
            if cell.premium in counts:
                counts[cell.premium] += 1

    for kind, expected_count in _EXPECTED_PREMIUM_COUNTS.items():
        if counts[kind] != expected_count:
            errors.append(
                f"Expected {expected_count} {kind.abbrev} squares, found {counts[kind]}"
            )
    return errors
