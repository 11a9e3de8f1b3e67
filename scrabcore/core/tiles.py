from __future__ import annotations

import re
import uuid
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, replace

from .types import Tile

BLANK = "BLANK"
TOTAL_TILES = 100
RACK_SIZE = 7

_LETTER_RE = re.compile(r"[A-Z]")


@dataclass(frozen=True)
class LetterSpec:
    """Count and point value of one letter in the tile set."""

    count: int
    points: int


# Standard English 100-tile set.
TILE_DISTRIBUTION: dict[str, LetterSpec] = {
    "A": LetterSpec(9, 1), "B": LetterSpec(2, 3), "C": LetterSpec(2, 3),
    "D": LetterSpec(4, 2), "E": LetterSpec(12, 1), "F": LetterSpec(2, 4),
    "G": LetterSpec(3, 2), "H": LetterSpec(2, 4), "I": LetterSpec(9, 1),
    "J": LetterSpec(1, 8), "K": LetterSpec(1, 5), "L": LetterSpec(4, 1),
    "M": LetterSpec(2, 3), "N": LetterSpec(6, 1), "O": LetterSpec(8, 1),
    "P": LetterSpec(2, 3), "Q": LetterSpec(1, 10), "R": LetterSpec(6, 1),
    "S": LetterSpec(4, 1), "T": LetterSpec(6, 1), "U": LetterSpec(4, 1),
    "V": LetterSpec(2, 4), "W": LetterSpec(2, 4), "X": LetterSpec(1, 8),
    "Y": LetterSpec(2, 4), "Z": LetterSpec(1, 10),
    BLANK: LetterSpec(2, 0),
}


def is_valid_letter(letter: str | None) -> bool:
    """True for exactly one uppercase A-Z character."""
    return letter is not None and _LETTER_RE.fullmatch(letter) is not None


def get_tile_points() -> dict[str, int]:
    """Point value per letter (blank under the key 'BLANK')."""
    return {letter: entry.points for letter, entry in TILE_DISTRIBUTION.items()}


def create_tile(letter: str, tile_id: str | None = None) -> Tile:
    """Create a tile for `letter` ('A'..'Z' or 'BLANK')."""
    key = letter.upper()
    entry = TILE_DISTRIBUTION.get(key)
    if entry is None:
        raise ValueError(f"Invalid tile letter: {letter}")
    is_blank = key == BLANK
    return Tile(
        id=tile_id or f"tile_{uuid.uuid4().hex[:12]}",
        letter="" if is_blank else key,
        points=entry.points,
        is_blank=is_blank,
    )


def designate_blank_tile(tile: Tile, letter: str) -> Tile:
    """Return a copy of a blank tile standing for `letter`."""
    if not tile.is_blank:
        raise ValueError("Can only designate blank tiles")
    upper = letter.upper()
    if not is_valid_letter(upper):
        raise ValueError("Designated letter must be a single letter A-Z")
    return replace(tile, letter=upper, assigned_letter=upper)


def reset_blank_tile(tile: Tile) -> Tile:
    if not tile.is_blank:
        raise ValueError("Can only reset blank tiles")
    return replace(tile, letter="", assigned_letter=None)


def count_tiles_by_letter(tiles: Iterable[Tile]) -> dict[str, int]:
    counts = Counter(BLANK if t.is_blank else t.letter for t in tiles)
    return dict(counts)


def validate_tile_distribution() -> list[str]:
    """Sanity checks of TILE_DISTRIBUTION; returns a list of problems (empty if OK)."""
    errors: list[str] = []
    total = sum(entry.count for entry in TILE_DISTRIBUTION.values())
    if total != TOTAL_TILES:
        errors.append(f"Total tile count is {total}, expected {TOTAL_TILES}")
    for letter, entry in TILE_DISTRIBUTION.items():
        if entry.count < 0:
            errors.append(f"Negative count for {letter}: {entry.count}")
        if entry.points < 0:
            errors.append(f"Negative points for {letter}: {entry.points}")
    return errors
