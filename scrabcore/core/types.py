from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto

BOARD_SIZE = 15


@dataclass(frozen=True, order=True)
class Position:
    """Board coordinate (row, col), 0-indexed."""

    row: int
    col: int

    @property
    def in_bounds(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def shifted(self, dr: int, dc: int) -> Position:
        return Position(self.row + dr, self.col + dc)

    def neighbors(self) -> Iterator[Position]:
        """In-bounds orthogonal neighbours: up, down, left, right."""
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            pos = self.shifted(dr, dc)
            if pos.in_bounds:
                yield pos

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


class Direction(Enum):
    """Axis along which a word is read."""

    HORIZONTAL = auto()
    VERTICAL = auto()

    @property
    def step(self) -> tuple[int, int]:
        return (0, 1) if self is Direction.HORIZONTAL else (1, 0)

    @property
    def perpendicular(self) -> Direction:
        return Direction.VERTICAL if self is Direction.HORIZONTAL else Direction.HORIZONTAL


class PremiumKind(Enum):
    """Premium square kinds. CENTER scores as a double word."""

    NORMAL = auto()
    DOUBLE_LETTER = auto()
    TRIPLE_LETTER = auto()
    DOUBLE_WORD = auto()
    TRIPLE_WORD = auto()
    CENTER = auto()

    @property
    def abbrev(self) -> str:
        match self:
            case PremiumKind.NORMAL:
                return ""
            case PremiumKind.DOUBLE_LETTER:
                return "DL"
            case PremiumKind.TRIPLE_LETTER:
                return "TL"
            case PremiumKind.DOUBLE_WORD:
                return "DW"
            case PremiumKind.TRIPLE_WORD:
                return "TW"
            case PremiumKind.CENTER:
                return "*"


def multipliers(kind: PremiumKind) -> tuple[int, int]:
    """Return the (letter, word) multiplier pair for a premium kind."""
    match kind:
        case PremiumKind.DOUBLE_LETTER:
            return 2, 1
        case PremiumKind.TRIPLE_LETTER:
            return 3, 1
        case PremiumKind.DOUBLE_WORD | PremiumKind.CENTER:
            return 1, 2
        case PremiumKind.TRIPLE_WORD:
            return 1, 3
        case PremiumKind.NORMAL:
            return 1, 1


@dataclass(frozen=True)
class Tile:
    """A single letter tile. Blanks carry no points and get a letter on placement."""

    id: str
    letter: str  # '' for an undesignated blank
    points: int
    is_blank: bool = False
    assigned_letter: str | None = None
    position: Position | None = None

    @property
    def face(self) -> str:
        if self.is_blank:
            return self.assigned_letter or self.letter
        return self.letter

    @property
    def score_value(self) -> int:
        return 0 if self.is_blank else self.points


@dataclass(frozen=True)
class Cell:
    """One board square with its premium kind and optional tile."""

    position: Position
    premium: PremiumKind = PremiumKind.NORMAL
    tile: Tile | None = None

    @property
    def is_empty(self) -> bool:
        return self.tile is None

    @property
    def is_center(self) -> bool:
        return self.premium is PremiumKind.CENTER


@dataclass(frozen=True)
class Placement:
    """A tile put on a position in this move. Blanks need `assigned_letter`."""

    tile: Tile
    position: Position
    assigned_letter: str | None = None


@dataclass(frozen=True)
class WordFormed:
    word: str
    positions: tuple[Position, ...]
    is_main_word: bool
    score: int = 0


@dataclass(frozen=True)
class WordAnalysis:
    """A word touched by the move, split into new and pre-existing tiles."""

    word: str
    positions: tuple[Position, ...]
    direction: Direction
    new_tiles: tuple[Position, ...]
    existing_tiles: tuple[Position, ...]

    @property
    def is_main_word(self) -> bool:
        return len(self.new_tiles) > 1 or (len(self.new_tiles) == 1 and len(self.word) > 1)

    @property
    def start(self) -> Position:
        return self.positions[0]

    def to_word_formed(self) -> WordFormed:
        return WordFormed(self.word, self.positions, self.is_main_word)


@dataclass
class PlacementValidation:
    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    affected_positions: list[Position] = field(default_factory=list)

    def fail(self, message: str) -> None:
        self.is_valid = False
        self.errors.append(message)


@dataclass
class MoveValidation:
    """Accept/reject decision for a move with every reason collected."""

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    words_formed: list[WordFormed] = field(default_factory=list)
    score: int = 0

    def reject(self, *messages: str) -> MoveValidation:
        self.is_valid = False
        self.errors.extend(messages)
        return self


@dataclass(frozen=True)
class TileScore:
    tile: Tile
    position: Position
    base_points: int
    letter_multiplier: int
    total_tile_points: int


@dataclass(frozen=True)
class WordScore:
    """Scored word with per-tile detail for audit and display."""

    word: str
    positions: tuple[Position, ...]
    tile_scores: tuple[TileScore, ...]
    base_score: int  # letter multipliers included
    word_multiplier: int
    final_word_score: int
    is_main_word: bool
    new_tiles_only: bool


@dataclass(frozen=True)
class BreakdownLine:
    description: str
    points: int


@dataclass(frozen=True)
class ScoreBreakdown:
    base_score: int
    letter_multipliers: int
    word_multipliers: int
    bonuses: int
    total: int
    lines: tuple[BreakdownLine, ...] = ()


@dataclass(frozen=True)
class MoveScore:
    total_score: int
    word_scores: tuple[WordScore, ...]
    bingo_bonus: int
    breakdown: ScoreBreakdown
    tiles_used: int
    new_words_formed: int


@dataclass(frozen=True)
class EndGameScore:
    player_id: str
    tiles_remaining: tuple[Tile, ...]
    penalty: int
    bonus_from_others: int
    net_adjustment: int
