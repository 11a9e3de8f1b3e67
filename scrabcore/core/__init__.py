"""Rules core: board model, move validation, scoring and end-game adjustments."""
from __future__ import annotations

from .board import BOARD_SIZE, CENTER, Board, OutOfBoundsError, premium_kind
from .dictionary import DictionaryUnavailableError, IsValidWord, WordList
from .endgame import calculate_end_game_scoring
from .scoring import calculate_move_score
from .types import (
    Cell,
    Direction,
    EndGameScore,
    MoveScore,
    MoveValidation,
    Placement,
    Position,
    PremiumKind,
    Tile,
    WordFormed,
)
from .validator import validate_move

__all__ = [
    "BOARD_SIZE",
    "CENTER",
    "Board",
    "Cell",
    "DictionaryUnavailableError",
    "Direction",
    "EndGameScore",
    "IsValidWord",
    "MoveScore",
    "MoveValidation",
    "OutOfBoundsError",
    "Placement",
    "Position",
    "PremiumKind",
    "Tile",
    "WordFormed",
    "WordList",
    "calculate_end_game_scoring",
    "calculate_move_score",
    "premium_kind",
    "validate_move",
]
