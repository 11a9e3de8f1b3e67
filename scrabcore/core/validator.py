"""Move rule validation.

Runs one move through the full rule pipeline against a board snapshot:

    placements -> geometry -> temporary board -> word analysis
      -> first-move or adjacency rule -> word formation -> dictionary

Every stage reports human-readable errors. Once a stage fails the move is
rejected and later stages are skipped; only the geometry stage collects all of
its independent errors. The caller's board is never modified.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from ..config import DEFAULT_VALIDATOR_CONFIG, ValidatorConfig
from ..logging_setup import TRACE_ID_VAR
from .board import Board
from .dictionary import DictionaryUnavailableError, IsValidWord
from .rules import connected_to_existing, covers_center, validate_placements
from .types import MoveValidation, Placement, Position, WordAnalysis
from .words import analyze_words_formed

log = logging.getLogger("scrabcore.validator")


def first_move_errors(placements: Sequence[Placement], config: ValidatorConfig) -> list[str]:
    if not config.require_center_start:
        return []
    errors: list[str] = []
    if not covers_center(placements):
        errors.append("First move must pass through the center star")
    if len(placements) < 2:
        errors.append("First move must place at least 2 tiles")
    return errors


def adjacency_errors(
    board: Board, placements: Sequence[Placement], config: ValidatorConfig
) -> list[str]:
    if not config.require_adjacency:
        return []
    if connected_to_existing(board, placements):
        return []
    return ["New tiles must connect to existing tiles on the board"]


def word_formation_errors(words: Sequence[WordAnalysis]) -> list[str]:
    if not words:
        return ["No valid words formed"]
    errors: list[str] = []
    if not any(w.new_tiles for w in words):
        errors.append("Move must form at least one word with new tiles")
    for w in words:
        if len(w.word) < 2:
            errors.append(f"Word '{w.word}' is too short (minimum 2 letters)")
    return errors


def dictionary_errors(words: Sequence[WordAnalysis], is_valid_word: IsValidWord) -> list[str]:
    return [f"'{w.word}' is not a valid word" for w in words if not is_valid_word(w.word.upper())]


def validate_move(
    board: Board,
    placements: Sequence[Placement],
    is_first_move: bool | None = None,
    *,
    config: ValidatorConfig = DEFAULT_VALIDATOR_CONFIG,
    is_valid_word: IsValidWord | None = None,
) -> MoveValidation:
    """Decide whether `placements` is a legal move on `board`.

    `is_first_move=None` treats the move as the opening one when the board is
    empty. `is_valid_word` is the dictionary lookup; it is required while
    `config.validate_dictionary` is on, otherwise `DictionaryUnavailableError`
    is raised before any rule runs.
    """
    if config.validate_dictionary and is_valid_word is None:
        raise DictionaryUnavailableError(
            "Dictionary validation is enabled but no is_valid_word was provided"
        )

    result = MoveValidation()
    trace = TRACE_ID_VAR.get()

    if not placements:
        return result.reject("No tiles placed")

    geometry = validate_placements(board, placements, config)
    result.warnings.extend(geometry.warnings)
    if not geometry.is_valid:
        log.debug("[%s] move rejected on geometry: %s", trace, geometry.errors)
        return result.reject(*geometry.errors)

    temp_board = board.apply_placements(placements)
    words = analyze_words_formed(temp_board, placements)

    if is_first_move is None:
        is_first_move = board.is_empty
    if is_first_move:
        errors = first_move_errors(placements, config)
    else:
        errors = adjacency_errors(board, placements, config)
    if errors:
        log.debug("[%s] move rejected on connection rules: %s", trace, errors)
        return result.reject(*errors)

    errors = word_formation_errors(words)
    if errors:
        log.debug("[%s] move rejected on word formation: %s", trace, errors)
        return result.reject(*errors)

    if config.validate_dictionary and is_valid_word is not None:
        errors = dictionary_errors(words, is_valid_word)
        if errors:
            log.debug("[%s] move rejected by dictionary: %s", trace, errors)
            return result.reject(*errors)

    result.words_formed = [w.to_word_formed() for w in words]
    log.debug("[%s] move accepted: %s", trace, [w.word for w in words])
    return result


def find_possible_words(
    board: Board, position: Position, available_letters: Sequence[str]
) -> list[WordAnalysis]:
    """Hint generation hook. Move generation is not implemented; always empty."""
    return []
