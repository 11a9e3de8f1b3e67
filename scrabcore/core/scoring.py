from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .board import Board
from .tiles import RACK_SIZE
from .types import (
    BreakdownLine,
    MoveScore,
    Placement,
    Position,
    ScoreBreakdown,
    Tile,
    TileScore,
    WordAnalysis,
    WordFormed,
    WordScore,
    multipliers,
)

log = logging.getLogger("scrabcore.scoring")


def tile_points(tile: Tile) -> int:
    """Points a tile is worth; blanks are worth 0."""
    return tile.score_value


def tiles_value(tiles: Iterable[Tile]) -> int:
    return sum(tile_points(t) for t in tiles)


def is_bingo_move(placements: Sequence[Placement]) -> bool:
    return len(placements) == RACK_SIZE


def score_word(
    board: Board,
    word: WordFormed | WordAnalysis,
    new_positions: set[Position],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> WordScore:
    """Score one word on a board that already holds the move's tiles.

    Premiums count only under tiles placed in this move. Word multipliers
    multiply together (two double-word squares give x4).
    """
    tile_scores: list[TileScore] = []
    base_score = 0
    word_multiplier = 1

    for pos in word.positions:
        cell = board.cell_at(pos)
        if cell.tile is None:
            continue
        base = tile_points(cell.tile)
        letter_mult = tile_word_mult = 1
        if pos in new_positions and config.apply_premium_squares:
            letter_mult, tile_word_mult = multipliers(cell.premium)
        total_tile = base * letter_mult
        base_score += total_tile
        word_multiplier *= tile_word_mult
        tile_scores.append(TileScore(cell.tile, pos, base, letter_mult, total_tile))

    return WordScore(
        word=word.word,
        positions=tuple(word.positions),
        tile_scores=tuple(tile_scores),
        base_score=base_score,
        word_multiplier=word_multiplier,
        final_word_score=base_score * word_multiplier,
        is_main_word=word.is_main_word,
        new_tiles_only=all(ts.position in new_positions for ts in tile_scores),
    )


def build_breakdown(word_scores: Sequence[WordScore], bingo_bonus: int) -> ScoreBreakdown:
    base_total = letter_total = word_total = 0
    lines: list[BreakdownLine] = []

    for ws in word_scores:
        base = sum(ts.base_points for ts in ws.tile_scores)
        letter_bonus = sum(ts.base_points * (ts.letter_multiplier - 1) for ts in ws.tile_scores)
        word_bonus = ws.base_score * (ws.word_multiplier - 1)
        base_total += base
        letter_total += letter_bonus
        word_total += word_bonus

        label = f'"{ws.word}" ({len(ws.positions)} letters)'
        lines.append(BreakdownLine(label, ws.final_word_score))
        if letter_bonus > 0:
            lines.append(BreakdownLine("  Letter multipliers", letter_bonus))
        if word_bonus > 0:
            lines.append(BreakdownLine(f"  Word multiplier (x{ws.word_multiplier})", word_bonus))

    if bingo_bonus > 0:
        lines.append(BreakdownLine(f"Bingo bonus ({RACK_SIZE} tiles)", bingo_bonus))

    return ScoreBreakdown(
        base_score=base_total,
        letter_multipliers=letter_total,
        word_multipliers=word_total,
        bonuses=bingo_bonus,
        total=base_total + letter_total + word_total + bingo_bonus,
        lines=tuple(lines),
    )


def calculate_move_score(
    board: Board,
    placements: Sequence[Placement],
    words_formed: Sequence[WordFormed | WordAnalysis],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> MoveScore:
    """Total points of an accepted move.

    `board` must already have the placements applied (see
    `Board.apply_placements`). The bingo bonus is added once when exactly
    seven tiles were placed, however many words they form.
    """
    new_positions = {p.position for p in placements}
    word_scores = tuple(score_word(board, w, new_positions, config) for w in words_formed)
    bingo_bonus = config.bingo_bonus if is_bingo_move(placements) else 0
    total = sum(ws.final_word_score for ws in word_scores) + bingo_bonus

    log.debug(
        "Scored move: %s -> %d (bingo %d)",
        [ws.word for ws in word_scores],
        total,
        bingo_bonus,
    )
    return MoveScore(
        total_score=total,
        word_scores=word_scores,
        bingo_bonus=bingo_bonus,
        breakdown=build_breakdown(word_scores, bingo_bonus),
        tiles_used=len(placements),
        new_words_formed=len(words_formed),
    )


# ------------------------- Move comparison utilities -------------------------


def find_highest_scoring_word(word_scores: Sequence[WordScore]) -> WordScore | None:
    """First word with the highest final score, None for no words."""
    best: WordScore | None = None
    for ws in word_scores:
        if best is None or ws.final_word_score > best.final_word_score:
            best = ws
    return best


def score_per_tile(move: MoveScore) -> float:
    return move.total_score / move.tiles_used if move.tiles_used else 0.0


def compare_moves_by_score(a: MoveScore, b: MoveScore) -> int:
    """Sort key comparator putting the higher score first."""
    return b.total_score - a.total_score


def maximum_possible_score(
    tiles: Sequence[Tile], config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> int:
    """Rough upper estimate: all tiles under a triple word, plus bingo."""
    bingo = config.bingo_bonus if len(tiles) == RACK_SIZE else 0
    return tiles_value(tiles) * 3 + bingo


def average_points_per_tile(tiles: Sequence[Tile]) -> float:
    if not tiles:
        return 0.0
    return tiles_value(tiles) / len(tiles)


def format_score_breakdown(breakdown: ScoreBreakdown) -> str:
    out = [f"Total Score: {breakdown.total}", "", "Breakdown:"]
    for line in breakdown.lines:
        sign = "+" if line.points >= 0 else ""
        out.append(f"{line.description}: {sign}{line.points}")
    if breakdown.letter_multipliers > 0:
        out.append("")
        out.append(f"Letter Multipliers: +{breakdown.letter_multipliers}")
    if breakdown.word_multipliers > 0:
        out.append(f"Word Multipliers: +{breakdown.word_multipliers}")
    if breakdown.bonuses > 0:
        out.append(f"Bonuses: +{breakdown.bonuses}")
    return "\n".join(out) + "\n"


@dataclass(frozen=True)
class ScoreStatistics:
    total: int
    average: float
    highest: int
    lowest: int
    bingo_moves: int


def score_statistics(moves: Sequence[MoveScore]) -> ScoreStatistics:
    if not moves:
        return ScoreStatistics(0, 0.0, 0, 0, 0)
    scores = [m.total_score for m in moves]
    return ScoreStatistics(
        total=sum(scores),
        average=sum(scores) / len(scores),
        highest=max(scores),
        lowest=min(scores),
        bingo_moves=sum(1 for m in moves if m.bingo_bonus > 0),
    )
