from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from ..config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .scoring import tiles_value
from .types import EndGameScore, Tile

log = logging.getLogger("scrabcore.endgame")


def calculate_end_game_scoring(
    tiles_by_player: Mapping[str, Sequence[Tile]],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[EndGameScore]:
    """Leftover-tile adjustments for every player, in mapping order.

    Each player loses the points of their remaining tiles (blanks count 0).
    Players who went out share the total of all penalties; the integer
    remainder goes one point each to the first of them. Without anyone going
    out only the penalties apply.
    """
    if not config.end_game_penalty:
        return [
            EndGameScore(player_id, tuple(tiles), 0, 0, 0)
            for player_id, tiles in tiles_by_player.items()
        ]

    penalties = {player_id: tiles_value(tiles) for player_id, tiles in tiles_by_player.items()}
    total_penalties = sum(penalties.values())
    went_out = [player_id for player_id, tiles in tiles_by_player.items() if not tiles]

    bonuses: dict[str, int] = {}
    if went_out:
        share, remainder = divmod(total_penalties, len(went_out))
        for index, player_id in enumerate(went_out):
            bonuses[player_id] = share + (1 if index < remainder else 0)

    scores: list[EndGameScore] = []
    for player_id, tiles in tiles_by_player.items():
        penalty = penalties[player_id]
        bonus = bonuses.get(player_id, 0)
        scores.append(
            EndGameScore(
                player_id=player_id,
                tiles_remaining=tuple(tiles),
                penalty=penalty,
                bonus_from_others=bonus,
                net_adjustment=bonus - penalty,
            )
        )

    log.debug(
        "End-game adjustments: %s",
        {s.player_id: s.net_adjustment for s in scores},
    )
    return scores
