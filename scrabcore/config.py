"""Configuration of the rules core.

Validator and scorer settings are frozen values passed explicitly into each
call. Defaults can be overridden from the environment (or a `.env` file):

- SCRABCORE_REQUIRE_CENTER_START, SCRABCORE_REQUIRE_ADJACENCY,
  SCRABCORE_VALIDATE_DICTIONARY, SCRABCORE_ALLOW_BLANK_TILES
- SCRABCORE_APPLY_PREMIUM_SQUARES, SCRABCORE_END_GAME_PENALTY
- SCRABCORE_BINGO_BONUS (integer)

Unrecognised boolean values are ignored and the base value is kept.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any

from dotenv import load_dotenv

log = logging.getLogger("scrabcore.config")

# Load .env early but never override variables already set in the OS.
if os.getenv("PYTEST_CURRENT_TEST") is None:
    load_dotenv(override=False)

_TRUE = {"1", "true", "yes", "on", "y", "t"}
_FALSE = {"0", "false", "no", "off", "n", "f"}


def _parse_bool(val: str | None) -> bool | None:
    """Lenient boolean parsing; None when the value is unknown."""
    if val is None:
        return None
    v = val.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def _env_bool(name: str, default: bool) -> bool:
    parsed = _parse_bool(os.getenv(name))
    if parsed is None:
        if os.getenv(name) is not None:
            log.warning("Ignoring unrecognised value for %s: %r", name, os.getenv(name))
        return default
    return parsed


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        log.warning("Ignoring non-integer value for %s: %r", name, raw)
        return default


@dataclass(frozen=True)
class ValidatorConfig:
    """Move rule switches, each independently toggleable."""

    require_center_start: bool = True
    require_adjacency: bool = True
    validate_dictionary: bool = True
    allow_blank_tiles: bool = True

    def with_overrides(self, **changes: Any) -> ValidatorConfig:
        return replace(self, **changes)


@dataclass(frozen=True)
class ScoringConfig:
    bingo_bonus: int = 50
    apply_premium_squares: bool = True
    end_game_penalty: bool = True

    def with_overrides(self, **changes: Any) -> ScoringConfig:
        return replace(self, **changes)


DEFAULT_VALIDATOR_CONFIG = ValidatorConfig()

# Practice/testing mode: no centre, adjacency or dictionary checks.
LENIENT_VALIDATOR_CONFIG = ValidatorConfig(
    require_center_start=False,
    require_adjacency=False,
    validate_dictionary=False,
    allow_blank_tiles=True,
)

DEFAULT_SCORING_CONFIG = ScoringConfig()
PRACTICE_SCORING_CONFIG = ScoringConfig(apply_premium_squares=False, end_game_penalty=False)
TOURNAMENT_SCORING_CONFIG = ScoringConfig(
    bingo_bonus=50, apply_premium_squares=True, end_game_penalty=True
)


def validator_config_from_env(base: ValidatorConfig = DEFAULT_VALIDATOR_CONFIG) -> ValidatorConfig:
    """Return `base` with SCRABCORE_* environment overrides applied."""
    return ValidatorConfig(
        require_center_start=_env_bool(
            "SCRABCORE_REQUIRE_CENTER_START", base.require_center_start
        ),
        require_adjacency=_env_bool("SCRABCORE_REQUIRE_ADJACENCY", base.require_adjacency),
        validate_dictionary=_env_bool(
            "SCRABCORE_VALIDATE_DICTIONARY", base.validate_dictionary
        ),
        allow_blank_tiles=_env_bool("SCRABCORE_ALLOW_BLANK_TILES", base.allow_blank_tiles),
    )


def scoring_config_from_env(base: ScoringConfig = DEFAULT_SCORING_CONFIG) -> ScoringConfig:
    return ScoringConfig(
        bingo_bonus=_env_int("SCRABCORE_BINGO_BONUS", base.bingo_bonus),
        apply_premium_squares=_env_bool(
            "SCRABCORE_APPLY_PREMIUM_SQUARES", base.apply_premium_squares
        ),
        end_game_penalty=_env_bool("SCRABCORE_END_GAME_PENALTY", base.end_game_penalty),
    )
