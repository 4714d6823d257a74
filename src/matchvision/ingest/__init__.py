"""Input adapters that normalize raw vision readings."""

from .normalize import (
    NormalizedPlayer,
    StatCheck,
    default_stat_check,
    parse_number_text,
    process_player,
    stat_number,
)
from .roster import match_roster_player, validate_processed_player

__all__ = [
    "NormalizedPlayer",
    "StatCheck",
    "default_stat_check",
    "parse_number_text",
    "process_player",
    "stat_number",
    "match_roster_player",
    "validate_processed_player",
]
