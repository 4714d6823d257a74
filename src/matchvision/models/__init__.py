"""Pydantic models shared across the pipeline."""

from .extraction import (
    Extraction,
    PlayersExtraction,
    RawPlayerReading,
    RawTeam,
    TeamsExtraction,
    is_team_extraction,
    parse_extraction,
)
from .outcome import Outcome, OutcomeData, ResultCode
from .player import UNRESOLVED_PLAYER_ID, RosterPlayer, Stat, StatSource, VisionPlayer

__all__ = [
    "Extraction",
    "PlayersExtraction",
    "RawPlayerReading",
    "RawTeam",
    "TeamsExtraction",
    "is_team_extraction",
    "parse_extraction",
    "Outcome",
    "OutcomeData",
    "ResultCode",
    "UNRESOLVED_PLAYER_ID",
    "RosterPlayer",
    "Stat",
    "StatSource",
    "VisionPlayer",
]
