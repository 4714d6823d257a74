"""Per-game processors and the dispatch table keyed by game id."""

from typing import Dict, Iterable

from matchvision.config.games import resolve_game

from .base import GameProcessor, ProcessedPlayers
from .cod_gun_game import CoDGunGameProcessor, rank_players_by_score
from .marvel_rivals import MarvelRivalsProcessor
from .results import CHECK_REQUEST_MESSAGE, SUCCESS_MESSAGE, failed_outcome, validate_results
from .rocket_league import RocketLeagueProcessor
from .winners import calculate_individual_winner, calculate_team_winner, calculate_winners


_PROCESSORS: Dict[str, GameProcessor] = {
    processor.game: processor
    for processor in (
        CoDGunGameProcessor(),
        MarvelRivalsProcessor(),
        RocketLeagueProcessor(),
    )
}


def get_processor(game: str) -> GameProcessor:
    """Resolve a game id, display name or alias to its processor."""

    key = resolve_game(game)
    if key not in _PROCESSORS:
        raise KeyError(f"No processor registered for game={game!r}")
    return _PROCESSORS[key]


def iter_processors() -> Iterable[GameProcessor]:
    return _PROCESSORS.values()


__all__ = [
    "GameProcessor",
    "ProcessedPlayers",
    "CoDGunGameProcessor",
    "MarvelRivalsProcessor",
    "RocketLeagueProcessor",
    "rank_players_by_score",
    "CHECK_REQUEST_MESSAGE",
    "SUCCESS_MESSAGE",
    "failed_outcome",
    "validate_results",
    "calculate_individual_winner",
    "calculate_team_winner",
    "calculate_winners",
    "get_processor",
    "iter_processors",
]
