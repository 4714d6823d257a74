"""Per-game rules: declared stats, accepted raw shape and win condition."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from .stats import StatDefinition, get_stat


class ExtractionShape(str, Enum):
    PLAYERS = "players"
    TEAMS = "teams"


class WinnerType(str, Enum):
    INDIVIDUAL = "INDIVIDUAL"
    TEAM = "TEAM"


class Comparison(str, Enum):
    HIGHEST = "highest"
    LOWEST = "lowest"


@dataclass(frozen=True)
class WinCondition:
    stat_name: str
    comparison: Comparison


@dataclass(frozen=True)
class WinnerConfig:
    type: WinnerType
    win_condition: WinCondition


@dataclass(frozen=True)
class GameRules:
    game: str
    display_name: str
    shape: ExtractionShape
    stat_keys: Tuple[str, ...]
    winner: Optional[WinnerConfig] = None
    rank_by: Optional[str] = None
    position_stat: Optional[str] = None
    aliases: Tuple[str, ...] = ()

    @property
    def stats(self) -> Tuple[StatDefinition, ...]:
        return tuple(get_stat(key) for key in self.stat_keys)


_GAME_RULES: Dict[str, GameRules] = {
    "cod_gun_game": GameRules(
        game="cod_gun_game",
        display_name="Call of Duty Gun Game",
        shape=ExtractionShape.PLAYERS,
        stat_keys=("cod_score", "cod_kills", "cod_deaths"),
        winner=WinnerConfig(
            type=WinnerType.INDIVIDUAL,
            win_condition=WinCondition(stat_name="COD_SCORE", comparison=Comparison.HIGHEST),
        ),
        rank_by="COD_SCORE",
        position_stat="cod_pos",
        aliases=("cod", "gun game", "call of duty"),
    ),
    "marvel_rivals": GameRules(
        game="marvel_rivals",
        display_name="Marvel Rivals",
        shape=ExtractionShape.PLAYERS,
        stat_keys=("mr_hero", "mr_kills", "mr_deaths", "mr_assists", "mr_damage", "mr_healing"),
        aliases=("rivals",),
    ),
    "rocket_league": GameRules(
        game="rocket_league",
        display_name="Rocket League",
        shape=ExtractionShape.TEAMS,
        stat_keys=("rl_score", "rl_goals", "rl_assists", "rl_saves", "rl_shots"),
        winner=WinnerConfig(
            type=WinnerType.TEAM,
            win_condition=WinCondition(stat_name="RL_GOALS", comparison=Comparison.HIGHEST),
        ),
        aliases=("rl",),
    ),
}


def _game_token(value: str) -> str:
    return re.sub(r"[^a-z0-9]", "", value.lower())


def _build_alias_lookup() -> Dict[str, str]:
    lookup: Dict[str, str] = {}
    for key, rules in _GAME_RULES.items():
        for variant in (key, rules.display_name, *rules.aliases):
            token = _game_token(variant)
            if token:
                lookup.setdefault(token, key)
    return lookup


GAME_ALIAS_LOOKUP = _build_alias_lookup()


def iter_rules() -> Iterable[GameRules]:
    """Return an iterator of all configured games."""

    return _GAME_RULES.values()


def resolve_game(game: str) -> str:
    """Map an id, display name or alias onto the canonical game id."""

    key = GAME_ALIAS_LOOKUP.get(_game_token(game))
    if key is None:
        raise KeyError(f"No rules configured for game={game!r}")
    return key


def get_rules(game: str) -> GameRules:
    """Fetch rules for a game, raising KeyError if missing."""

    return _GAME_RULES[resolve_game(game)]
