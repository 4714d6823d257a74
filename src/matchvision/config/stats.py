"""Stat catalog for every stat the supported games report."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional


class StatType(str, Enum):
    NUMBER = "number"
    TEXT = "text"

    @property
    def default(self) -> str:
        return "0" if self is StatType.NUMBER else ""


@dataclass(frozen=True)
class StatDefinition:
    stat_id: int
    field_key: str
    name: str
    stat_type: StatType = StatType.NUMBER

    @property
    def default(self) -> str:
        return self.stat_type.default


_STAT_CATALOG: Dict[str, StatDefinition] = {
    definition.field_key: definition
    for definition in (
        StatDefinition(9, "cod_kills", "COD_KILLS"),
        StatDefinition(10, "cod_deaths", "COD_DEATHS"),
        StatDefinition(11, "cod_score", "COD_SCORE"),
        StatDefinition(12, "cod_pos", "COD_POS"),
        StatDefinition(20, "mr_hero", "MR_HERO", StatType.TEXT),
        StatDefinition(21, "mr_kills", "MR_KILLS"),
        StatDefinition(22, "mr_deaths", "MR_DEATHS"),
        StatDefinition(23, "mr_assists", "MR_ASSISTS"),
        StatDefinition(24, "mr_damage", "MR_DAMAGE"),
        StatDefinition(25, "mr_healing", "MR_HEALING"),
        StatDefinition(30, "rl_score", "RL_SCORE"),
        StatDefinition(31, "rl_goals", "RL_GOALS"),
        StatDefinition(32, "rl_assists", "RL_ASSISTS"),
        StatDefinition(33, "rl_saves", "RL_SAVES"),
        StatDefinition(34, "rl_shots", "RL_SHOTS"),
    )
}


def _stat_token(value: str) -> str:
    return re.sub(r"[^a-z0-9_]", "", value.strip().lower())


def lookup(key: str) -> Optional[StatDefinition]:
    """Return the definition for a field key or canonical name, if known."""

    # Canonical names are upper-cased field keys, so one token covers both.
    return _STAT_CATALOG.get(_stat_token(key))


def get_stat(key: str) -> StatDefinition:
    """Fetch a stat definition, raising KeyError if missing."""

    definition = lookup(key)
    if definition is None:
        raise KeyError(f"No stat configured for key={key!r}")
    return definition


def iter_stats() -> Iterable[StatDefinition]:
    return _STAT_CATALOG.values()
