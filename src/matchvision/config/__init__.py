"""Configuration helpers for game rules and the stat catalog."""

from .games import (
    Comparison,
    ExtractionShape,
    GameRules,
    WinCondition,
    WinnerConfig,
    WinnerType,
    get_rules,
    iter_rules,
    resolve_game,
)
from .stats import StatDefinition, StatType, get_stat, iter_stats, lookup

__all__ = [
    "Comparison",
    "ExtractionShape",
    "GameRules",
    "WinCondition",
    "WinnerConfig",
    "WinnerType",
    "get_rules",
    "iter_rules",
    "resolve_game",
    "StatDefinition",
    "StatType",
    "get_stat",
    "iter_stats",
    "lookup",
]
