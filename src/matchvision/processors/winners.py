"""Winner selection under a game's declared win condition."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Sequence

from matchvision.config.games import Comparison, WinnerConfig, WinnerType
from matchvision.ingest.normalize import stat_number
from matchvision.models import VisionPlayer


logger = logging.getLogger(__name__)


def _extremum(config: WinnerConfig) -> Callable[..., float]:
    return max if config.win_condition.comparison is Comparison.HIGHEST else min


def calculate_individual_winner(
    players: Sequence[VisionPlayer],
    config: WinnerConfig,
) -> List[VisionPlayer]:
    """Every player sharing the best value of the win stat wins."""

    if not players:
        return []
    stat_name = config.win_condition.stat_name
    values = [stat_number(player, stat_name) for player in players]
    best = _extremum(config)(values)
    winners = [player for player, value in zip(players, values) if value == best]
    logger.debug("Individual winners on %s=%s: %s", stat_name, best, [p.name for p in winners])
    return winners


def calculate_team_winner(
    players: Sequence[VisionPlayer],
    config: WinnerConfig,
) -> List[VisionPlayer]:
    """Sum the win stat per team; every member of a best-scoring team wins."""

    if not players:
        return []
    stat_name = config.win_condition.stat_name
    totals: Dict[str, float] = {}
    for player in players:
        team = player.team or ""
        totals[team] = totals.get(team, 0.0) + stat_number(player, stat_name)
    best = _extremum(config)(totals.values())
    winning_teams = {team for team, total in totals.items() if total == best}
    logger.debug("Team totals on %s: %s (winning %s)", stat_name, totals, sorted(winning_teams))
    return [player for player in players if (player.team or "") in winning_teams]


def calculate_winners(players: Sequence[VisionPlayer], config: WinnerConfig) -> List[VisionPlayer]:
    if config.type is WinnerType.TEAM:
        return calculate_team_winner(players, config)
    return calculate_individual_winner(players, config)
