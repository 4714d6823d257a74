"""Rocket League: team-grouped scoreboard, winners decided on team goals."""

from __future__ import annotations

from typing import Dict, List

from matchvision.config.games import get_rules
from matchvision.ingest.normalize import stat_number
from matchvision.models import VisionPlayer

from .base import GameProcessor


class RocketLeagueProcessor(GameProcessor):
    def __init__(self) -> None:
        super().__init__(get_rules("rocket_league"))

    def post_process(self, players: List[VisionPlayer]) -> List[VisionPlayer]:
        # Keep teams together in extraction order, best match score first.
        team_order: Dict[str, int] = {}
        for player in players:
            team_order.setdefault(player.team or "", len(team_order))
        return sorted(
            players,
            key=lambda player: (team_order[player.team or ""], -stat_number(player, "RL_SCORE")),
        )
