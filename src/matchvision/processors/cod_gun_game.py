"""Call of Duty Gun Game: free-for-all scoreboard with derived placings."""

from __future__ import annotations

import logging
from typing import List, Sequence

from matchvision.config.games import get_rules
from matchvision.config.stats import StatDefinition, get_stat
from matchvision.ingest.normalize import stat_number
from matchvision.models import Stat, StatSource, VisionPlayer

from .base import GameProcessor


logger = logging.getLogger(__name__)


def rank_players_by_score(
    players: Sequence[VisionPlayer],
    *,
    score_stat: str,
    position_stat: StatDefinition,
) -> List[VisionPlayer]:
    """Order players by ``score_stat`` (highest first) and write placings.

    The sort is stable, so tied scores keep their extraction order. The
    position stat is created when absent and overwritten when present.
    """

    ordered = sorted(players, key=lambda player: stat_number(player, score_stat), reverse=True)
    ranked: List[VisionPlayer] = []
    for index, player in enumerate(ordered):
        position = Stat(
            stat_id=position_stat.stat_id,
            stat=position_stat.name,
            stat_value=str(index + 1),
            source=StatSource.DERIVED,
        )
        ranked.append(player.with_stat(position))
    return ranked


class CoDGunGameProcessor(GameProcessor):
    def __init__(self) -> None:
        super().__init__(get_rules("cod_gun_game"))

    def post_process(self, players: List[VisionPlayer]) -> List[VisionPlayer]:
        score_stat = self.rules.rank_by or "COD_SCORE"
        ranked = rank_players_by_score(
            players,
            score_stat=score_stat,
            position_stat=get_stat(self.rules.position_stat or "cod_pos"),
        )
        logger.debug(
            "Players ranked by %s: %s",
            score_stat,
            [(player.name, stat_number(player, score_stat)) for player in ranked],
        )
        return ranked
