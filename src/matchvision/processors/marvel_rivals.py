"""Marvel Rivals scoreboard processor."""

from __future__ import annotations

import logging
from typing import List, Sequence

from matchvision.config.games import get_rules
from matchvision.models import VisionPlayer

from .base import GameProcessor


logger = logging.getLogger(__name__)


class MarvelRivalsProcessor(GameProcessor):
    def __init__(self) -> None:
        super().__init__(get_rules("marvel_rivals"))

    def calculate_winners(self, players: Sequence[VisionPlayer]) -> List[VisionPlayer]:
        # TODO: pick winners from the victory/defeat banner once the extraction reports it.
        logger.info("No winner rule for %s; returning no winners", self.rules.display_name)
        return []
