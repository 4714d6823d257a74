"""Per-game processor contract shared by every supported game."""

from __future__ import annotations

import logging
from abc import ABC
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from matchvision.config.games import ExtractionShape, GameRules
from matchvision.config.stats import StatType
from matchvision.ingest.normalize import StatCheck, default_stat_check, process_player
from matchvision.ingest.roster import validate_processed_player
from matchvision.models import (
    Extraction,
    Outcome,
    RawPlayerReading,
    RosterPlayer,
    TeamsExtraction,
    VisionPlayer,
    is_team_extraction,
)

from .results import validate_results as _validate_results
from .winners import calculate_winners as _calculate_winners


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessedPlayers:
    processed_players: List[VisionPlayer] = field(default_factory=list)
    req_check_flag: bool = False
    error: Optional[str] = None


def _extraction_shape(extraction: Extraction) -> ExtractionShape:
    if is_team_extraction(extraction):
        return ExtractionShape.TEAMS
    return ExtractionShape.PLAYERS


def _extraction_rows(extraction: Extraction) -> List[Tuple[RawPlayerReading, Optional[str]]]:
    if isinstance(extraction, TeamsExtraction):
        return [(player, team.team) for team in extraction.teams for player in team.players]
    return [(player, None) for player in extraction.players]


class GameProcessor(ABC):
    """Normalize, reconcile and score one screenshot's worth of players.

    Subclasses bind a :class:`GameRules` entry and override the hooks that
    differ per game (``post_process``, ``calculate_winners``,
    ``validate_stats``). All methods are pure with respect to external state.
    """

    def __init__(self, rules: GameRules):
        self.rules = rules

    @property
    def game(self) -> str:
        return self.rules.game

    def process_players(
        self,
        extraction: Extraction,
        roster: Sequence[RosterPlayer],
    ) -> ProcessedPlayers:
        display = self.rules.display_name
        if _extraction_shape(extraction) is not self.rules.shape:
            logger.warning("Invalid data format for %s players (got %s)", display, extraction.kind)
            return ProcessedPlayers([], True, f"Invalid data format for {display} players.")

        rows = _extraction_rows(extraction)
        if not rows:
            logger.error("No %s player data detected", display)
            return ProcessedPlayers([], True, f"No {display} player data detected.")

        stats = self.rules.stats
        num_players = len(rows)
        req_check = False
        players: List[VisionPlayer] = []
        seen_ids: set[int] = set()
        for raw, team in rows:
            normalized = process_player(
                raw,
                stats=stats,
                validate_stat=self.validate_stats,
                num_players=num_players,
                team=team,
            )
            req_check = req_check or normalized.req_check_flag
            validated = validate_processed_player(normalized.player, roster)
            if validated is None:
                logger.warning("Player validation failed for %r; excluding", normalized.player.name)
                req_check = True
                continue
            if validated.player_id in seen_ids:
                logger.warning(
                    "Player %r resolved to %s more than once; keeping the first row",
                    raw.name,
                    validated.name,
                )
                req_check = True
                continue
            seen_ids.add(validated.player_id)
            logger.debug("Validated player %s (%s)", validated.name, validated.player_id)
            players.append(validated)

        players = self.post_process(players)
        logger.info(
            "Processed %s players: %s/%s resolved, review=%s",
            display,
            len(players),
            num_players,
            req_check,
        )
        return ProcessedPlayers(players, req_check)

    def post_process(self, players: List[VisionPlayer]) -> List[VisionPlayer]:
        return players

    def calculate_winners(self, players: Sequence[VisionPlayer]) -> List[VisionPlayer]:
        if self.rules.winner is None:
            return []
        return _calculate_winners(players, self.rules.winner)

    def validate_stats(
        self,
        stat_value: Optional[str],
        num_players: Optional[int] = None,
        *,
        stat_type: StatType = StatType.NUMBER,
        default: Optional[str] = None,
    ) -> StatCheck:
        return default_stat_check(stat_value, num_players, stat_type=stat_type, default=default)

    def validate_results(
        self,
        players: Sequence[VisionPlayer],
        winners: Sequence[VisionPlayer],
        req_check_flag: bool,
    ) -> Outcome:
        return _validate_results(players, winners, req_check_flag)
