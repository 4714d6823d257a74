"""Turn accepted bulk results into match drafts grouped by reviewer-chosen set."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from matchvision.bulk import BulkItemResult, BulkStatus
from matchvision.models import RosterPlayer, Stat


logger = logging.getLogger(__name__)


class PlayerSessionDraft(BaseModel):
    player_id: int
    player_session_name: str
    player_stats: List[Stat] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class MatchDraft(BaseModel):
    """Persistence-ready form of one screenshot's result."""

    item_id: str
    match_winners: List[RosterPlayer] = Field(default_factory=list)
    player_sessions: List[PlayerSessionDraft] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


def result_to_match(result: BulkItemResult) -> MatchDraft:
    if result.status is BulkStatus.FAILED:
        raise ValueError(f"result {result.item_id!r} failed and cannot become a match")

    data = result.outcome.data
    sessions = [
        PlayerSessionDraft(
            player_id=player.player_id,
            player_session_name=player.name or "Unknown Player",
            player_stats=list(player.stats),
        )
        for player in data.players
    ]
    winners = [
        RosterPlayer(player_id=player.player_id, player_name=player.name)
        for player in data.winner
        if player.is_resolved
    ]
    return MatchDraft(item_id=result.item_id, match_winners=winners, player_sessions=sessions)


def assign_results_to_sets(
    results: Sequence[BulkItemResult],
    assignments: Mapping[str, Optional[int]],
) -> Dict[int, List[MatchDraft]]:
    """Group accepted results into sets.

    ``assignments`` maps item id to set id. Every accepted result must be
    assigned; failed results and unknown ids are rejected.
    """

    by_id = {result.item_id: result for result in results}
    unknown = sorted(item_id for item_id in assignments if item_id not in by_id)
    if unknown:
        raise ValueError(f"assignments reference unknown results: {unknown}")

    failed = sorted(
        item_id
        for item_id, set_id in assignments.items()
        if set_id is not None and by_id[item_id].status is BulkStatus.FAILED
    )
    if failed:
        raise ValueError(f"failed results cannot be assigned to a set: {failed}")

    unassigned = [
        result.item_id
        for result in results
        if result.status is not BulkStatus.FAILED and assignments.get(result.item_id) is None
    ]
    if unassigned:
        raise ValueError(f"{len(unassigned)} result(s) still need a set: {unassigned}")

    grouped: Dict[int, List[MatchDraft]] = {}
    for result in results:
        set_id = assignments.get(result.item_id)
        if set_id is None:
            continue
        grouped.setdefault(set_id, []).append(result_to_match(result))

    logger.info(
        "Assigned %s results across %s sets",
        sum(len(matches) for matches in grouped.values()),
        len(grouped),
    )
    return grouped
