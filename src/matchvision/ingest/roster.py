"""Match normalized players against the session roster."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from matchvision.models import RosterPlayer, VisionPlayer


logger = logging.getLogger(__name__)


def _name_token(name: str) -> str:
    return re.sub(r"\s+", "", name).lower()


def _roster_candidates(token: str, roster: Sequence[RosterPlayer]) -> List[RosterPlayer]:
    candidates: List[RosterPlayer] = []
    for roster_player in roster:
        roster_token = _name_token(roster_player.player_name)
        if not roster_token:
            continue
        # OCR may clip or pad the gamertag, so containment works both ways.
        if token in roster_token or roster_token in token:
            candidates.append(roster_player)
    return candidates


def match_roster_player(name: str, roster: Sequence[RosterPlayer]) -> Optional[RosterPlayer]:
    """Resolve an extracted name to exactly one roster entry, if possible."""

    token = _name_token(name)
    if not token:
        return None

    candidates = _roster_candidates(token, roster)
    if len(candidates) == 1:
        return candidates[0]
    if not candidates:
        return None

    exact = [candidate for candidate in candidates if _name_token(candidate.player_name) == token]
    if len(exact) == 1:
        return exact[0]

    logger.warning(
        "Name %r is ambiguous across roster entries %s; leaving unresolved",
        name,
        sorted(candidate.player_id for candidate in candidates),
    )
    return None


def validate_processed_player(
    player: VisionPlayer,
    roster: Sequence[RosterPlayer],
) -> Optional[VisionPlayer]:
    """Attach the roster identity to ``player`` or return ``None``."""

    match = match_roster_player(player.name, roster)
    if match is None:
        return None
    return player.model_copy(update={"player_id": match.player_id, "name": match.player_name})
