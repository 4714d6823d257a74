"""Single-screenshot entry point: raw extraction in, :class:`Outcome` out."""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping, Sequence, Union

from pydantic import ValidationError

from matchvision.errors import ExtractionShapeError
from matchvision.models import Extraction, Outcome, RosterPlayer, parse_extraction
from matchvision.processors import failed_outcome, get_processor


logger = logging.getLogger(__name__)

NO_RESOLVED_PLAYERS_MESSAGE = (
    "None of the detected players could be matched to the session players. "
    "Check the selected players and try again."
)


def process_extraction(
    game: str,
    extraction: Union[Extraction, Mapping[str, Any]],
    roster: Sequence[RosterPlayer],
) -> Outcome:
    """Run one extraction through its game's processor.

    Structural problems (unknown game, unreadable payload, wrong shape, no
    resolvable players) come back as ``Failed``; everything else resolves to
    ``Success`` or ``CheckRequest``.
    """

    start = time.perf_counter()
    try:
        processor = get_processor(game)
    except KeyError:
        logger.error("Unsupported game %r", game)
        return failed_outcome(f"Unsupported game: {game}.")

    try:
        parsed = parse_extraction(extraction)
    except (ExtractionShapeError, ValidationError) as exc:
        logger.error("Unreadable %s extraction: %s", processor.rules.display_name, exc)
        return failed_outcome(f"Invalid data format for {processor.rules.display_name} players.")

    processed = processor.process_players(parsed, roster)
    if processed.error:
        return failed_outcome(processed.error)
    if not processed.processed_players:
        logger.error("No %s players matched the session roster", processor.rules.display_name)
        return failed_outcome(NO_RESOLVED_PLAYERS_MESSAGE)

    winners = processor.calculate_winners(processed.processed_players)
    outcome = processor.validate_results(
        processed.processed_players,
        winners,
        processed.req_check_flag,
    )
    logger.info(
        "%s extraction processed – status=%s, players=%s, winners=%s (%.3fs)",
        processor.rules.display_name,
        outcome.status.value,
        len(outcome.data.players),
        len(outcome.data.winner),
        time.perf_counter() - start,
    )
    if outcome.requires_review:
        logger.warning("%s result has inferred values and needs review", processor.rules.display_name)
    return outcome
