"""Map processed players and the review flag onto an :class:`Outcome`."""

from __future__ import annotations

from typing import Sequence

from matchvision.models import Outcome, OutcomeData, ResultCode, VisionPlayer


CHECK_REQUEST_MESSAGE = (
    "There was some trouble processing some stats. They have been assigned the most "
    "probable value but please check to ensure all stats are correct before submitting."
)
SUCCESS_MESSAGE = "Results have been successfully imported."


def validate_results(
    players: Sequence[VisionPlayer],
    winners: Sequence[VisionPlayer],
    req_check_flag: bool,
) -> Outcome:
    data = OutcomeData(players=list(players), winner=list(winners))
    if req_check_flag:
        return Outcome(status=ResultCode.CHECK_REQUEST, data=data, message=CHECK_REQUEST_MESSAGE)
    return Outcome(status=ResultCode.SUCCESS, data=data, message=SUCCESS_MESSAGE)


def failed_outcome(message: str) -> Outcome:
    return Outcome(status=ResultCode.FAILED, data=OutcomeData(), message=message)
