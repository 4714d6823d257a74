from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from matchvision.models import ResultCode, RosterPlayer, VisionPlayer


class ProcessRequest(BaseModel):
    extraction: Dict[str, Any]
    roster: List[RosterPlayer] = Field(default_factory=list)


class OutcomeResponse(BaseModel):
    status: ResultCode
    message: str
    players: List[VisionPlayer]
    winner: List[VisionPlayer]
