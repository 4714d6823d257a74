"""Result payload returned for every processed screenshot."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .player import VisionPlayer


class ResultCode(str, Enum):
    SUCCESS = "Success"
    CHECK_REQUEST = "CheckRequest"
    FAILED = "Failed"


class OutcomeData(BaseModel):
    players: List[VisionPlayer] = Field(default_factory=list)
    winner: List[VisionPlayer] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Outcome(BaseModel):
    status: ResultCode
    data: OutcomeData = Field(default_factory=OutcomeData)
    message: str

    model_config = ConfigDict(frozen=True)

    @property
    def requires_review(self) -> bool:
        return self.status is ResultCode.CHECK_REQUEST
