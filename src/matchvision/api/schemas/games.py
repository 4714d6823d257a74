from __future__ import annotations

from typing import List

from pydantic import BaseModel


class StatResponse(BaseModel):
    stat_id: int
    field_key: str
    name: str
    stat_type: str


class WinConditionResponse(BaseModel):
    type: str
    stat_name: str
    comparison: str


class GameResponse(BaseModel):
    game: str
    display_name: str
    shape: str
    stats: List[StatResponse]
    winner: WinConditionResponse | None = None
