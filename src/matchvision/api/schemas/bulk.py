from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field

from matchvision.models import RosterPlayer

from .vision import OutcomeResponse


class BulkItemRequest(BaseModel):
    item_id: str = Field(..., min_length=1)
    file_name: str | None = None
    extraction: Any = None


class BulkRequest(BaseModel):
    game: str
    roster: List[RosterPlayer] = Field(default_factory=list)
    items: List[BulkItemRequest]
    workers: int | None = Field(default=None, ge=1, le=32)


class BulkItemResponse(BaseModel):
    item_id: str
    file_name: str | None = None
    status: str
    message: str
    outcome: OutcomeResponse


class BulkResponse(BaseModel):
    game: str
    total: int
    succeeded: List[BulkItemResponse]
    needs_review: List[BulkItemResponse]
    failed: List[BulkItemResponse]
