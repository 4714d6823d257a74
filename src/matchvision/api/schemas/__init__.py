"""Pydantic models for API I/O."""

from .bulk import BulkItemRequest, BulkItemResponse, BulkRequest, BulkResponse
from .games import GameResponse, StatResponse, WinConditionResponse
from .vision import OutcomeResponse, ProcessRequest

__all__ = [
    "BulkItemRequest",
    "BulkItemResponse",
    "BulkRequest",
    "BulkResponse",
    "GameResponse",
    "StatResponse",
    "WinConditionResponse",
    "OutcomeResponse",
    "ProcessRequest",
]
