"""Canonical player models shared across ingestion and processor layers."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


UNRESOLVED_PLAYER_ID = 0


class StatSource(str, Enum):
    """Where a stat value came from."""

    OBSERVED = "observed"
    DEFAULTED = "defaulted"
    DERIVED = "derived"


class Stat(BaseModel):
    stat_id: int
    stat: str = Field(..., min_length=1)
    stat_value: str
    source: StatSource = StatSource.OBSERVED

    model_config = ConfigDict(frozen=True)


class VisionPlayer(BaseModel):
    """Normalized player read from one scoreboard screenshot."""

    player_id: int = Field(default=UNRESOLVED_PLAYER_ID, ge=0)
    name: str
    stats: List[Stat] = Field(default_factory=list)
    team: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_resolved(self) -> bool:
        return self.player_id != UNRESOLVED_PLAYER_ID

    def get_stat(self, name: str) -> Optional[Stat]:
        for stat in self.stats:
            if stat.stat == name:
                return stat
        return None

    def with_stat(self, stat: Stat) -> "VisionPlayer":
        """Return a copy with ``stat`` replacing any stat of the same name."""

        stats = list(self.stats)
        for index, existing in enumerate(stats):
            if existing.stat == stat.stat:
                stats[index] = stat
                break
        else:
            stats.append(stat)
        return self.model_copy(update={"stats": stats})


class RosterPlayer(BaseModel):
    """Known identity a session's results may be attributed to."""

    player_id: int = Field(..., gt=0)
    player_name: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)
