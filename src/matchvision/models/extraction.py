"""Raw vision extraction payloads and the individual/team discriminator."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator

from matchvision.errors import ExtractionShapeError


class RawPlayerReading(BaseModel):
    """One player's row as read off the scoreboard."""

    name: str = ""
    stats: Dict[str, Optional[str]] = Field(default_factory=dict)

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("stats", mode="before")
    @classmethod
    def _coerce_stats(cls, value: Any) -> Dict[str, Optional[str]]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError("stats must be a mapping of field key to value")
        coerced: Dict[str, Optional[str]] = {}
        for key, raw in value.items():
            # Keys are compared case-insensitively against catalog field keys.
            coerced[str(key).strip().lower()] = None if raw is None else str(raw)
        return coerced

    def reading(self, field_key: str) -> Optional[str]:
        return self.stats.get(field_key.lower())


class PlayersExtraction(BaseModel):
    kind: Literal["players"] = "players"
    players: List[RawPlayerReading] = Field(default_factory=list)


class RawTeam(BaseModel):
    team: str
    players: List[RawPlayerReading] = Field(default_factory=list)


class TeamsExtraction(BaseModel):
    kind: Literal["teams"] = "teams"
    teams: List[RawTeam] = Field(default_factory=list)


Extraction = Union[PlayersExtraction, TeamsExtraction]


def is_team_extraction(extraction: Extraction) -> bool:
    return isinstance(extraction, TeamsExtraction)


def parse_extraction(payload: Union[Extraction, Mapping[str, Any]]) -> Extraction:
    """Discriminate a raw payload into exactly one extraction shape.

    An explicit ``kind`` wins; otherwise the payload must carry exactly one of
    ``players`` or ``teams``.
    """

    if isinstance(payload, (PlayersExtraction, TeamsExtraction)):
        return payload
    if not isinstance(payload, Mapping):
        raise ExtractionShapeError(f"extraction must be an object, got {type(payload).__name__}")

    kind = payload.get("kind")
    if kind == "players":
        return PlayersExtraction.model_validate(payload)
    if kind == "teams":
        return TeamsExtraction.model_validate(payload)
    if kind is not None:
        raise ExtractionShapeError(f"unknown extraction kind {kind!r}")

    has_players = "players" in payload
    has_teams = "teams" in payload
    if has_players and has_teams:
        raise ExtractionShapeError("extraction carries both 'players' and 'teams'")
    if has_players:
        return PlayersExtraction.model_validate(payload)
    if has_teams:
        return TeamsExtraction.model_validate(payload)
    raise ExtractionShapeError("extraction carries neither 'players' nor 'teams'")
