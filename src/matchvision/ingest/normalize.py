"""Turn raw scoreboard readings into canonical :class:`VisionPlayer` records."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from matchvision.config.stats import StatDefinition, StatType
from matchvision.models import RawPlayerReading, Stat, StatSource, VisionPlayer


logger = logging.getLogger(__name__)

_NUMBER_PATTERN = re.compile(r"^-?\d+(?:\.\d+)?$")


@dataclass(frozen=True)
class StatCheck:
    stat_value: str
    req_check: bool


@dataclass(frozen=True)
class NormalizedPlayer:
    player: VisionPlayer
    req_check_flag: bool


StatValidator = Callable[..., StatCheck]


def parse_number_text(raw: Optional[str]) -> Optional[str]:
    """Return a canonical numeric string for ``raw`` or ``None`` if unreadable.

    Thousands separators and surrounding whitespace are tolerated; anything
    else (OCR noise such as ``"l2"``) is rejected.
    """

    if raw is None:
        return None
    text = re.sub(r"[\s,]", "", raw)
    if not text or not _NUMBER_PATTERN.match(text):
        return None
    if "." in text:
        whole, _, fraction = text.partition(".")
        fraction = fraction.rstrip("0")
        return f"{int(whole)}.{fraction}" if fraction else str(int(whole))
    return str(int(text))


def stat_number(player: VisionPlayer, name: str) -> float:
    """Numeric value of a player's stat, 0 when missing or unreadable."""

    stat = player.get_stat(name)
    if stat is None:
        return 0.0
    try:
        return float(stat.stat_value)
    except ValueError:
        return 0.0


def default_stat_check(
    stat_value: Optional[str],
    num_players: Optional[int] = None,
    *,
    stat_type: StatType = StatType.NUMBER,
    default: Optional[str] = None,
) -> StatCheck:
    """Default per-stat policy: absent or unreadable values fall back and flag.

    The fallback is ``default`` when given, otherwise the stat type's default.
    """

    fallback = stat_type.default if default is None else default
    if stat_type is StatType.TEXT:
        text = (stat_value or "").strip()
        if not text:
            return StatCheck(fallback, True)
        return StatCheck(text, False)

    number = parse_number_text(stat_value)
    if number is None:
        return StatCheck(fallback, True)
    return StatCheck(number, False)


def process_player(
    raw: RawPlayerReading,
    *,
    stats: Sequence[StatDefinition],
    validate_stat: StatValidator = default_stat_check,
    num_players: Optional[int] = None,
    team: Optional[str] = None,
) -> NormalizedPlayer:
    """Normalize one raw player, keeping every declared stat.

    The returned flag is the OR of every per-stat flag; a missing or empty
    name also raises it.
    """

    req_check = False
    player_stats: List[Stat] = []
    for definition in stats:
        raw_value = raw.reading(definition.field_key)
        check = validate_stat(
            raw_value,
            num_players,
            stat_type=definition.stat_type,
            default=definition.default,
        )
        source = StatSource.OBSERVED
        if check.req_check:
            req_check = True
            source = StatSource.DEFAULTED
            logger.warning(
                "Stat %s for %r unreadable (%r); using %r",
                definition.name,
                raw.name,
                raw_value,
                check.stat_value,
            )
        player_stats.append(
            Stat(
                stat_id=definition.stat_id,
                stat=definition.name,
                stat_value=check.stat_value,
                source=source,
            )
        )

    name = raw.name.strip()
    if not name:
        logger.warning("Player row without a readable name")
        req_check = True

    player = VisionPlayer(name=name, stats=player_stats, team=team)
    return NormalizedPlayer(player=player, req_check_flag=req_check)
