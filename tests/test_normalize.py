from matchvision.config import StatType, get_rules, get_stat
from matchvision.ingest import (
    StatCheck,
    default_stat_check,
    parse_number_text,
    process_player,
    stat_number,
)
from matchvision.models import RawPlayerReading, StatSource


def _cod_stats():
    return get_rules("cod_gun_game").stats


def _row(name="Ghost", **stats) -> RawPlayerReading:
    return RawPlayerReading(name=name, stats=stats)


def test_parse_number_text_canonicalizes_readings():
    assert parse_number_text("1,250") == "1250"
    assert parse_number_text(" 45 ") == "45"
    assert parse_number_text("007") == "7"
    assert parse_number_text("3.50") == "3.5"
    assert parse_number_text("2.0") == "2"
    assert parse_number_text("-3") == "-3"


def test_parse_number_text_rejects_noise():
    assert parse_number_text(None) is None
    assert parse_number_text("") is None
    assert parse_number_text("l2") is None
    assert parse_number_text("12k") is None


def test_default_stat_check_numeric():
    assert default_stat_check("30") == StatCheck("30", False)
    assert default_stat_check(None) == StatCheck("0", True)
    assert default_stat_check("??", 8) == StatCheck("0", True)


def test_default_stat_check_text():
    assert default_stat_check(" Storm ", stat_type=StatType.TEXT) == StatCheck("Storm", False)
    assert default_stat_check(None, stat_type=StatType.TEXT) == StatCheck("", True)


def test_default_stat_check_uses_supplied_fallback():
    assert default_stat_check(None, default="-1") == StatCheck("-1", True)
    assert default_stat_check("", stat_type=StatType.TEXT, default="Unknown") == StatCheck("Unknown", True)
    assert default_stat_check("7", default="-1") == StatCheck("7", False)


def test_defaults_come_from_the_catalog():
    stats = get_rules("marvel_rivals").stats

    player = process_player(_row(name="Soap"), stats=stats).player

    for definition in stats:
        stat = player.get_stat(definition.name)
        assert stat.stat_value == definition.default
        assert stat.source is StatSource.DEFAULTED
    assert player.get_stat("MR_HERO").stat_value == get_stat("mr_hero").default == ""
    assert player.get_stat("MR_KILLS").stat_value == get_stat("mr_kills").default == "0"


def test_process_player_keeps_declared_order():
    normalized = process_player(
        _row(cod_deaths="4", cod_kills="12", cod_score="30"),
        stats=_cod_stats(),
    )

    assert not normalized.req_check_flag
    player = normalized.player
    assert not player.is_resolved
    assert [stat.stat for stat in player.stats] == ["COD_SCORE", "COD_KILLS", "COD_DEATHS"]
    assert [stat.stat_value for stat in player.stats] == ["30", "12", "4"]
    assert all(stat.source is StatSource.OBSERVED for stat in player.stats)


def test_process_player_defaults_missing_stats():
    normalized = process_player(_row(cod_kills="12", cod_deaths="x"), stats=_cod_stats())

    assert normalized.req_check_flag
    player = normalized.player
    assert len(player.stats) == 3
    assert player.get_stat("COD_SCORE").stat_value == "0"
    assert player.get_stat("COD_SCORE").source is StatSource.DEFAULTED
    assert player.get_stat("COD_DEATHS").stat_value == "0"
    assert player.get_stat("COD_KILLS").source is StatSource.OBSERVED


def test_process_player_flags_blank_name():
    normalized = process_player(
        _row(name="   ", cod_score="1", cod_kills="1", cod_deaths="1"),
        stats=_cod_stats(),
    )

    assert normalized.req_check_flag
    assert normalized.player.name == ""


def test_process_player_uses_supplied_validator():
    calls = []

    def lenient(stat_value, num_players=None, *, stat_type=StatType.NUMBER, default=None):
        calls.append((stat_value, num_players, default))
        return StatCheck(stat_value or "1", False)

    normalized = process_player(
        _row(cod_score="30"),
        stats=_cod_stats(),
        validate_stat=lenient,
        num_players=6,
        team="Blue",
    )

    assert not normalized.req_check_flag
    assert normalized.player.team == "Blue"
    assert calls == [("30", 6, "0"), (None, 6, "0"), (None, 6, "0")]
    assert normalized.player.get_stat("COD_KILLS").stat_value == "1"


def test_stat_number_treats_missing_as_zero():
    player = process_player(_row(cod_score="30"), stats=_cod_stats()).player

    assert stat_number(player, "COD_SCORE") == 30.0
    assert stat_number(player, "COD_POS") == 0.0
