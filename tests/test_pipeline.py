import logging

from matchvision.models import ResultCode, RosterPlayer, TeamsExtraction
from matchvision.pipeline import NO_RESOLVED_PLAYERS_MESSAGE, process_extraction
from matchvision.processors import CHECK_REQUEST_MESSAGE, SUCCESS_MESSAGE


def _roster():
    return [
        RosterPlayer(player_id=1, player_name="Ghost"),
        RosterPlayer(player_id=2, player_name="Soap"),
        RosterPlayer(player_id=3, player_name="Price"),
    ]


def _cod_payload(soap_score="45"):
    soap_stats = {"cod_kills": "15", "cod_deaths": "2"}
    if soap_score is not None:
        soap_stats["cod_score"] = soap_score
    return {
        "players": [
            {"name": "Ghost", "stats": {"cod_score": "30", "cod_kills": "10", "cod_deaths": "4"}},
            {"name": "Soap", "stats": soap_stats},
            {"name": "Price", "stats": {"cod_score": "12", "cod_kills": "3", "cod_deaths": "9"}},
        ]
    }


def test_success_outcome():
    outcome = process_extraction("cod_gun_game", _cod_payload(), _roster())

    assert outcome.status is ResultCode.SUCCESS
    assert outcome.message == SUCCESS_MESSAGE
    assert not outcome.requires_review
    assert [player.name for player in outcome.data.players] == ["Soap", "Ghost", "Price"]
    assert [player.name for player in outcome.data.winner] == ["Soap"]


def test_check_request_keeps_data():
    outcome = process_extraction("Call of Duty Gun Game", _cod_payload(soap_score=None), _roster())

    assert outcome.status is ResultCode.CHECK_REQUEST
    assert outcome.message == CHECK_REQUEST_MESSAGE
    assert outcome.requires_review
    assert len(outcome.data.players) == 3
    assert [player.name for player in outcome.data.winner] == ["Ghost"]


def test_wrong_shape_fails_with_empty_data():
    payload = {"teams": [{"team": "Blue", "players": [{"name": "Ghost", "stats": {}}]}]}

    outcome = process_extraction("cod_gun_game", payload, _roster())

    assert outcome.status is ResultCode.FAILED
    assert outcome.message == "Invalid data format for Call of Duty Gun Game players."
    assert outcome.data.players == []
    assert outcome.data.winner == []


def test_parsed_team_extraction_is_also_rejected():
    outcome = process_extraction("cod_gun_game", TeamsExtraction(teams=[]), _roster())

    assert outcome.status is ResultCode.FAILED


def test_unreadable_payload_fails():
    both = process_extraction("cod_gun_game", {"players": [], "teams": []}, _roster())
    garbage = process_extraction("cod_gun_game", {"players": "nope"}, _roster())

    assert both.status is ResultCode.FAILED
    assert garbage.status is ResultCode.FAILED
    assert garbage.message == "Invalid data format for Call of Duty Gun Game players."


def test_empty_players_fail():
    outcome = process_extraction("cod_gun_game", {"players": []}, _roster())

    assert outcome.status is ResultCode.FAILED
    assert outcome.message == "No Call of Duty Gun Game player data detected."


def test_no_roster_match_fails():
    outcome = process_extraction("cod_gun_game", _cod_payload(), [RosterPlayer(player_id=9, player_name="Nikolai")])

    assert outcome.status is ResultCode.FAILED
    assert outcome.message == NO_RESOLVED_PLAYERS_MESSAGE


def test_unknown_game_fails():
    outcome = process_extraction("Curling", _cod_payload(), _roster())

    assert outcome.status is ResultCode.FAILED
    assert outcome.message == "Unsupported game: Curling."


def test_marvel_rivals_success_has_no_winners():
    payload = {
        "players": [
            {
                "name": "Price",
                "stats": {
                    "mr_hero": "Groot",
                    "mr_kills": "8",
                    "mr_deaths": "2",
                    "mr_assists": "11",
                    "mr_damage": "9800",
                    "mr_healing": "0",
                },
            }
        ]
    }

    outcome = process_extraction("rivals", payload, _roster())

    assert outcome.status is ResultCode.SUCCESS
    assert outcome.data.winner == []
    assert outcome.data.players[0].player_id == 3


def test_list_shaped_stats_fail_instead_of_raising():
    payload = {"players": [{"name": "Ghost", "stats": ["cod_score", "30"]}]}

    outcome = process_extraction("cod_gun_game", payload, _roster())

    assert outcome.status is ResultCode.FAILED
    assert outcome.message == "Invalid data format for Call of Duty Gun Game players."
    assert outcome.data.players == []


def test_check_request_logs_review_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="matchvision.pipeline"):
        process_extraction("cod_gun_game", _cod_payload(soap_score=None), _roster())

    assert any("needs review" in record.getMessage() for record in caplog.records)
