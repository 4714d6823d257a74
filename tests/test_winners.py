import random

from matchvision.config import Comparison, WinCondition, WinnerConfig, WinnerType
from matchvision.models import Stat, VisionPlayer
from matchvision.processors import (
    calculate_individual_winner,
    calculate_team_winner,
    calculate_winners,
)


def _player(player_id, score=None, *, team=None, stat="COD_SCORE"):
    stats = []
    if score is not None:
        stats.append(Stat(stat_id=11, stat=stat, stat_value=str(score)))
    return VisionPlayer(player_id=player_id, name=f"P{player_id}", stats=stats, team=team)


def _config(comparison=Comparison.HIGHEST, *, type=WinnerType.INDIVIDUAL, stat_name="COD_SCORE"):
    return WinnerConfig(type=type, win_condition=WinCondition(stat_name=stat_name, comparison=comparison))


def test_highest_score_ties_share_the_win():
    players = [_player(1, 10), _player(2, 7), _player(3, 10), _player(4, 3)]

    winners = calculate_individual_winner(players, _config())

    assert [player.player_id for player in winners] == [1, 3]


def test_winner_set_does_not_depend_on_order():
    players = [_player(1, 10), _player(2, 7), _player(3, 10), _player(4, 3)]
    shuffled = list(players)
    random.Random(7).shuffle(shuffled)

    expected = {player.player_id for player in calculate_individual_winner(players, _config())}
    actual = {player.player_id for player in calculate_individual_winner(shuffled, _config())}

    assert actual == expected == {1, 3}


def test_lowest_comparison():
    players = [_player(1, 10), _player(2, 7), _player(3, 10), _player(4, 3)]

    winners = calculate_individual_winner(players, _config(Comparison.LOWEST))

    assert [player.player_id for player in winners] == [4]


def test_missing_stat_counts_as_zero():
    players = [_player(1, 5), _player(2)]

    assert [p.player_id for p in calculate_individual_winner(players, _config(Comparison.LOWEST))] == [2]
    assert [p.player_id for p in calculate_individual_winner(players, _config())] == [1]


def test_empty_input_has_no_winners():
    assert calculate_individual_winner([], _config()) == []
    assert calculate_team_winner([], _config(type=WinnerType.TEAM)) == []


def test_team_winner_sums_members():
    config = _config(type=WinnerType.TEAM, stat_name="RL_GOALS")
    players = [
        _player(1, 1, team="Blue", stat="RL_GOALS"),
        _player(2, 2, team="Blue", stat="RL_GOALS"),
        _player(3, 2, team="Orange", stat="RL_GOALS"),
        _player(4, 0, team="Orange", stat="RL_GOALS"),
    ]

    winners = calculate_team_winner(players, config)

    assert [player.player_id for player in winners] == [1, 2]


def test_team_tie_returns_both_teams():
    config = _config(type=WinnerType.TEAM, stat_name="RL_GOALS")
    players = [
        _player(1, 1, team="Blue", stat="RL_GOALS"),
        _player(2, 1, team="Blue", stat="RL_GOALS"),
        _player(3, 2, team="Orange", stat="RL_GOALS"),
    ]

    assert [player.player_id for player in calculate_team_winner(players, config)] == [1, 2, 3]


def test_calculate_winners_dispatches_on_type():
    players = [
        _player(1, 3, team="Blue"),
        _player(2, 3, team="Blue"),
        _player(3, 5, team="Orange"),
    ]

    individual = calculate_winners(players, _config())
    team = calculate_winners(players, _config(type=WinnerType.TEAM))

    assert [player.player_id for player in individual] == [3]
    assert [player.player_id for player in team] == [1, 2]
