import pytest

from team_balancer import Config, Participation, average_score, player_stats


def test_empty_history_is_neutral():
    assert average_score([]) == 5.0


def test_neutral_score_comes_from_config():
    assert average_score([], Config(neutral_score=6.5)) == 6.5


def test_average_keeps_full_precision():
    assert average_score([7, 8, 8]) == pytest.approx(23 / 3)
    assert average_score(iter([10])) == 10.0


def test_player_stats():
    participations = [
        Participation("1", "ana", "m1", 7, "A"),
        Participation("2", "ana", "m2", 8, "B"),
        Participation("3", "ana", "m3", 8, "A"),
        Participation("4", "bo", "m1", 4, "B"),
    ]
    stats = player_stats("ana", participations)
    assert stats.matches_played == 3
    assert stats.average_points == 7.7
    assert player_stats("bo", participations).average_points == 4.0


def test_player_stats_without_matches():
    stats = player_stats("ghost", [])
    assert stats.matches_played == 0
    assert stats.average_points == 0.0


def test_player_stats_rounds_halves_up():
    participations = [Participation(str(idx), "x", f"m{idx}", score, "A") for idx, score in enumerate([1, 2, 3, 3])]
    assert player_stats("x", participations).average_points == 2.3
