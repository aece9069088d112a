from team_balancer import Config, ScoredPlayer, balance
from team_balancer.balancer import rank_players, refine_by_swap, snake_draft
from team_balancer.utils import score_gap


def _pool(scores, prefix="p"):
    return [ScoredPlayer(f"{prefix}{idx}", f"Player {idx}", float(score)) for idx, score in enumerate(scores)]


def _ids(team):
    return [p.id for p in team]


def test_snake_pattern():
    team_a, team_b = snake_draft(_pool([8, 7, 6, 5, 4, 3, 2, 1]))
    assert _ids(team_a) == ["p0", "p3", "p4", "p7"]
    assert _ids(team_b) == ["p1", "p2", "p5", "p6"]


def test_ties_keep_input_order():
    pool = [ScoredPlayer("x", "X", 6.0), ScoredPlayer("y", "Y", 6.0), ScoredPlayer("z", "Z", 9.0)]
    assert _ids(rank_players(pool, 3)) == ["z", "x", "y"]


def test_surplus_players_are_dropped():
    result = balance(_pool([1, 9, 8, 2, 7, 3, 5]), 3)
    assigned = _ids(result.team_a.members + result.team_b.members)
    assert sorted(assigned) == ["p1", "p2", "p3", "p4", "p5", "p6"]


def test_large_gap_applies_one_swap_in_place():
    # Draft: A=[10, 5, 5] B=[5, 5, 0], gap 10. Swapping 10 with the first 5 levels it.
    result = balance(_pool([10, 5, 5, 5, 5, 0]), 3)
    assert _ids(result.team_a.members) == ["p1", "p3", "p4"]
    assert _ids(result.team_b.members) == ["p0", "p2", "p5"]
    assert result.gap == 0


def test_refinement_stops_at_threshold():
    team_a = _pool([10, 7, 3], "a")
    team_b = _pool([9, 5, 2], "b")
    best_a, best_b, best_gap = refine_by_swap(team_a, team_b, score_gap(team_a, team_b), 2.0)
    # a0<->b0 reaches the threshold first; a1<->b1 would have reached 0.
    assert best_gap == 2
    assert _ids(best_a) == ["b0", "a1", "a2"]
    assert _ids(best_b) == ["a0", "b1", "b2"]


def test_later_swap_replaces_earlier_improvement():
    team_a = _pool([10, 9, 0], "a")
    team_b = _pool([1, 1, 1], "b")
    best_a, best_b, best_gap = refine_by_swap(team_a, team_b, score_gap(team_a, team_b), 0.5)
    # a0<->b0 (gap 2) is beaten by a1<->b0 (gap 0), evaluated against the drafted teams.
    assert best_gap == 0
    assert _ids(best_a) == ["a0", "b0", "a2"]
    assert _ids(best_b) == ["a1", "b1", "b2"]


def test_equal_gap_does_not_replace_best():
    team_a = _pool([10, 9, 0], "a")
    team_b = _pool([1, 1, 1], "b")
    best_a, best_b, best_gap = refine_by_swap(team_a, team_b, score_gap(team_a, team_b), -1.0)
    assert best_gap == 0
    assert _ids(best_a) == ["a0", "b0", "a2"]
    assert _ids(best_b) == ["a1", "b1", "b2"]


def test_refinement_without_improvement_returns_draft():
    team_a = _pool([10, 1], "a")
    team_b = _pool([2, 2], "b")
    best_a, best_b, best_gap = refine_by_swap(team_a, team_b, score_gap(team_a, team_b), 2.0)
    assert best_a is team_a
    assert best_b is team_b
    assert best_gap == 7


def test_custom_threshold_skips_refinement():
    result = balance(_pool([10, 5, 5, 5, 5, 0]), 3, Config(balance_threshold=20.0))
    assert _ids(result.team_a.members) == ["p0", "p3", "p4"]
    assert result.gap == 10
