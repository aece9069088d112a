from typing import Iterable

from .types import ScoredPlayer


def mean(values: Iterable[float]) -> float:
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def team_total(members: Iterable[ScoredPlayer]) -> float:
    return sum(p.average_score for p in members)


def score_gap(team_a: Iterable[ScoredPlayer], team_b: Iterable[ScoredPlayer]) -> float:
    return abs(team_total(team_a) - team_total(team_b))
