from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from .config import Config
from .types import Participation, PlayerStats
from .utils import mean


def average_score(past_scores: Iterable[float], cfg: Optional[Config] = None) -> float:
    """Mean of a player's per-match scores, or the neutral score with no history."""
    cfg = cfg or Config()
    scores = list(past_scores)
    if not scores:
        return cfg.neutral_score
    return mean(scores)


def round_half_up(value: float, places: str = "0.1") -> float:
    return float(Decimal(value).quantize(Decimal(places), rounding=ROUND_HALF_UP))


def scores_by_player(participations: Iterable[Participation]) -> dict[str, list[int]]:
    scores: dict[str, list[int]] = {}
    for participation in participations:
        scores.setdefault(participation.player_id, []).append(participation.score)
    return scores


def player_stats(player_id: str, participations: Iterable[Participation]) -> PlayerStats:
    scores = scores_by_player(participations).get(player_id, [])
    return PlayerStats(matches_played=len(scores), average_points=round_half_up(mean(scores)))
