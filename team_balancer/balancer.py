import logging
from typing import List, Optional, Sequence, Tuple

from .config import Config
from .errors import InsufficientPlayers
from .types import BalanceResult, ScoredPlayer
from .utils import score_gap

logger = logging.getLogger(__name__)

Teams = Tuple[List[ScoredPlayer], List[ScoredPlayer]]


def rank_players(players: Sequence[ScoredPlayer], limit: int) -> List[ScoredPlayer]:
    # sorted() is stable with reverse=True, so equal scores keep input order.
    ranked = sorted(players, key=lambda p: p.average_score, reverse=True)
    return ranked[:limit]


def snake_draft(ranked: Sequence[ScoredPlayer]) -> Teams:
    """Deal players A, B, B, A, A, B, ... in ranked order."""
    team_a: List[ScoredPlayer] = []
    team_b: List[ScoredPlayer] = []
    for index, player in enumerate(ranked):
        forward = (index // 2) % 2 == 0
        first_pick = index % 2 == 0
        if first_pick == forward:
            team_a.append(player)
        else:
            team_b.append(player)
    return team_a, team_b


def refine_by_swap(
    team_a: List[ScoredPlayer],
    team_b: List[ScoredPlayer],
    gap: float,
    threshold: float,
) -> Tuple[List[ScoredPlayer], List[ScoredPlayer], float]:
    """Try every single A<->B swap of the drafted teams and keep the best one.

    Trials never stack: each one starts from the drafted teams. The scan stops
    as soon as the best gap drops to the threshold.
    """
    best_a, best_b, best_gap = team_a, team_b, gap
    for i in range(len(team_a)):
        for j in range(len(team_b)):
            trial_a = list(team_a)
            trial_b = list(team_b)
            trial_a[i], trial_b[j] = team_b[j], team_a[i]
            trial_gap = score_gap(trial_a, trial_b)
            if trial_gap < best_gap:
                best_a, best_b, best_gap = trial_a, trial_b, trial_gap
                logger.debug("swap %s <-> %s gives gap %.3f", team_a[i].id, team_b[j].id, trial_gap)
                if best_gap <= threshold:
                    return best_a, best_b, best_gap
    return best_a, best_b, best_gap


def balance(players: Sequence[ScoredPlayer], team_size: int, cfg: Optional[Config] = None) -> BalanceResult:
    cfg = cfg or Config()
    required = team_size * 2
    if len(players) < required:
        raise InsufficientPlayers(required=required, available=len(players))

    ranked = rank_players(players, required)
    team_a, team_b = snake_draft(ranked)
    gap = score_gap(team_a, team_b)
    logger.debug("snake draft of %d players: gap %.3f", required, gap)

    if gap > cfg.balance_threshold:
        team_a, team_b, gap = refine_by_swap(team_a, team_b, gap, cfg.balance_threshold)

    return BalanceResult.of(team_a, team_b)
