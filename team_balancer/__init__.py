from .balancer import balance
from .config import Config
from .errors import InsufficientPlayers, InvalidTeamSize
from .roster import (
    InMemoryAvailabilityRepository,
    InMemoryMatchRepository,
    InMemoryPlayerRepository,
    TeamGenerator,
)
from .scoring import average_score, player_stats
from .types import BalanceResult, Match, Participation, Player, PlayerStats, ScoredPlayer, TeamAssignment

__all__ = [
    "BalanceResult",
    "Config",
    "InMemoryAvailabilityRepository",
    "InMemoryMatchRepository",
    "InMemoryPlayerRepository",
    "InsufficientPlayers",
    "InvalidTeamSize",
    "Match",
    "Participation",
    "Player",
    "PlayerStats",
    "ScoredPlayer",
    "TeamAssignment",
    "TeamGenerator",
    "average_score",
    "balance",
    "player_stats",
]
