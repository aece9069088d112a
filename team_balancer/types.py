from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Tuple


@dataclass(frozen=True)
class ScoredPlayer:
    id: str
    display_name: str
    average_score: float


@dataclass(frozen=True)
class TeamAssignment:
    members: Tuple[ScoredPlayer, ...]
    total_score: float

    @classmethod
    def of(cls, members: Iterable[ScoredPlayer]) -> "TeamAssignment":
        members = tuple(members)
        return cls(members=members, total_score=sum(p.average_score for p in members))


@dataclass(frozen=True)
class BalanceResult:
    team_a: TeamAssignment
    team_b: TeamAssignment
    gap: float

    @classmethod
    def of(cls, team_a: Iterable[ScoredPlayer], team_b: Iterable[ScoredPlayer]) -> "BalanceResult":
        a = TeamAssignment.of(team_a)
        b = TeamAssignment.of(team_b)
        return cls(team_a=a, team_b=b, gap=abs(a.total_score - b.total_score))


@dataclass
class Player:
    id: str
    name: str
    created_at: datetime = field(default_factory=datetime.now)
    active: bool = True


@dataclass(frozen=True)
class Match:
    id: str
    played_on: date
    team_size: int
    team_a: Tuple[str, ...] = ()
    team_b: Tuple[str, ...] = ()


@dataclass
class Participation:
    id: str
    player_id: str
    match_id: str
    score: int
    team: str  # "A" or "B"


@dataclass(frozen=True)
class PlayerStats:
    matches_played: int
    average_points: float
