from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    balance_threshold: float = 2.0

    neutral_score: float = 5.0
    min_score: int = 1
    max_score: int = 10
    default_match_score: int = 5

    min_team_size: int = 3
    max_team_size: int = 11
