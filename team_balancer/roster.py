import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional, Sequence
from uuid import uuid4

from .balancer import balance
from .config import Config
from .errors import InvalidTeamSize
from .scoring import average_score, scores_by_player
from .types import BalanceResult, Match, Participation, Player, ScoredPlayer

logger = logging.getLogger(__name__)

TEAMS = ("A", "B")


def _new_id() -> str:
    return uuid4().hex


class PlayerRepository(ABC):
    @abstractmethod
    def list(self, include_inactive: bool = False) -> List[Player]:
        ...

    @abstractmethod
    def get(self, player_id: str) -> Player:
        ...

    @abstractmethod
    def create(self, name: str, match_ids: Sequence[str] = ()) -> Player:
        ...

    @abstractmethod
    def update(self, player_id: str, name: Optional[str] = None, active: Optional[bool] = None) -> Player:
        ...

    def deactivate(self, player_id: str) -> Player:
        return self.update(player_id, active=False)


class MatchRepository(ABC):
    @abstractmethod
    def list(self) -> List[Match]:
        ...

    @abstractmethod
    def create(self, played_on: date, team_size: int, participations: Iterable[Mapping]) -> Match:
        ...

    @abstractmethod
    def participations(self, match_id: Optional[str] = None) -> List[Participation]:
        ...

    @abstractmethod
    def update_participation(
        self, participation_id: str, score: Optional[int] = None, team: Optional[str] = None
    ) -> Participation:
        ...


class AvailabilityRepository(ABC):
    @abstractmethod
    def list(self) -> Dict[str, bool]:
        ...

    @abstractmethod
    def update(self, player_id: str, available: bool) -> None:
        ...

    def available_ids(self) -> List[str]:
        return [player_id for player_id, available in self.list().items() if available]


def _check_participation(score: int, team: str, cfg: Config) -> None:
    if not cfg.min_score <= score <= cfg.max_score:
        raise ValueError(f"score must be between {cfg.min_score} and {cfg.max_score}, got {score}")
    if team not in TEAMS:
        raise ValueError(f"team must be 'A' or 'B', got {team!r}")


class InMemoryMatchRepository(MatchRepository):
    def __init__(self, cfg: Optional[Config] = None):
        self.cfg = cfg or Config()
        self._matches: Dict[str, Match] = {}
        self._participations: Dict[str, Participation] = {}

    def list(self) -> List[Match]:
        matches = [self._with_teams(m) for m in self._matches.values()]
        return sorted(matches, key=lambda m: m.played_on, reverse=True)

    def _with_teams(self, match: Match) -> Match:
        # Team lists always follow the current participations.
        entries = self.participations(match.id)
        return replace(
            match,
            team_a=tuple(p.player_id for p in entries if p.team == "A"),
            team_b=tuple(p.player_id for p in entries if p.team == "B"),
        )

    def create(self, played_on: date, team_size: int, participations: Iterable[Mapping]) -> Match:
        entries = [dict(p) for p in participations]
        for entry in entries:
            _check_participation(entry["score"], entry["team"], self.cfg)
        match_id = _new_id()
        match = Match(id=match_id, played_on=played_on, team_size=team_size)
        self._matches[match_id] = match
        for entry in entries:
            self._add_participation(entry["player_id"], match_id, entry["score"], entry["team"])
        return self._with_teams(match)

    def link_player(self, player_id: str, match_id: str) -> Participation:
        if match_id not in self._matches:
            raise KeyError(match_id)
        return self._add_participation(player_id, match_id, self.cfg.default_match_score, "A")

    def _add_participation(self, player_id: str, match_id: str, score: int, team: str) -> Participation:
        participation = Participation(
            id=_new_id(), player_id=player_id, match_id=match_id, score=score, team=team
        )
        self._participations[participation.id] = participation
        return participation

    def participations(self, match_id: Optional[str] = None) -> List[Participation]:
        return [
            p for p in self._participations.values() if match_id is None or p.match_id == match_id
        ]

    def update_participation(
        self, participation_id: str, score: Optional[int] = None, team: Optional[str] = None
    ) -> Participation:
        participation = self._participations[participation_id]
        new_score = participation.score if score is None else score
        new_team = participation.team if team is None else team
        _check_participation(new_score, new_team, self.cfg)
        participation.score = new_score
        participation.team = new_team
        return participation


class InMemoryPlayerRepository(PlayerRepository):
    def __init__(self, matches: Optional[InMemoryMatchRepository] = None):
        self.matches = matches
        self._players: Dict[str, Player] = {}

    def list(self, include_inactive: bool = False) -> List[Player]:
        players = [p for p in self._players.values() if include_inactive or p.active]
        return sorted(players, key=lambda p: p.name)

    def get(self, player_id: str) -> Player:
        return self._players[player_id]

    def create(self, name: str, match_ids: Sequence[str] = ()) -> Player:
        name = name.strip()
        if not name:
            raise ValueError("player name must not be blank")
        if match_ids and self.matches is None:
            raise ValueError("cannot link matches without a match repository")
        known = {m.id for m in self.matches.list()} if self.matches is not None else set()
        missing = [m for m in match_ids if m not in known]
        if missing:
            raise KeyError(missing[0])
        player = Player(id=_new_id(), name=name)
        self._players[player.id] = player
        for match_id in match_ids:
            self.matches.link_player(player.id, match_id)
        return player

    def update(self, player_id: str, name: Optional[str] = None, active: Optional[bool] = None) -> Player:
        player = self._players[player_id]
        if name is not None:
            name = name.strip()
            if not name:
                raise ValueError("player name must not be blank")
            player.name = name
        if active is not None:
            player.active = active
        return player


class InMemoryAvailabilityRepository(AvailabilityRepository):
    def __init__(self):
        self._availability: Dict[str, bool] = {}

    def list(self) -> Dict[str, bool]:
        return dict(self._availability)

    def update(self, player_id: str, available: bool) -> None:
        self._availability[player_id] = available


class TeamGenerator:
    """Feeds available, active roster players into the balancer."""

    def __init__(
        self,
        players: PlayerRepository,
        matches: MatchRepository,
        availability: AvailabilityRepository,
        cfg: Optional[Config] = None,
    ):
        self.players = players
        self.matches = matches
        self.availability = availability
        self.cfg = cfg or Config()

    def add_player(self, name: str, match_ids: Sequence[str] = ()) -> Player:
        player = self.players.create(name, match_ids)
        self.availability.update(player.id, True)
        return player

    def validate_team_size(self, team_size: int) -> None:
        if not self.cfg.min_team_size <= team_size <= self.cfg.max_team_size:
            raise InvalidTeamSize(team_size, self.cfg.min_team_size, self.cfg.max_team_size)

    def candidates(self) -> List[ScoredPlayer]:
        available = set(self.availability.available_ids())
        history = scores_by_player(self.matches.participations())
        return [
            ScoredPlayer(
                id=player.id,
                display_name=player.name,
                average_score=average_score(history.get(player.id, []), self.cfg),
            )
            for player in self.players.list()
            if player.id in available
        ]

    def generate(self, team_size: int) -> BalanceResult:
        try:
            self.validate_team_size(team_size)
        except InvalidTeamSize:
            logger.warning("rejected team size %d", team_size)
            raise
        pool = self.candidates()
        logger.info("balancing %d candidates into teams of %d", len(pool), team_size)
        return balance(pool, team_size, self.cfg)

    def record(
        self, result: BalanceResult, played_on: date, scores: Optional[Mapping[str, int]] = None
    ) -> Match:
        scores = scores or {}
        entries = []
        for team, assignment in zip(TEAMS, (result.team_a, result.team_b)):
            for player in assignment.members:
                entries.append(
                    {
                        "player_id": player.id,
                        "score": scores.get(player.id, self.cfg.default_match_score),
                        "team": team,
                    }
                )
        return self.matches.create(played_on, len(result.team_a.members), entries)
