import time
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import List, Optional

from league.utils import generate_id


class TournamentType(str, Enum):
    ONE_VS_ONE = "1v1"
    TWO_VS_TWO = "2v2"


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Competitor:
    id: str
    name: str


@dataclass
class MatchSide:
    competitor_ids: List[str]  # 1 id for 1v1, 2 ids for 2v2
    score: Optional[int] = None
    real_world_team_name: str = ""
    is_ghost: bool = False  # balancing filler, excluded from every table


@dataclass
class Match:
    id: str
    round: int
    home: MatchSide
    away: MatchSide
    is_completed: bool = False
    created_at: int = field(default_factory=now_ms)

    @property
    def has_result(self) -> bool:
        return (
            self.is_completed
            and self.home.score is not None
            and self.away.score is not None
        )

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Match":
        return cls(
            id=data["id"],
            round=data["round"],
            home=MatchSide(**data["home"]),
            away=MatchSide(**data["away"]),
            is_completed=data.get("is_completed", False),
            created_at=data.get("created_at", 0),
        )


def new_match(round_num: int, home_ids: List[str], away_ids: List[str],
              away_is_ghost: bool = False) -> Match:
    return Match(
        id=generate_id(),
        round=round_num,
        home=MatchSide(competitor_ids=list(home_ids)),
        away=MatchSide(competitor_ids=list(away_ids), is_ghost=away_is_ghost),
    )


@dataclass
class StandingsRow:
    competitor_id: str
    competitor_name: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0


@dataclass
class TeamStat:
    team_name: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    win_rate: int = 0


@dataclass
class Tournament:
    id: str
    name: str
    mode: TournamentType
    double_round: bool = False
    has_away_goals: bool = False
    competitors: List[Competitor] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    status: str = "active"  # active, completed
    created_at: int = field(default_factory=now_ms)

    @property
    def completed_count(self) -> int:
        return sum(1 for m in self.matches if m.is_completed)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["mode"] = self.mode.value
        data["progress"] = {
            "completed": self.completed_count,
            "total": len(self.matches),
        }
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Tournament":
        return cls(
            id=data["id"],
            name=data["name"],
            mode=TournamentType(data["mode"]),
            double_round=data.get("double_round", False),
            has_away_goals=data.get("has_away_goals", False),
            competitors=[Competitor(**c) for c in data.get("competitors", [])],
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
            status=data.get("status", "active"),
            created_at=data.get("created_at", 0),
        )
