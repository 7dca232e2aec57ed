import logging
import random
from dataclasses import replace
from datetime import date
from typing import List, Optional

from league.doubles import generate_doubles_schedule
from league.models import Competitor, Match, Tournament, TournamentType
from league.round_robin import generate_round_robin
from league.utils import generate_id

logger = logging.getLogger(__name__)


def generate_fixtures(
    competitors: List[Competitor],
    mode: TournamentType,
    double_round: bool,
    rng: Optional[random.Random] = None,
) -> List[Match]:
    if TournamentType(mode) == TournamentType.ONE_VS_ONE:
        return generate_round_robin(competitors, double_round, rng)
    return generate_doubles_schedule(competitors, double_round, rng)


def create_tournament(
    name: str,
    mode: TournamentType,
    competitor_names: List[str],
    double_round: bool = False,
    has_away_goals: bool = False,
    rng: Optional[random.Random] = None,
) -> Tournament:
    """Build a tournament with its full fixture list.

    Blank names are dropped. Roster size is not checked here.
    """
    competitors = [
        Competitor(id=generate_id(), name=n.strip())
        for n in competitor_names
        if n and n.strip()
    ]
    mode = TournamentType(mode)
    matches = generate_fixtures(competitors, mode, double_round, rng)
    tournament = Tournament(
        id=generate_id(),
        name=name.strip() or f"Tournament {date.today().isoformat()}",
        mode=mode,
        double_round=double_round,
        has_away_goals=has_away_goals,
        competitors=competitors,
        matches=matches,
        status="active",
    )
    logger.info(
        "created tournament %s (%s, %d competitors, %d matches)",
        tournament.id, mode.value, len(competitors), len(matches),
    )
    return tournament


def record_result(
    matches: List[Match],
    match_id: str,
    home_score: int,
    away_score: int,
    home_team: str = "",
    away_team: str = "",
) -> List[Match]:
    """Return a new match list with ``match_id`` scored.

    The old list and its Match objects are not touched, so anyone still
    holding them keeps a consistent view. Re-scoring a completed match
    overwrites its result.
    """
    updated = []
    for m in matches:
        if m.id == match_id:
            m = replace(
                m,
                home=replace(m.home, score=home_score, real_world_team_name=home_team),
                away=replace(m.away, score=away_score, real_world_team_name=away_team),
                is_completed=m.is_completed or (
                    home_score is not None and away_score is not None
                ),
            )
        updated.append(m)
    return updated
