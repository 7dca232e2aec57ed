import math
from typing import Dict, List, Optional

from league.models import Competitor, Match, MatchSide, StandingsRow, TeamStat, TournamentType


def _outcome(score_for: int, score_against: int) -> str:
    if score_for > score_against:
        return "won"
    if score_for == score_against:
        return "drawn"
    return "lost"


def _win_rate(won: int, played: int) -> int:
    # Half rounds up: 1 of 8 is 13%, not 12%
    return math.floor(won * 100 / played + 0.5)


def calculate_standings(
    competitors: List[Competitor],
    matches: List[Match],
    mode: Optional[TournamentType] = None,
) -> List[StandingsRow]:
    """Standings table, one row per competitor.

    Only completed matches with both scores count, and ghost sides are
    skipped entirely. Win 3, draw 1, loss 0. Sorted by points, goal
    difference, then goals for; other ties keep roster order. ``mode`` does
    not change anything, 1v1 and 2v2 share the same rule.
    """
    stats: Dict[str, StandingsRow] = {
        c.id: StandingsRow(competitor_id=c.id, competitor_name=c.name)
        for c in competitors
    }

    def process_side(side: MatchSide, opponent: MatchSide):
        if side.is_ghost:
            return
        outcome = _outcome(side.score, opponent.score)
        for pid in side.competitor_ids:
            s = stats.get(pid)
            if s is None:
                continue
            s.played += 1
            s.goals_for += side.score
            s.goals_against += opponent.score
            s.goal_difference = s.goals_for - s.goals_against
            if outcome == "won":
                s.won += 1
                s.points += 3
            elif outcome == "drawn":
                s.drawn += 1
                s.points += 1
            else:
                s.lost += 1

    for match in matches:
        if not match.has_result:
            continue
        process_side(match.home, match.away)
        process_side(match.away, match.home)

    return sorted(
        stats.values(),
        key=lambda s: (-s.points, -s.goal_difference, -s.goals_for),
    )


def calculate_team_stats(matches: List[Match]) -> List[TeamStat]:
    """Win/draw/loss record per real-world team name picked for a match."""
    team_stats: Dict[str, TeamStat] = {}

    def process_team(side: MatchSide, opponent: MatchSide):
        if side.is_ghost:
            return
        name = (side.real_world_team_name or "").strip()
        if not name:
            return
        t = team_stats.setdefault(name, TeamStat(team_name=name))
        t.played += 1
        outcome = _outcome(side.score, opponent.score)
        setattr(t, outcome, getattr(t, outcome) + 1)
        t.win_rate = _win_rate(t.won, t.played)

    for match in matches:
        if not match.has_result:
            continue
        process_team(match.home, match.away)
        process_team(match.away, match.home)

    return sorted(
        team_stats.values(),
        key=lambda t: (-t.won, -t.win_rate, t.team_name),
    )
