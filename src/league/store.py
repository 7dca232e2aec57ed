import logging
import threading
from dataclasses import replace
from typing import Dict, List, Optional

from league.functions import record_result
from league.models import Tournament

logger = logging.getLogger(__name__)


class TournamentStore:
    """In-memory tournaments keyed by id.

    Writers swap in new Tournament objects instead of mutating the stored
    ones, so a reader holding an earlier snapshot never sees a half-applied
    score.
    """

    def __init__(self):
        self._tournaments: Dict[str, Tournament] = {}
        self._lock = threading.Lock()

    def list(self) -> List[Tournament]:
        return sorted(self._tournaments.values(), key=lambda t: -t.created_at)

    def get(self, tid: str) -> Optional[Tournament]:
        return self._tournaments.get(tid)

    def add(self, tournament: Tournament) -> Tournament:
        with self._lock:
            self._tournaments[tournament.id] = tournament
        return tournament

    def update_match(
        self,
        tid: str,
        match_id: str,
        home_score: int,
        away_score: int,
        home_team: str = "",
        away_team: str = "",
    ) -> Tournament:
        with self._lock:
            t = self._tournaments[tid]
            matches = record_result(
                t.matches, match_id, home_score, away_score, home_team, away_team
            )
            t = replace(t, matches=matches)
            self._tournaments[tid] = t
        logger.info("tournament %s: match %s scored %s-%s", tid, match_id, home_score, away_score)
        return t

    def finish(self, tid: str) -> Tournament:
        with self._lock:
            t = replace(self._tournaments[tid], status="completed")
            self._tournaments[tid] = t
        logger.info("tournament %s finished", tid)
        return t

    def delete(self, tid: str) -> None:
        with self._lock:
            self._tournaments.pop(tid, None)


_store = TournamentStore()


def get_store() -> TournamentStore:
    return _store
