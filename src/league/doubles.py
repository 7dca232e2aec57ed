import logging
import random
from collections import Counter
from itertools import combinations
from typing import List, Optional, Tuple

from league.models import Competitor, Match, new_match
from league.utils import partnership_key, shuffle

logger = logging.getLogger(__name__)

Pair = List[str]
Matchup = Tuple[Pair, Pair]


def _partnerships(competitor_ids: List[str]) -> List[Pair]:
    return [[a, b] for a, b in combinations(competitor_ids, 2)]


def _disjoint_matchups(pairs: List[Pair]) -> List[Matchup]:
    matchups = []
    for i, pair1 in enumerate(pairs):
        for pair2 in pairs[i + 1:]:
            if not set(pair1) & set(pair2):
                matchups.append((pair1, pair2))
    return matchups


def _select_matchups(matchups: List[Matchup], cap: int) -> List[Matchup]:
    """Greedy pass: take a matchup while both partnerships are under ``cap``.

    No backtracking, so the result can be shorter than the best possible
    schedule for a given roster.
    """
    usage = Counter()
    selected = []
    for pair1, pair2 in matchups:
        k1, k2 = partnership_key(pair1), partnership_key(pair2)
        if usage[k1] < cap and usage[k2] < cap:
            selected.append((pair1, pair2))
            usage[k1] += 1
            usage[k2] += 1
    return selected


def _order_matchups(matchups: List[Matchup]) -> List[Matchup]:
    """Prefer a matchup sharing nobody with the previous one, else the first left."""
    remaining = list(matchups)
    ordered = []
    last_players = set()
    while remaining:
        index = next(
            (
                i for i, (pair1, pair2) in enumerate(remaining)
                if not last_players & set(pair1 + pair2)
            ),
            0,
        )
        selected = remaining.pop(index)
        ordered.append(selected)
        last_players = set(selected[0] + selected[1])
    return ordered


def generate_doubles_schedule(
    competitors: List[Competitor],
    double_round: bool,
    rng: Optional[random.Random] = None,
) -> List[Match]:
    """Generate a 2v2 schedule where partners rotate, then balance it."""
    n = len(competitors)
    if n < 4:
        return []

    competitor_ids = [c.id for c in competitors]
    pairs = shuffle(_partnerships(competitor_ids), rng)
    candidates = shuffle(_disjoint_matchups(pairs), rng)

    cap = 2 if double_round else 1
    selected = _select_matchups(candidates, cap)
    ordered = _order_matchups(selected)

    per_round = n // 2
    matches = [
        new_match(index // per_round + 1, pair1, pair2)
        for index, (pair1, pair2) in enumerate(ordered)
    ]
    logger.debug(
        "doubles: %d competitors, %d candidate matchups, %d selected (cap %d)",
        n, len(candidates), len(matches), cap,
    )

    return balance_schedule(competitors, matches, rng)


def appearance_counts(competitors: List[Competitor], matches: List[Match]) -> Counter:
    counts = Counter({c.id: 0 for c in competitors})
    for m in matches:
        for pid in m.home.competitor_ids + m.away.competitor_ids:
            counts[pid] += 1
    return counts


def balance_schedule(
    competitors: List[Competitor],
    matches: List[Match],
    rng: Optional[random.Random] = None,
) -> List[Match]:
    """Append ghost matches so underplayed competitors catch up.

    Underplayed competitors are paired in roster order and each pair gets one
    extra match against two other competitors. That opposing side is marked
    ghost so it never counts in standings. Single pass, best effort: an odd
    competitor out gets nothing. Appends to ``matches`` and returns it.
    """
    counts = appearance_counts(competitors, matches)
    max_played = max(counts.values(), default=0)
    underplayed = [c for c in competitors if counts[c.id] < max_played]
    if len(underplayed) < 2:
        return matches

    played_pairs = set()
    for m in matches:
        played_pairs.add(partnership_key(m.home.competitor_ids))
        played_pairs.add(partnership_key(m.away.competitor_ids))

    ghost_round = max((m.round for m in matches), default=0) + 1
    added = 0
    for p1, p2 in zip(underplayed[0::2], underplayed[1::2]):
        pool = [c.id for c in competitors if c.id not in (p1.id, p2.id)]
        if len(pool) < 2:
            continue
        opponent_pairs = shuffle(_partnerships(pool), rng)
        opponents = next(
            (p for p in opponent_pairs if partnership_key(p) not in played_pairs),
            opponent_pairs[0],
        )
        matches.append(
            new_match(ghost_round, [p1.id, p2.id], opponents, away_is_ghost=True)
        )
        added += 1

    logger.info(
        "balance: max %d games, %d underplayed, %d ghost matches in round %d",
        max_played, len(underplayed), added, ghost_round,
    )
    return matches
