import logging
import random
from typing import List, Optional

from league.models import Competitor, Match, new_match

logger = logging.getLogger(__name__)

BYE = Competitor(id="__bye__", name="Bye")


def generate_round_robin(
    competitors: List[Competitor],
    double_round: bool,
    rng: Optional[random.Random] = None,
) -> List[Match]:
    """Berger table (circle method) schedule for 1v1 tournaments.

    Position 0 stays fixed while the rest rotate one step per round, so every
    pair meets once per pass. With an odd roster a bye is added and whoever
    draws it sits the round out. In the second pass of a double round every
    pairing comes back with home and away reversed.

    ``rng`` is accepted for symmetry with the doubles generator; the circle
    method itself is deterministic.
    """
    if len(competitors) < 2:
        return []

    working = list(competitors)
    if len(working) % 2 != 0:
        working.append(BYE)
    total = len(working)
    rounds_per_pass = total - 1
    rounds = rounds_per_pass * 2 if double_round else rounds_per_pass

    matches = []
    for round_num in range(rounds):
        second_half = round_num >= rounds_per_pass
        swap = ((round_num % rounds_per_pass) % 2 == 1) != second_half

        for i in range(total // 2):
            p1 = working[i]
            p2 = working[total - 1 - i]
            if p1 is BYE or p2 is BYE:
                continue
            home, away = (p2, p1) if swap else (p1, p2)
            matches.append(new_match(round_num + 1, [home.id], [away.id]))

        # Rotate: last element moves to index 1
        working.insert(1, working.pop())

    logger.debug(
        "round robin: %d competitors, %d rounds, %d matches",
        len(competitors), rounds, len(matches),
    )
    return matches
