import random
import uuid
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def generate_id() -> str:
    return str(uuid.uuid4())[:8]


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a shuffled copy of ``items``; the input is left untouched."""
    rng = rng or random
    shuffled = list(items)
    rng.shuffle(shuffled)
    return shuffled


def partnership_key(competitor_ids: Sequence[str]) -> tuple:
    """Canonical key of an unordered pair of competitor ids."""
    return tuple(sorted(competitor_ids))
