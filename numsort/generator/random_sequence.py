from __future__ import annotations

import random
from typing import List, Optional


DEFAULT_LOW = 1
DEFAULT_HIGH = 1000


def generate(
    count: int,
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """Return ``count`` integers drawn uniformly from ``[low, high]`` inclusive.

    A fresh ``random.Random()`` (seeded from OS entropy) is used unless ``rng``
    is given.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    r = rng if rng is not None else random.Random()
    return [r.randint(low, high) for _ in range(count)]
