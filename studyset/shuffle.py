"""Randomness helpers. Every mode takes its random source as an argument."""

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def shuffled(items: Sequence[T], rng: random.Random) -> list[T]:
    """Return a Fisher-Yates shuffled copy of items."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randrange(i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def draw(items: Sequence[T], k: int, rng: random.Random) -> list[T]:
    """Draw up to k items uniformly without replacement."""
    return rng.sample(list(items), min(k, len(items)))
