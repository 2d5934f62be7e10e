"""Random Source — the single seam through which core code draws randomness.

Invariants:
    - Core NEVER touches the `random` module's global generator
    - Every draw goes through RandomSource.random() in [0.0, 1.0)
    - shuffled() never mutates its input

Design Decisions:
    - Protocol over ABC: random.Random satisfies it structurally, tests can pass
      a scripted sequence without subclassing
    - Fisher-Yates written against random() only, so one float stream fully
      determines every shuffle, pick and jitter
"""

import math
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0.0, 1.0)."""
    def random(self) -> float: ...


def random_index(rng: RandomSource, length: int) -> int:
    """Uniform index in [0, length)."""
    return min(math.floor(rng.random() * length), length - 1)


def shuffled(items: Sequence[T], rng: RandomSource) -> list[T]:
    """Fisher-Yates shuffle into a new list."""
    result = list(items)
    current = len(result)
    while current > 0:
        pick = random_index(rng, current)
        current -= 1
        result[current], result[pick] = result[pick], result[current]
    return result


def choice(items: Sequence[T], rng: RandomSource) -> T:
    """Uniform pick. Caller guarantees items is non-empty."""
    return items[random_index(rng, len(items))]


def uniform(rng: RandomSource, low: float, high: float) -> float:
    return low + (high - low) * rng.random()
