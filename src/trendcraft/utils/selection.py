"""Pluggable selection strategies.

Every place that picks "one of N" (templates, CTAs, hashtag counts, reach
estimates) takes a ``PickOne`` callable instead of calling ``random`` directly.
Production wiring uses ``random_pick()``; tests pass ``first_pick`` or
``index_pick(n)`` to get reproducible output.

Usage:
    from trendcraft.utils.selection import random_pick, index_pick

    pick = random_pick(seed=42)
    pick(["a", "b", "c"])  # reproducible for a given seed

    pick = index_pick(1)
    pick(["a", "b", "c"])  # "b"
"""

from __future__ import annotations

import random
from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")

# Takes a non-empty sequence, returns one of its elements
PickOne = Callable[[Sequence[T]], T]


def random_pick(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> PickOne:
    """Create a uniform random selector.

    Args:
        seed: Optional seed for a private RNG.
        rng: Existing RNG to draw from. Takes precedence over seed.

    Returns:
        Selector backed by ``rng.choice``.
    """
    source = rng if rng is not None else random.Random(seed)

    def _pick(options: Sequence[T]) -> T:
        if not options:
            raise ValueError("Cannot pick from an empty sequence")
        return source.choice(options)

    return _pick


def first_pick(options: Sequence[T]) -> T:
    """Always pick the first option."""
    if not options:
        raise ValueError("Cannot pick from an empty sequence")
    return options[0]


def last_pick(options: Sequence[T]) -> T:
    """Always pick the last option."""
    if not options:
        raise ValueError("Cannot pick from an empty sequence")
    return options[-1]


def index_pick(index: int) -> PickOne:
    """Create a selector that always picks the same position.

    The index wraps around, so ``index_pick(4)`` on a 3-element sequence
    picks the second element.
    """

    def _pick(options: Sequence[T]) -> T:
        if not options:
            raise ValueError("Cannot pick from an empty sequence")
        return options[index % len(options)]

    return _pick
