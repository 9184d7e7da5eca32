"""
Weighted discrete sampling for SwingSynth.

Used to pick a shot shape from a skill tier's weight table, but works
for any sequence of items.
"""

import math
from typing import Optional, Sequence, TypeVar

import numpy as np

from swingsynth.errors import InvalidWeights

T = TypeVar("T")


def choose(items: Sequence[T], weights: Sequence[float],
           rng: Optional[np.random.Generator] = None) -> T:
    """Pick one item with probability proportional to its weight.

    Draws r in [0, sum(weights)) and subtracts successive weights until
    the remainder is <= 0. Zero-weight items are never picked, so a
    vector with one non-zero weight always returns that item. If float
    error leaves a positive remainder, the last positive-weight item is
    returned.

    Args:
        items: Candidates.
        weights: Non-negative weight per candidate, not all zero.
        rng: Random stream; a fresh one is created when omitted.

    Raises:
        InvalidWeights: on length mismatch, negative or non-finite
            weights, or an all-zero vector.
    """
    if len(items) != len(weights):
        raise InvalidWeights(
            f"{len(items)} items but {len(weights)} weights"
        )
    for w in weights:
        if not math.isfinite(w) or w < 0:
            raise InvalidWeights(f"Weights must be finite and >= 0: {list(weights)}")
    total = math.fsum(weights)
    if total <= 0:
        raise InvalidWeights(f"Weights must not all be zero: {list(weights)}")

    if rng is None:
        rng = np.random.default_rng()

    remainder = rng.random() * total
    fallback = None
    for item, weight in zip(items, weights):
        if weight <= 0:
            continue
        remainder -= weight
        if remainder <= 0:
            return item
        fallback = item
    return fallback
