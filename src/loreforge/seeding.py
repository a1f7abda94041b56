# (c) 2026 (KriaetvAspie / AspieTheBard)
# Licensed under the Polyform Noncommercial License 1.0.0
"""
seeding.py — Deterministic seeds, per-call random streams, weighted selection.

Public helpers:
    seed(x, y, z, salt=0)        -> int          (unsigned 32-bit)
    stream_for(position, salt=0) -> LoreStream
    weighted_index(weights, stream) -> int

No function here touches the module-level ``random`` state.  Each generator
call builds its own LoreStream from a seed, so two calls never share draws
and the order in which entities are named has no effect on the names.
"""

from __future__ import annotations

import math
import random
from typing import Sequence

_MASK32 = 0xFFFFFFFF

# Distinct large odd multipliers, one per axis (spatial-hash style)
_PRIME_X    = 73856093
_PRIME_Y    = 19349663
_PRIME_Z    = 83492791
_PRIME_SALT = 2654435761   # Knuth's multiplicative constant


def _axis(value, prime: int) -> int:
    try:
        v = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if not math.isfinite(v):
        return 0
    try:
        scaled = int(v * prime)
    except OverflowError:
        # v * prime left float range; v is integral this far out
        scaled = int(v) * prime
    return scaled & _MASK32


def seed(x, y, z, salt: int = 0) -> int:
    """Mix a 3D coordinate (+ optional integer salt) into an unsigned 32-bit seed.

    Same inputs always give the same seed, in this process or any other.
    Never raises: non-numeric and non-finite coordinates count as zero.
    """
    h = _axis(x, _PRIME_X) ^ _axis(y, _PRIME_Y) ^ _axis(z, _PRIME_Z)
    try:
        s = int(salt)
    except (TypeError, ValueError, OverflowError):
        s = 0
    if s:
        h ^= (s * _PRIME_SALT) & _MASK32
    return h & _MASK32


class LoreStream:
    """Explicit pseudo-random stream threaded through one generator call."""
    __slots__ = ('seed', '_rng')

    def __init__(self, seed_value: int) -> None:
        self.seed: int = int(seed_value) & _MASK32
        self._rng = random.Random(self.seed)

    def __repr__(self) -> str:
        return f"LoreStream(seed={self.seed})"

    def next_float(self) -> float:
        """Uniform float in [0, 1)."""
        return self._rng.random()

    def next_int(self, lo: int, hi: int) -> int:
        """Uniform int in [lo, hi).  An empty range returns *lo*."""
        if hi <= lo:
            return lo
        return self._rng.randrange(lo, hi)

    def next_index(self) -> int:
        """Raw non-negative 32-bit draw, reduced by the caller with ``mod len``."""
        return self._rng.getrandbits(32)

    def chance(self, p: float) -> bool:
        """True with probability *p* (one draw, even when p is 0 or 1)."""
        return self._rng.random() < p


def stream_for(position, salt: int = 0) -> LoreStream:
    """Build the stream for an (x, y, z) position.  Missing axes count as 0;
    anything that is not a sequence counts as the origin."""
    try:
        coords = tuple(position or ())[:3]
    except TypeError:
        coords = ()
    coords = coords + (0.0,) * (3 - len(coords))
    return LoreStream(seed(coords[0], coords[1], coords[2], salt))


def weighted_index(weights: Sequence[float], stream: LoreStream) -> int:
    """Pick one index from *weights* with a single draw from *stream*.

    Cumulative scan: the first category with positive weight whose running
    total reaches the draw wins.  Negative weights count as zero.  When the
    total is not positive every index is equally likely.  An empty weight
    list returns 0.
    """
    n = len(weights)
    if n == 0:
        return 0
    clean = [w if w > 0 else 0.0 for w in weights]
    total = sum(clean)
    if total <= 0:
        return stream.next_int(0, n)

    draw = stream.next_float() * total
    running = 0.0
    last_positive = 0
    for i, w in enumerate(clean):
        if w <= 0:
            continue
        running += w
        last_positive = i
        if running >= draw:
            return i
    # float rounding can leave the draw a hair above the final running total
    return last_positive
