"""Xorshift pseudo-random numbers and root selection."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF
_MIN_T = 0.001


@dataclass
class XorShift:
    """32-bit xorshift generator. A zero state stays zero."""

    state: int = 2463534242

    def __post_init__(self) -> None:
        self.state &= _MASK32

    def random(self) -> float:
        """Advance the state and return a float in [0, 1)."""
        x = self.state
        x ^= (x << 13) & _MASK32
        x ^= x >> 17
        x ^= (x << 5) & _MASK32
        self.state = x
        return x / 4294967296.0


def nearest_positive(t1: float, t2: float) -> float:
    """Return the smaller of two roots above 0.001, or 0 when neither is."""
    if t1 <= _MIN_T and t2 <= _MIN_T:
        return 0.0
    if t1 <= _MIN_T:
        return t2
    if t2 <= _MIN_T:
        return t1
    return min(t1, t2)