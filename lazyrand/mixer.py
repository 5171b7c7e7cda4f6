"""xoshiro256++ state transition.

Reference: https://prng.di.unimi.it/xoshiro256plusplus.c

The state is four 64-bit words held as a plain tuple of ints. ``advance`` is a
pure function: it never mutates its input and has no hidden inputs, so the
same state always yields the same ``(new_state, output)`` pair. Python ints
are unbounded, so every add and shift is masked back to 64 bits here.
"""

from __future__ import annotations

MASK64 = 0xFFFFFFFFFFFFFFFF

State = tuple[int, int, int, int]


def rotl(x: int, k: int) -> int:
    """Rotate a 64-bit word left by k bits."""
    return ((x << k) | (x >> (64 - k))) & MASK64


def advance(state: State) -> tuple[State, int]:
    """One xoshiro256++ step. Returns the next state and the 64-bit output."""
    s0, s1, s2, s3 = state

    result = (rotl((s0 + s3) & MASK64, 23) + s0) & MASK64
    t = (s1 << 17) & MASK64

    s2 ^= s0
    s3 ^= s1
    s1 ^= s2
    s0 ^= s3

    s2 ^= t
    s3 = rotl(s3, 45)

    return (s0, s1, s2, s3), result
