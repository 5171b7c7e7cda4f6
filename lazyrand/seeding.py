"""Seed expansion and jump functions for xoshiro256++.

A single 64-bit seed is XORed with ``SEED_XOR`` and its four 16-bit slices
are spread over the four state words. That leaves every word with only its
low 16 bits populated, so neighbouring seeds would produce visibly related
early output. ``expand`` therefore always runs the jump walk before the
state is handed to a generator.

The jump polynomials are the ones published with the reference xoshiro256++
implementation. ``JUMP`` is equivalent to 2**128 calls to ``advance`` and
``LONG_JUMP`` to 2**192; both can be used to carve one seed into
non-overlapping streams.

Subject to the reference-vector constraint: ``lazyrand_cmp`` pins the state
produced here against recorded outputs, so any change to the constants or
the bit order of the walk is a compatibility break.
"""

from __future__ import annotations

from .mixer import MASK64, State, advance

SEED_XOR = 16868548727063204

JUMP: State = (
    0x180EC6D33CFD0ABA,
    0xD5A61266F0C9392C,
    0xA9582618E03FC9AA,
    0x39ABDC4529B1661C,
)

LONG_JUMP: State = (
    0x76E15D3EFEFDCBBF,
    0xC5004E441C522FB3,
    0x77710069854EE241,
    0x39109BB02ACBE635,
)


def split_seed(seed: int) -> State:
    """Spread a seed over the four state words, 16 bits each.

    The seed is reduced modulo 2**64 first. A seed equal to ``SEED_XOR``
    would mix to zero and give the all-zero state, which ``advance`` never
    leaves; it is mapped to the same mixed value as seed 0 instead.
    """
    mixed = (seed & MASK64) ^ SEED_XOR
    if mixed == 0:
        mixed = SEED_XOR
    return (
        mixed & 0xFFFF,
        (mixed >> 16) & 0xFFFF,
        (mixed >> 32) & 0xFFFF,
        (mixed >> 48) & 0xFFFF,
    )


def jump(state: State, polynomial: State = JUMP) -> State:
    """Run the 256-step jump walk and return the resulting state.

    For every bit of the polynomial (word by word, least significant bit
    first) the current state is XORed into the accumulators when the bit is
    set, then the state advances once.
    """
    a0 = a1 = a2 = a3 = 0
    for word in polynomial:
        for b in range(64):
            if word & (1 << b):
                a0 ^= state[0]
                a1 ^= state[1]
                a2 ^= state[2]
                a3 ^= state[3]
            state, _ = advance(state)
    return (a0, a1, a2, a3)


def long_jump(state: State) -> State:
    return jump(state, LONG_JUMP)


def expand(seed: int) -> State:
    """Map a 64-bit seed to a ready-to-use generator state."""
    return jump(split_seed(seed))
