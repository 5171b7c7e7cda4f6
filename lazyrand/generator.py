"""Seeded xoshiro256++ generator and the operations derived from its draws.

Every derived operation is defined in terms of ``next_u64`` with plain
modular arithmetic so that the Python and reference implementations produce
identical values for identical seeds:

- ``next_int(lo, hi)`` is ``lo + draw % (hi - lo + 1)``. Not rejection
  sampled; the modulo bias is negligible for ranges far below 2**64.
- ``shuffle`` walks ``i`` from ``len - 1`` down to 1 and swaps with
  ``draw % i``, so ``j`` never equals ``i``.
- ``next_f64`` scales the draw by ``1 / (2**64 - 1)`` and clamps the result
  below 1.0, giving ``[0.0, 1.0)``.

A ``Generator`` is not thread-safe. Share one across threads through
``shared.SharedRandom``.
"""

from __future__ import annotations

import logging
import operator
import struct
from typing import Any, MutableSequence, Optional, Sequence, TypeVar

from . import entropy, seeding
from .mixer import MASK64, State, advance
from .types import InvalidRangeError, ProvenanceTag

logger = logging.getLogger(__name__)

T = TypeVar("T")

WORD_BITS = struct.calcsize("P") * 8
_WORD_MASK = (1 << WORD_BITS) - 1

_F64_SCALE = 1.0 / float(MASK64)
# Largest double strictly below 1.0.
_BELOW_ONE = 1.0 - 2.0**-53


class Generator:
    """xoshiro256++ generator with a 64-bit seed.

    ``Generator()`` seeds itself from ``entropy.generate()``;
    ``Generator(seed)`` and ``Generator.from_seed(seed)`` are reproducible.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._state: State = (0, 0, 0, 0)
        self._seed: Optional[int] = None
        self.tag = ProvenanceTag.UNINITIALIZED
        if seed is None:
            seed = entropy.generate()
            self._reseed(seed)
            self.tag = ProvenanceTag.AUTO_SEEDED
            logger.debug("auto-seeded generator with seed %#018x", seed)
        else:
            self.set_seed(seed)

    @classmethod
    def from_seed(cls, seed: int) -> Generator:
        return cls(operator.index(seed))

    @classmethod
    def from_state(cls, state: Sequence[int]) -> Generator:
        """Restore a generator from a snapshot taken via ``state``.

        Raises ValueError unless ``state`` is four words in ``[0, 2**64)``
        with at least one nonzero.
        """
        words = tuple(operator.index(w) for w in state)
        if len(words) != 4 or any(w < 0 or w > MASK64 for w in words):
            raise ValueError(
                f"state must be four 64-bit unsigned words, got {state!r}"
            )
        if not any(words):
            raise ValueError("state must not be all zero")
        gen = cls.__new__(cls)
        gen._state = words  # type: ignore[assignment]
        gen._seed = None
        gen.tag = ProvenanceTag.USER_SEEDED
        return gen

    @property
    def state(self) -> State:
        return self._state

    @property
    def seed(self) -> Optional[int]:
        """The last seed applied, reduced to 64 bits, or None if restored."""
        return self._seed

    def __repr__(self) -> str:
        return f"<Generator tag={self.tag.name} seed={self._seed!r}>"

    def _reseed(self, seed: int) -> None:
        self._seed = seed & MASK64
        self._state = seeding.expand(seed)

    def set_seed(self, seed: int) -> None:
        """Discard the current stream and restart it from ``seed``."""
        self._reseed(operator.index(seed))
        self.tag = ProvenanceTag.USER_SEEDED

    def jump(self) -> None:
        """Skip ahead 2**128 draws."""
        self._state = seeding.jump(self._state)

    def long_jump(self) -> None:
        """Skip ahead 2**192 draws."""
        self._state = seeding.long_jump(self._state)

    def next_u64(self) -> int:
        """Uniform integer in [0, 2**64 - 1]."""
        self._state, result = advance(self._state)
        return result

    def next_int(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi] inclusive.

        Raises InvalidRangeError without drawing when ``hi < lo`` or the
        range holds more than 2**64 values.
        """
        lo = operator.index(lo)
        hi = operator.index(hi)
        span = hi - lo + 1
        if span <= 0 or span > MASK64 + 1:
            raise InvalidRangeError(lo, hi)
        return lo + self.next_u64() % span

    def next_bool(self) -> bool:
        return self.next_u64() % 2 == 1

    def next_f64(self) -> float:
        """Float in [0.0, 1.0)."""
        return min(self.next_u64() * _F64_SCALE, _BELOW_ONE)

    def next_usize(self) -> int:
        return self.next_u64() & _WORD_MASK

    def next_isize(self) -> int:
        value = self.next_u64() & _WORD_MASK
        if value >> (WORD_BITS - 1):
            value -= 1 << WORD_BITS
        return value

    def shuffle(self, seq: MutableSequence[Any]) -> None:
        """Permute ``seq`` in place. Sequences shorter than 2 draw nothing."""
        for i in range(len(seq) - 1, 0, -1):
            j = self.next_u64() % i
            seq[i], seq[j] = seq[j], seq[i]

    def choice(self, seq: Sequence[T]) -> Optional[T]:
        """Uniformly picked element of ``seq``, or None when it is empty."""
        n = len(seq)
        if n == 0:
            return None
        return seq[self.next_u64() % n]
