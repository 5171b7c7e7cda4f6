"""Fast, reproducible, non-cryptographic random numbers.

Module-level functions draw from one lazily seeded, lock-guarded process-wide
generator::

    import lazyrand

    lazyrand.randint(1, 6)

    lazyrand.srand(123456)       # same stream on every run
    lazyrand.rand()

    deck = list(range(52))
    lazyrand.shuffle(deck)

For an explicit handle, construct a ``Generator`` (single thread) or a
``SharedRandom`` (any number of threads) and pass it where it is needed.
"""

from .generator import Generator
from .shared import (
    SharedRandom,
    choice,
    get_tag,
    global_instance,
    rand,
    rand_bool,
    rand_f64,
    rand_isize,
    rand_usize,
    randint,
    set_seed,
    set_seed_plus,
    set_tag,
    shuffle,
    srand,
)
from .types import InvalidRangeError, ProvenanceTag

__all__ = [
    "Generator",
    "InvalidRangeError",
    "ProvenanceTag",
    "SharedRandom",
    "choice",
    "get_tag",
    "global_instance",
    "rand",
    "rand_bool",
    "rand_f64",
    "rand_isize",
    "rand_usize",
    "randint",
    "set_seed",
    "set_seed_plus",
    "set_tag",
    "shuffle",
    "srand",
]
