"""Lock-guarded generator handle and the process-wide instance behind it.

``SharedRandom`` owns one ``Generator``, created lazily on first use, and a
``threading.Lock``. Each method takes the lock, makes one call on the
generator, and releases it, so draws from any number of threads are totally
ordered by lock acquisition. Which thread gets which draw is still up to the
scheduler; callers who need a fixed sequence across threads must order their
calls themselves.

Code that wants shared randomness should accept a ``SharedRandom`` (or a
plain ``Generator`` when it runs on one thread) as a parameter. The
module-level functions below operate on a single process-wide instance and
exist for convenience at the top level of a program.

The lock is not reentrant: calling back into the same instance from inside
``shuffle`` (for example from a custom ``__setitem__``) deadlocks.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, MutableSequence, Optional, Sequence, TypeVar

from . import entropy
from .config import Config
from .generator import Generator
from .types import ProvenanceTag

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SharedRandom:
    """Thread-safe, lazily seeded generator handle.

    Args:
        generator: Use this generator instead of creating one on first use.
        config: Settings consulted when the generator is created lazily.
            Defaults to ``Config.from_env()`` at that moment.
    """

    def __init__(
        self,
        generator: Optional[Generator] = None,
        config: Optional[Config] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._generator = generator
        self._config = config

    def _get(self) -> Generator:
        # Caller holds self._lock.
        if self._generator is None:
            config = self._config or Config.from_env()
            if config.seed is not None:
                logger.debug(
                    "seeding shared generator from configuration: %d",
                    config.seed,
                )
                self._generator = Generator.from_seed(config.seed)
            else:
                self._generator = Generator()
        return self._generator

    def set_seed(self, seed: int) -> None:
        """Restart the stream from ``seed``, whatever was drawn before."""
        with self._lock:
            if self._generator is None:
                self._generator = Generator.from_seed(seed)
            else:
                self._generator.set_seed(seed)
        logger.debug("shared generator re-seeded")

    srand = set_seed

    def set_seed_plus(self, seed: int) -> None:
        """Re-seed with ``seed`` XORed with fresh entropy."""
        self.set_seed(seed ^ entropy.generate())

    def get_tag(self) -> ProvenanceTag:
        with self._lock:
            if self._generator is None:
                return ProvenanceTag.UNINITIALIZED
            return self._generator.tag

    def set_tag(self, tag: ProvenanceTag) -> None:
        with self._lock:
            self._get().tag = tag

    def rand(self) -> int:
        with self._lock:
            return self._get().next_u64()

    def randint(self, lo: int, hi: int) -> int:
        with self._lock:
            return self._get().next_int(lo, hi)

    def rand_bool(self) -> bool:
        with self._lock:
            return self._get().next_bool()

    def rand_f64(self) -> float:
        with self._lock:
            return self._get().next_f64()

    def rand_isize(self) -> int:
        with self._lock:
            return self._get().next_isize()

    def rand_usize(self) -> int:
        with self._lock:
            return self._get().next_usize()

    def shuffle(self, seq: MutableSequence[Any]) -> None:
        with self._lock:
            self._get().shuffle(seq)

    def choice(self, seq: Sequence[T]) -> Optional[T]:
        with self._lock:
            return self._get().choice(seq)


_GLOBAL = SharedRandom()


def global_instance() -> SharedRandom:
    """The process-wide instance used by the module-level functions."""
    return _GLOBAL


def set_seed(seed: int) -> None:
    _GLOBAL.set_seed(seed)


def srand(seed: int) -> None:
    _GLOBAL.set_seed(seed)


def set_seed_plus(seed: int) -> None:
    _GLOBAL.set_seed_plus(seed)


def get_tag() -> ProvenanceTag:
    return _GLOBAL.get_tag()


def set_tag(tag: ProvenanceTag) -> None:
    _GLOBAL.set_tag(tag)


def rand() -> int:
    """Uniform integer in [0, 2**64 - 1]."""
    return _GLOBAL.rand()


def randint(lo: int, hi: int) -> int:
    """Integer in [lo, hi] inclusive."""
    return _GLOBAL.randint(lo, hi)


def rand_bool() -> bool:
    return _GLOBAL.rand_bool()


def rand_f64() -> float:
    """Float in [0.0, 1.0)."""
    return _GLOBAL.rand_f64()


def rand_isize() -> int:
    return _GLOBAL.rand_isize()


def rand_usize() -> int:
    return _GLOBAL.rand_usize()


def shuffle(seq: MutableSequence[Any]) -> None:
    _GLOBAL.shuffle(seq)


def choice(seq: Sequence[T]) -> Optional[T]:
    return _GLOBAL.choice(seq)
