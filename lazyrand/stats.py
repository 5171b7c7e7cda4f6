"""Quick statistical checks on generator output.

These are sanity checks, not a test battery: they catch a broken mixer, a
stuck bit or correlated seeds, and nothing subtler. Use TestU01 or
PractRand for real quality assessment.

Used by the test suite and ``scripts/bench.py``.
"""

from __future__ import annotations

import numpy as np

from .generator import Generator

_BIT_POSITIONS = np.arange(64, dtype=np.uint64)


def draws(gen: Generator, n: int) -> np.ndarray:
    """The next ``n`` raw draws of ``gen`` as a uint64 array."""
    return np.array([gen.next_u64() for _ in range(n)], dtype=np.uint64)


def bucket_counts(values: np.ndarray, buckets: int) -> np.ndarray:
    """Histogram of ``values % buckets``."""
    return np.bincount(
        (values % np.uint64(buckets)).astype(np.int64), minlength=buckets
    )


def chi_square(counts: np.ndarray) -> float:
    """Pearson chi-square statistic of ``counts`` against a flat expectation.

    For k buckets the statistic of uniform data is about k - 1.
    """
    counts = np.asarray(counts, dtype=np.float64)
    expected = counts.sum() / len(counts)
    return float(((counts - expected) ** 2 / expected).sum())


def bit_matrix(values: np.ndarray) -> np.ndarray:
    """(n, 64) array of 0/1, column b holding bit b of each value."""
    return ((values[:, None] >> _BIT_POSITIONS) & np.uint64(1)).astype(
        np.uint8
    )


def bit_frequencies(values: np.ndarray) -> np.ndarray:
    """Fraction of ones at each of the 64 bit positions."""
    return bit_matrix(values).mean(axis=0)


def bit_agreement(a: np.ndarray, b: np.ndarray) -> float:
    """Fraction of bit positions on which two equal-length streams agree.

    Close to 0.5 for independent streams; 1.0 for identical ones.
    """
    return float((bit_matrix(a) == bit_matrix(b)).mean())
