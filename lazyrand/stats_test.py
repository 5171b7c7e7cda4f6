"""Statistical sanity checks on generator output."""

import numpy as np

from .generator import Generator
from .stats import (
    bit_agreement,
    bit_frequencies,
    bit_matrix,
    bucket_counts,
    chi_square,
    draws,
)


def test_draws_match_next_u64():
    values = draws(Generator.from_seed(123456), 3)
    assert values.dtype == np.uint64
    assert values.tolist() == [
        9557019149100550987,
        4037241920691566469,
        4911137104857879724,
    ]


def test_draws_empty():
    assert draws(Generator.from_seed(1), 0).shape == (0,)


def test_bucket_counts_and_chi_square_helpers():
    values = np.array([0, 1, 2, 3, 4, 5], dtype=np.uint64)
    counts = bucket_counts(values, 3)
    assert counts.tolist() == [2, 2, 2]
    assert chi_square(counts) == 0.0
    assert chi_square([10, 0]) == 10.0


def test_bit_matrix_layout():
    values = np.array([1, 1 << 63], dtype=np.uint64)
    bits = bit_matrix(values)
    assert bits.shape == (2, 64)
    assert bits[0, 0] == 1 and bits[0].sum() == 1
    assert bits[1, 63] == 1 and bits[1].sum() == 1


def test_uniform_buckets():
    values = draws(Generator.from_seed(2024), 10000)
    counts = bucket_counts(values, 10)
    assert counts.sum() == 10000
    # df = 9; 27.9 is the 0.001 critical value.
    assert chi_square(counts) < 27.9


def test_dice_faces_balanced():
    gen = Generator.from_seed(5)
    rolls = np.array([gen.next_int(1, 6) for _ in range(6000)])
    counts = np.bincount(rolls, minlength=7)[1:]
    assert counts.min() > 900
    assert counts.max() < 1100


def test_no_stuck_bits():
    freqs = bit_frequencies(draws(Generator.from_seed(7), 4096))
    assert freqs.shape == (64,)
    assert freqs.min() > 0.45
    assert freqs.max() < 0.55


def test_adjacent_seeds_are_decorrelated():
    a = draws(Generator.from_seed(0), 1000)
    b = draws(Generator.from_seed(1), 1000)
    assert 0.49 < bit_agreement(a, b) < 0.51


def test_bit_agreement_identical_streams():
    a = draws(Generator.from_seed(9), 100)
    assert bit_agreement(a, a.copy()) == 1.0
