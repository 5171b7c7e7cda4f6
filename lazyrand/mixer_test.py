"""Tests for the xoshiro256++ state transition."""

from .mixer import MASK64, advance, rotl


def test_rotl_wraps_high_bits():
    assert rotl(1 << 63, 1) == 1
    assert rotl(0x8000000000000001, 4) == 0x18
    assert rotl(0x0123456789ABCDEF, 64 - 8) == 0xEF0123456789ABCD


def test_rotl_stays_within_64_bits():
    assert rotl(MASK64, 23) == MASK64
    assert rotl(0xFFFF000000000000, 17) <= MASK64


def test_advance_reference_state():
    """First step from (1, 2, 3, 4) matches the reference C code."""
    state, out = advance((1, 2, 3, 4))
    assert out == 41943041
    assert state == (7, 0, 262146, 211106232532992)

    _, out2 = advance(state)
    assert out2 == 58720359


def test_advance_is_pure():
    start = (11, 22, 33, 44)
    a = advance(start)
    b = advance(start)
    assert a == b
    assert start == (11, 22, 33, 44)


def test_advance_wraps_without_overflow():
    state = (MASK64, MASK64, MASK64, MASK64)
    for _ in range(100):
        state, out = advance(state)
        assert 0 <= out <= MASK64
        assert all(0 <= w <= MASK64 for w in state)


def test_zero_state_is_fixed_point():
    # Why seeding must never produce it.
    assert advance((0, 0, 0, 0)) == ((0, 0, 0, 0), 0)
