"""Unit tests for fixed-point scoring helpers."""

from frontline.engine.fixed_point import (
    BASE_RATES,
    DOUBLE,
    HALF,
    NEUTRAL,
    fee_amount,
    multiplier,
    pool_points,
    pro_rata,
)


def test_unique_extremes() -> None:
    counts = (1, 2, 3)
    assert multiplier(1, counts) == DOUBLE
    assert multiplier(2, counts) == NEUTRAL
    assert multiplier(3, counts) == HALF


def test_all_equal_counts_get_half() -> None:
    counts = (5, 5, 5)
    assert [multiplier(n, counts) for n in counts] == [HALF, HALF, HALF]


def test_tie_at_max_is_half_and_lone_min_is_double() -> None:
    counts = (4, 4, 1)
    assert [multiplier(n, counts) for n in counts] == [HALF, HALF, DOUBLE]


def test_tie_at_min_is_double() -> None:
    counts = (1, 1, 3)
    assert [multiplier(n, counts) for n in counts] == [DOUBLE, DOUBLE, HALF]


def test_empty_pools_tie_at_max() -> None:
    counts = (0, 0, 0)
    assert multiplier(0, counts) == HALF


def test_pool_points_floors() -> None:
    assert pool_points(100, BASE_RATES[0], DOUBLE) == 6000
    # 3 * 30 * 0.5 = 45
    assert pool_points(3, 30, HALF) == 45
    # 1 * 1 * 0.5 = 0.5 -> 0
    assert pool_points(1, 1, HALF) == 0


def test_fee_and_pro_rata() -> None:
    assert fee_amount(1000, 500) == 50
    assert fee_amount(999, 500) == 49
    assert fee_amount(1000, 0) == 0
    assert fee_amount(1000, 10_000) == 1000
    assert pro_rata(950, 600, 600) == 950
    assert pro_rata(100, 1, 3) == 33


def test_no_overflow_on_large_values() -> None:
    big = 2**63
    assert pool_points(big, 50, DOUBLE) == big * 100
