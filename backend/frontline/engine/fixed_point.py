"""Fixed-point scoring arithmetic.

Multipliers are expressed in basis points (10000 = 1.0x). All arithmetic
stays in integers and floors toward zero.
"""

from collections.abc import Sequence

SCALE = 10_000

HALF = 5_000
NEUTRAL = 10_000
DOUBLE = 20_000

# Points per unit staked for pools A, B, C
BASE_RATES = (30, 40, 50)

# Largest value a signed 64-bit column holds (points, vault, balances)
MAX_STORED = 2**63 - 1


def multiplier(count: int, counts: Sequence[int]) -> int:
    """Popularity multiplier for a pool with ``count`` participants.

    The most crowded pool is halved and the least crowded doubled. The
    maximum is tested first, so any pool tied for the maximum gets HALF,
    including the case where all counts are equal.
    """
    if count == max(counts):
        return HALF
    if count == min(counts):
        return DOUBLE
    return NEUTRAL


def pool_points(amount: int, base_rate: int, rate_bps: int) -> int:
    """Points contributed by ``amount`` staked at ``base_rate`` x ``rate_bps``."""
    return amount * base_rate * rate_bps // SCALE


def fee_amount(value: int, fee_bps: int) -> int:
    """Basis-point fee on ``value``, floored."""
    return value * fee_bps // SCALE


def pro_rata(value: int, share: int, total: int) -> int:
    """``value`` scaled by ``share / total``, floored."""
    return value * share // total


def max_points(amounts: Sequence[int]) -> int:
    """Upper bound on the score of a split, every pool at DOUBLE."""
    return sum(pool_points(amount, rate, DOUBLE) for amount, rate in zip(amounts, BASE_RATES))
