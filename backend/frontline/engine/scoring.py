"""Popularity-weighted score computation."""

import logging

from frontline.engine.exceptions import RoundStillOpen
from frontline.engine.fixed_point import BASE_RATES, multiplier, pool_points
from frontline.models import PlayerRound, Round

logger = logging.getLogger(__name__)


def pool_multipliers(counts: tuple[int, int, int]) -> tuple[int, int, int]:
    """Multiplier in basis points for each pool given participant counts."""
    return tuple(multiplier(count, counts) for count in counts)


def score(amounts: tuple[int, int, int], counts: tuple[int, int, int]) -> int:
    """Total points for a stake split under the given participant counts."""
    return sum(
        pool_points(amount, rate, mult)
        for amount, rate, mult in zip(amounts, BASE_RATES, pool_multipliers(counts))
    )


def compute_points(rnd: Round, player_round: PlayerRound) -> int:
    """
    Compute and store the player's points for a closed round.

    A record with non-zero points is left untouched. Zero doubles as the
    "not yet computed" marker, so a record that scores zero is recomputed
    (to zero again) on every call.
    """
    if rnd.open:
        raise RoundStillOpen()

    if player_round.points != 0:
        return player_round.points

    counts = rnd.participant_counts
    player_round.points = score(player_round.amounts, counts)

    logger.info(
        f"Scored {player_round.player} in round #{rnd.index}: "
        f"{player_round.points} pts (counts {counts})"
    )
    return player_round.points
