"""Single-shot staking into the three pools."""

import logging

from frontline.engine.events import BetPlaced, EventSink, NullEventSink
from frontline.engine.exceptions import (
    AlreadyStaked,
    AmountMismatch,
    RoundMismatch,
    RoundNotOpen,
    StakeTooLarge,
)
from frontline.engine.fixed_point import MAX_STORED, max_points
from frontline.models import PlayerRound, Round

logger = logging.getLogger(__name__)


def _push_unique(users: list[str], player: str) -> None:
    if player not in users:
        users.append(player)


def stake(
    rnd: Round,
    player_round: PlayerRound,
    value: int,
    a: int,
    b: int,
    c: int,
    events: EventSink | None = None,
) -> PlayerRound:
    """
    Commit ``value`` to the round, split across pools A, B and C.

    Process:
    1. Check the round is open and the split adds up to a positive value
    2. Check the record belongs to the current round index
    3. Reject a second stake on the same record
    4. Reject a split whose score or vault could overflow storage
    5. Merge the value into the vault and register the player per pool

    Raises:
        RoundNotOpen, AmountMismatch, RoundMismatch, AlreadyStaked, StakeTooLarge
    """
    if not rnd.open:
        raise RoundNotOpen()

    if min(a, b, c) < 0 or value <= 0 or value != a + b + c:
        raise AmountMismatch(f"Payment {value} does not match split {a}/{b}/{c}")

    if player_round.round != rnd.index:
        raise RoundMismatch(
            f"Record is bound to round #{player_round.round}, current is #{rnd.index}"
        )

    if player_round.a_amount or player_round.b_amount or player_round.c_amount:
        raise AlreadyStaked()

    if max_points((a, b, c)) > MAX_STORED or rnd.vault + value > MAX_STORED:
        raise StakeTooLarge(f"Stake of {value} exceeds the storable range")

    rnd.vault += value

    player = player_round.player
    for amount, users in zip((a, b, c), rnd.pools):
        if amount > 0:
            _push_unique(users, player)

    player_round.a_amount = a
    player_round.b_amount = b
    player_round.c_amount = c

    (events or NullEventSink()).emit(
        BetPlaced(round_index=rnd.index, player=player, a=a, b=b, c=c)
    )

    logger.info(f"Stake in round #{rnd.index}: {player} A={a} B={b} C={c}")
    return player_round
