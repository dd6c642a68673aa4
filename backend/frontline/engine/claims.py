"""Pull-based payout of the round vault."""

import logging

from pydantic import BaseModel

from frontline.engine.events import Claimed, EventSink, NullEventSink
from frontline.engine.exceptions import AlreadyClaimed, InvalidFeeRate, RoundStillOpen
from frontline.engine.fixed_point import SCALE, fee_amount, pro_rata
from frontline.models import PlayerRound, Round

logger = logging.getLogger(__name__)


class ClaimReceipt(BaseModel):
    """Transfers owed as a result of one claim."""

    round_index: int
    player: str
    caller: str
    fee: int = 0
    reward: int = 0

    @property
    def total(self) -> int:
        return self.fee + self.reward


def claim(
    rnd: Round,
    player_round: PlayerRound,
    fee_bps: int,
    caller: str,
    events: EventSink | None = None,
) -> ClaimReceipt:
    """
    Withdraw the player's share of the vault.

    The fee is taken from the vault first and paid to ``caller``. The
    payout denominator is the round's total points, or the player's own
    points while that total is zero, in which case the player receives the
    whole remaining vault.

    Both amounts are computed before the round or record is touched, so the
    fee and payout are applied together or not at all.

    Raises:
        RoundStillOpen, AlreadyClaimed, InvalidFeeRate
    """
    if rnd.open:
        raise RoundStillOpen()

    if player_round.claimed:
        raise AlreadyClaimed()

    if not 0 <= fee_bps <= SCALE:
        raise InvalidFeeRate(f"Fee rate {fee_bps} bps is out of range")

    receipt = ClaimReceipt(
        round_index=rnd.index,
        player=player_round.player,
        caller=caller,
    )

    if player_round.points == 0 or rnd.vault == 0:
        player_round.claimed = True
        logger.info(f"Nothing owed to {player_round.player} in round #{rnd.index}")
        return receipt

    fee = fee_amount(rnd.vault, fee_bps)
    remaining = rnd.vault - fee
    denominator = rnd.total_points or player_round.points
    reward = pro_rata(remaining, player_round.points, denominator)

    rnd.vault = remaining - reward
    player_round.claimed = True
    receipt.fee = fee
    receipt.reward = reward

    (events or NullEventSink()).emit(
        Claimed(round_index=rnd.index, player=player_round.player, reward=reward)
    )

    logger.info(
        f"Claim in round #{rnd.index}: {player_round.player} receives {reward}, "
        f"{caller} receives fee {fee}, vault left {rnd.vault}"
    )
    return receipt
