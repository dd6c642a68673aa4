"""Round lifecycle: create, open, close."""

import logging
from uuid import uuid4

from frontline.engine.events import EventSink, NullEventSink, RoundClosed
from frontline.engine.exceptions import AlreadyOpen, Closed
from frontline.models import PlayerRound, Round

logger = logging.getLogger(__name__)


def create_round() -> Round:
    """Allocate a closed round with empty accumulators."""
    return Round(
        id=uuid4(),
        index=0,
        open=False,
        a_users=[],
        b_users=[],
        c_users=[],
        total_points=0,
        vault=0,
    )


def create_player_round(rnd: Round, player: str) -> PlayerRound:
    """Allocate a player record bound to the round's current index."""
    return PlayerRound(
        round_id=rnd.id,
        round=rnd.index,
        player=player,
        a_amount=0,
        b_amount=0,
        c_amount=0,
        points=0,
        claimed=False,
    )


def open_round(rnd: Round) -> Round:
    """
    Start the next cycle.

    Increments the index and resets participants and total points. The
    vault is left as is, so unclaimed value carries into the new cycle.
    """
    if rnd.open:
        raise AlreadyOpen()

    rnd.index += 1
    rnd.open = True
    rnd.a_users = []
    rnd.b_users = []
    rnd.c_users = []
    rnd.total_points = 0

    logger.info(f"Opened round #{rnd.index} (carried vault: {rnd.vault})")
    return rnd


def close_round(rnd: Round, events: EventSink | None = None) -> Round:
    """Stop accepting stakes for the current cycle."""
    if not rnd.open:
        raise Closed()

    rnd.open = False
    (events or NullEventSink()).emit(RoundClosed(round_index=rnd.index, vault=rnd.vault))

    a, b, c = rnd.participant_counts
    logger.info(f"Closed round #{rnd.index}: participants A={a} B={b} C={c}, vault {rnd.vault}")
    return rnd


def is_alive() -> bool:
    return True
