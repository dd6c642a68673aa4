"""Notification records emitted by the engine for off-ledger observers."""

import logging
from typing import Annotated, Literal, Protocol, Union

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class BetPlaced(BaseModel):
    """A player staked into one or more pools."""

    kind: Literal["bet_placed"] = "bet_placed"
    round_index: int
    player: str
    a: int
    b: int
    c: int


class RoundClosed(BaseModel):
    """A round stopped accepting stakes."""

    kind: Literal["round_closed"] = "round_closed"
    round_index: int
    vault: int


class Claimed(BaseModel):
    """A player's payout was withdrawn."""

    kind: Literal["claimed"] = "claimed"
    round_index: int
    player: str
    reward: int


Event = Annotated[
    Union[BetPlaced, RoundClosed, Claimed],
    Field(discriminator="kind"),
]


class EventSink(Protocol):
    """Append-only destination for engine notifications."""

    def emit(self, event: BetPlaced | RoundClosed | Claimed) -> None: ...


class NullEventSink:
    """Sink that only logs."""

    def emit(self, event: BetPlaced | RoundClosed | Claimed) -> None:
        logger.debug(f"Dropped event: {event.kind}")


class MemoryEventSink:
    """Sink that keeps events in emission order."""

    def __init__(self) -> None:
        self.events: list[BetPlaced | RoundClosed | Claimed] = []

    def emit(self, event: BetPlaced | RoundClosed | Claimed) -> None:
        self.events.append(event)

    def of_kind(self, kind: str) -> list[BetPlaced | RoundClosed | Claimed]:
        return [e for e in self.events if e.kind == kind]
