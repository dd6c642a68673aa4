"""Database-backed notification sink."""

import logging
from uuid import UUID

from pydantic import TypeAdapter
from sqlalchemy import select
from sqlalchemy.orm import Session

from frontline.engine.events import BetPlaced, Claimed, Event, RoundClosed
from frontline.models import EventRecord

logger = logging.getLogger(__name__)

_event_adapter = TypeAdapter(Event)


class DatabaseEventSink:
    """Writes events into the caller's session so they commit with the operation."""

    def __init__(self, db: Session, round_id: UUID):
        self.db = db
        self.round_id = round_id

    def emit(self, event: BetPlaced | RoundClosed | Claimed) -> None:
        self.db.add(
            EventRecord(
                round_id=self.round_id,
                kind=event.kind,
                payload=event.model_dump(mode="json"),
            )
        )
        logger.debug(f"Recorded {event.kind} event for round {self.round_id}")


def read_events(
    db: Session,
    round_id: UUID,
    kind: str | None = None,
) -> list[BetPlaced | RoundClosed | Claimed]:
    """Events for a round in emission order."""
    query = select(EventRecord).where(EventRecord.round_id == round_id)
    if kind is not None:
        query = query.where(EventRecord.kind == kind)

    records = db.execute(query.order_by(EventRecord.id)).scalars().all()
    return [_event_adapter.validate_python(record.payload) for record in records]
