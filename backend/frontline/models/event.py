"""Append-only notification log."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Uuid, func

from frontline.database.base import Base


class EventRecord(Base):
    """One emitted notification, ordered by ``id``."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    round_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("rounds.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    kind = Column(String(32), nullable=False, index=True)
    payload = Column(JSON, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<EventRecord {self.id} {self.kind}>"
