"""PlayerRound database model."""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
)

from frontline.database.base import Base
from frontline.models.base import TimestampMixin, UUIDMixin


class PlayerRound(Base, UUIDMixin, TimestampMixin):
    """One player's stake, score and claim status for a round index."""

    __tablename__ = "player_rounds"

    round_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("rounds.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    round = Column("round_index", Integer, nullable=False)
    player = Column(String(128), nullable=False, index=True)

    # Stakes
    a_amount = Column(BigInteger, nullable=False)
    b_amount = Column(BigInteger, nullable=False)
    c_amount = Column(BigInteger, nullable=False)

    # Settlement
    points = Column(BigInteger, nullable=False)
    claimed = Column(Boolean, nullable=False)

    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        UniqueConstraint("round_id", "round_index", "player", name="one_record_per_round"),
        CheckConstraint(
            "a_amount >= 0 AND b_amount >= 0 AND c_amount >= 0",
            name="non_negative_amounts",
        ),
    )

    @property
    def amounts(self) -> tuple[int, int, int]:
        return self.a_amount, self.b_amount, self.c_amount

    @property
    def staked(self) -> int:
        return self.a_amount + self.b_amount + self.c_amount

    def __repr__(self) -> str:
        return (
            f"<PlayerRound #{self.round} {self.player} "
            f"{self.a_amount}/{self.b_amount}/{self.c_amount} pts={self.points}>"
        )
