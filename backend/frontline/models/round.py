"""Round database model."""

from sqlalchemy import BigInteger, Boolean, CheckConstraint, Column, Integer, JSON
from sqlalchemy.ext.mutable import MutableList

from frontline.database.base import Base
from frontline.models.base import TimestampMixin, UUIDMixin


class Round(Base, UUIDMixin, TimestampMixin):
    """
    Shared state for one betting cycle.

    The participant lists hold unique player identities per pool and are
    only ever counted. ``version`` backs optimistic concurrency: two
    transactions that both mutate the same round cannot both commit.
    """

    __tablename__ = "rounds"

    index = Column("round_index", Integer, nullable=False)
    open = Column("is_open", Boolean, nullable=False)

    a_users = Column(MutableList.as_mutable(JSON), nullable=False)
    b_users = Column(MutableList.as_mutable(JSON), nullable=False)
    c_users = Column(MutableList.as_mutable(JSON), nullable=False)

    total_points = Column(BigInteger, nullable=False)
    vault = Column(BigInteger, nullable=False)

    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        CheckConstraint("vault >= 0", name="non_negative_vault"),
    )

    @property
    def pools(self) -> tuple[list[str], list[str], list[str]]:
        return self.a_users, self.b_users, self.c_users

    @property
    def participant_counts(self) -> tuple[int, int, int]:
        return len(self.a_users), len(self.b_users), len(self.c_users)

    def __repr__(self) -> str:
        state = "open" if self.open else "closed"
        return f"<Round #{self.index} {state} vault={self.vault}>"
