"""Account balances used to move value in and out of round vaults."""

from sqlalchemy import BigInteger, CheckConstraint, Column, String

from frontline.database.base import Base
from frontline.models.base import TimestampMixin


class Account(Base, TimestampMixin):
    """Spendable balance held by one identity."""

    __tablename__ = "accounts"

    address = Column(String(128), primary_key=True)
    balance = Column(BigInteger, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("balance >= 0", name="non_negative_balance"),
    )

    def __repr__(self) -> str:
        return f"<Account {self.address} {self.balance}>"
