"""Request and response schemas for the HTTP API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from frontline.engine.fixed_point import MAX_STORED


class RoundView(BaseModel):
    """Public state of a round."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    index: int
    open: bool
    a_users: list[str]
    b_users: list[str]
    c_users: list[str]
    total_points: int
    vault: int


class PlayerRoundView(BaseModel):
    """Public state of a player's record."""

    model_config = ConfigDict(from_attributes=True)

    round_id: UUID
    round: int
    player: str
    a_amount: int
    b_amount: int
    c_amount: int
    points: int
    claimed: bool


class StakeRequest(BaseModel):
    player: str = Field(..., min_length=1)
    a: int = Field(default=0, ge=0)
    b: int = Field(default=0, ge=0)
    c: int = Field(default=0, ge=0)
    value: int | None = Field(default=None, description="Payment value; defaults to a + b + c")


class ClaimRequest(BaseModel):
    caller: str = Field(..., min_length=1, description="Identity invoking the claim; receives the fee")
    round_index: int | None = None


class DepositRequest(BaseModel):
    amount: int = Field(..., gt=0, le=MAX_STORED)


class BalanceView(BaseModel):
    address: str
    balance: int
