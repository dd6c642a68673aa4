"""Round state machine and settlement arithmetic."""

from .claims import ClaimReceipt, claim
from .events import (
    BetPlaced,
    Claimed,
    Event,
    EventSink,
    MemoryEventSink,
    NullEventSink,
    RoundClosed,
)
from .exceptions import (
    AlreadyClaimed,
    AlreadyOpen,
    AlreadyStaked,
    AmountMismatch,
    Closed,
    FrontlineError,
    InvalidFeeRate,
    RoundMismatch,
    RoundNotOpen,
    RoundStillOpen,
    StakeTooLarge,
)
from .rounds import close_round, create_player_round, create_round, is_alive, open_round
from .scoring import compute_points, pool_multipliers, score
from .staking import stake

__all__ = [
    # Lifecycle
    "create_round",
    "create_player_round",
    "open_round",
    "close_round",
    "is_alive",
    # Operations
    "stake",
    "compute_points",
    "pool_multipliers",
    "score",
    "claim",
    "ClaimReceipt",
    # Events
    "BetPlaced",
    "RoundClosed",
    "Claimed",
    "Event",
    "EventSink",
    "MemoryEventSink",
    "NullEventSink",
    # Errors
    "FrontlineError",
    "AlreadyOpen",
    "Closed",
    "RoundNotOpen",
    "AmountMismatch",
    "RoundMismatch",
    "AlreadyStaked",
    "RoundStillOpen",
    "AlreadyClaimed",
    "InvalidFeeRate",
    "StakeTooLarge",
]
