class FrontlineError(Exception):
    """Base exception for round and claim precondition failures."""

    code = "frontline_error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.__doc__)


class AlreadyOpen(FrontlineError):
    """Round is already open."""

    code = "already_open"


class Closed(FrontlineError):
    """Round is already closed."""

    code = "closed"


class RoundNotOpen(FrontlineError):
    """Round is not accepting stakes."""

    code = "round_not_open"


class AmountMismatch(FrontlineError):
    """Payment value does not match the pool split."""

    code = "amount_mismatch"


class RoundMismatch(FrontlineError):
    """Player record is bound to a different round index."""

    code = "round_mismatch"


class AlreadyStaked(FrontlineError):
    """Player has already staked in this round."""

    code = "already_staked"


class RoundStillOpen(FrontlineError):
    """Round must be closed first."""

    code = "round_still_open"


class AlreadyClaimed(FrontlineError):
    """Payout has already been claimed."""

    code = "already_claimed"


class InvalidFeeRate(FrontlineError):
    """Fee rate must be between 0 and 10000 basis points."""

    code = "invalid_fee_rate"


class StakeTooLarge(FrontlineError):
    """Stake would overflow the stored points or vault."""

    code = "stake_too_large"
