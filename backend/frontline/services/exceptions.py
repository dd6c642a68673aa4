from frontline.engine.exceptions import FrontlineError


class RecordNotFound(FrontlineError):
    """Requested round or player record does not exist."""

    code = "not_found"


class InsufficientBalance(FrontlineError):
    """Account cannot cover the payment."""

    code = "insufficient_balance"

    def __init__(self, address: str, balance: int, required: int):
        super().__init__(f"Insufficient balance for {address}: {balance} < {required}")
        self.address = address
        self.balance = balance
        self.required = required


class RoundConflict(FrontlineError):
    """A concurrent transaction modified the round first; retry the operation."""

    code = "round_conflict"
