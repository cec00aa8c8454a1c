class LedgerError(Exception):
    pass


class PendingBalanceError(LedgerError):
    """Raised when a member with an unsettled balance is about to be removed."""

    def __init__(self, member_id: int, balance: float, currency: str | None = None):
        self.member_id = member_id
        self.balance = balance
        self.currency = currency
        scope = f" {currency}" if currency else ""
        super().__init__(
            f"Member {member_id} has a pending balance of {balance:.2f}{scope}, settle up first"
        )
