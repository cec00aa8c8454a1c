from typing import Iterable, Optional

from splitledger.core.balances import compute_member_balance
from splitledger.core.errors import PendingBalanceError
from splitledger.core.logger import get_logger
from splitledger.core.tolerance import EPSILON, is_settled
from splitledger.schemas.ledger import ExpenseEntry, SettlementEntry

logger = get_logger(__name__)


def can_remove(
    member_id: int,
    expenses: Iterable[ExpenseEntry],
    settlements: Iterable[SettlementEntry],
    epsilon: float = EPSILON,
) -> bool:
    return is_settled(compute_member_balance(member_id, expenses, settlements), epsilon)


def ensure_removable(
    member_id: int,
    expenses: Iterable[ExpenseEntry],
    settlements: Iterable[SettlementEntry],
    epsilon: float = EPSILON,
    default_currency: Optional[str] = None,
) -> None:
    """
    Raises PendingBalanceError unless the member is settled in every currency.

    Pure check: the caller owns the actual removal.
    """
    expenses = list(expenses)
    settlements = list(settlements)

    currencies = []
    for entry in [*expenses, *settlements]:
        currency = entry.currency or default_currency
        if currency not in currencies:
            currencies.append(currency)

    for currency in currencies:
        scoped_expenses = [e for e in expenses if (e.currency or default_currency) == currency]
        scoped_settlements = [s for s in settlements if (s.currency or default_currency) == currency]

        balance = compute_member_balance(member_id, scoped_expenses, scoped_settlements)
        if not is_settled(balance, epsilon):
            logger.debug("Member %s still has %s %s outstanding", member_id, balance, currency)
            raise PendingBalanceError(member_id, balance, currency)
