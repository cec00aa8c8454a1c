"""Turn net balances into debtor -> creditor transfers."""
from typing import Dict, List, Mapping, Optional

from splitledger.core.logger import get_logger
from splitledger.core.tolerance import CREDITOR, DEBTOR, DISPLAY_PLACES, EPSILON, classify, round_display
from splitledger.schemas.ledger import SettlementTransaction

logger = get_logger(__name__)


def generate_plan(
    net_balances: Mapping[int, float],
    *,
    epsilon: float = EPSILON,
    places: int = DISPLAY_PLACES,
    sort_by_magnitude: bool = False,
    currency: Optional[str] = None,
) -> List[SettlementTransaction]:
    """
    Two-pointer greedy walk over creditors and debtors.

    Members are matched in the order they appear in net_balances, so the
    result is deterministic but not the minimum number of transfers.
    sort_by_magnitude matches the largest claims first instead.
    """
    # Step 1: Split into receivers and payers
    creditors = []  # [member_id, amount_to_receive]
    debtors = []    # [member_id, amount_owed]

    for uid, bal in net_balances.items():
        kind = classify(bal, epsilon)
        if kind == CREDITOR:
            creditors.append([uid, bal])
        elif kind == DEBTOR:
            debtors.append([uid, -bal])  # store as positive amount to pay

    if sort_by_magnitude:
        creditors.sort(key=lambda x: x[1], reverse=True)
        debtors.sort(key=lambda x: x[1], reverse=True)

    # Step 2: Greedy matching
    plan = []
    i = 0
    j = 0

    while i < len(creditors) and j < len(debtors):
        creditor_id, recv = creditors[i]
        debtor_id, owe = debtors[j]

        amount = min(recv, owe)
        display_amount = round_display(amount, places)

        # sub-cent residues are still consumed, just not emitted
        if display_amount > 0:
            plan.append(SettlementTransaction(
                from_member=debtor_id,
                to_member=creditor_id,
                amount=display_amount,
                currency=currency,
            ))

        creditors[i][1] -= amount
        debtors[j][1] -= amount

        if creditors[i][1] <= epsilon:
            i += 1
        if debtors[j][1] <= epsilon:
            j += 1

    logger.debug(
        "Settlement plan: %d creditors, %d debtors, %d transfers",
        len(creditors), len(debtors), len(plan),
    )
    return plan


def generate_plans_by_currency(
    balances_by_currency: Mapping[str, Mapping[int, float]],
    **options,
) -> List[SettlementTransaction]:
    plan = []
    for currency, balances in balances_by_currency.items():
        plan.extend(generate_plan(balances, currency=currency, **options))
    return plan


def apply_plan(
    net_balances: Mapping[int, float],
    plan: List[SettlementTransaction],
) -> Dict[int, float]:
    """Balances as they would be once every transfer in plan is paid."""
    adjusted = dict(net_balances)
    for t in plan:
        adjusted[t.from_member] = adjusted.get(t.from_member, 0.0) + t.amount
        adjusted[t.to_member] = adjusted.get(t.to_member, 0.0) - t.amount
    return adjusted
