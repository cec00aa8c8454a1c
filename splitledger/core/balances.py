"""Fold expenses and settlements into net balances per member.

Positive balance: the member is owed money by the group.
Negative balance: the member owes money to the group.
"""
from typing import Dict, Iterable, List, Sequence

from splitledger.schemas.ledger import ExpenseEntry, MemberSpending, SettlementEntry, SpendingSummary


def compute_net_balances(
    members: Iterable[int],
    expenses: Iterable[ExpenseEntry],
    settlements: Iterable[SettlementEntry],
) -> Dict[int, float]:
    """
    Returns { member_id: net_balance } in the order members were given.

    Every member appears, members without activity sit at 0.
    """
    balances: Dict[int, float] = {m: 0.0 for m in members}

    for exp in expenses:
        balances[exp.payer_id] = balances.get(exp.payer_id, 0.0) + exp.amount

        share = exp.amount / len(exp.participant_ids)
        for uid in exp.participant_ids:
            balances[uid] = balances.get(uid, 0.0) - share

    for s in settlements:
        # paying down a debt moves the payer up towards zero
        balances[s.from_member] = balances.get(s.from_member, 0.0) + s.amount
        balances[s.to_member] = balances.get(s.to_member, 0.0) - s.amount

    return balances


def compute_member_balance(
    member_id: int,
    expenses: Iterable[ExpenseEntry],
    settlements: Iterable[SettlementEntry],
) -> float:
    balance = 0.0

    for exp in expenses:
        if exp.payer_id == member_id:
            balance += exp.amount
        if member_id in exp.participant_ids:
            balance -= exp.amount / len(exp.participant_ids)

    for s in settlements:
        if s.from_member == member_id:
            balance += s.amount
        if s.to_member == member_id:
            balance -= s.amount

    return balance


def compute_balances_by_currency(
    members: Sequence[int],
    expenses: Iterable[ExpenseEntry],
    settlements: Iterable[SettlementEntry],
    default_currency: str,
) -> Dict[str, Dict[int, float]]:
    """
    Splits the ledger into one scope per currency and folds each scope on its own.

    A scope exists once any entry uses that currency. Entries without a
    currency belong to default_currency. Amounts are never converted.
    """
    expenses_by_currency: Dict[str, List[ExpenseEntry]] = {}
    settlements_by_currency: Dict[str, List[SettlementEntry]] = {}

    for exp in expenses:
        expenses_by_currency.setdefault(exp.currency or default_currency, []).append(exp)

    for s in settlements:
        settlements_by_currency.setdefault(s.currency or default_currency, []).append(s)

    scopes = list(expenses_by_currency)
    scopes += [c for c in settlements_by_currency if c not in expenses_by_currency]

    return {
        currency: compute_net_balances(
            members,
            expenses_by_currency.get(currency, []),
            settlements_by_currency.get(currency, []),
        )
        for currency in scopes
    }


def summarize_spending(
    members: Sequence[int],
    expenses: Iterable[ExpenseEntry],
) -> SpendingSummary:
    """Paid vs. share per member, settlements excluded."""
    paid: Dict[int, float] = {m: 0.0 for m in members}
    share: Dict[int, float] = {m: 0.0 for m in members}
    total = 0.0

    for exp in expenses:
        total += exp.amount
        paid[exp.payer_id] = paid.get(exp.payer_id, 0.0) + exp.amount

        portion = exp.amount / len(exp.participant_ids)
        for uid in exp.participant_ids:
            share[uid] = share.get(uid, 0.0) + portion

    ids = list(paid)
    ids += [uid for uid in share if uid not in paid]

    return SpendingSummary(
        total_spending=total,
        members=[
            MemberSpending(
                member_id=uid,
                paid=paid.get(uid, 0.0),
                share=share.get(uid, 0.0),
                balance=paid.get(uid, 0.0) - share.get(uid, 0.0),
            )
            for uid in ids
        ],
    )
