from typing import List, NamedTuple, Optional
from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from splitledger.core.balances import compute_balances_by_currency, compute_member_balance, compute_net_balances, summarize_spending
from splitledger.core.config import settings
from splitledger.core.dependencies import get_group_or_404, get_group_member
from splitledger.core.errors import PendingBalanceError
from splitledger.core.removal_guard import ensure_removable
from splitledger.core.settlement_plan import generate_plans_by_currency
from splitledger.core.tolerance import is_settled, round_display
from splitledger.models.expense import Expense
from splitledger.models.group import Group
from splitledger.models.group_member import GroupMember
from splitledger.models.settlement_history import SettlementHistory
from splitledger.schemas.balances import GroupBalanceOut, MemberBalanceOut, Settlement, SpendingSummaryOut
from splitledger.schemas.ledger import ExpenseEntry, SettlementEntry


class LedgerSnapshot(NamedTuple):
    group: Group
    members: List[GroupMember]
    expenses: List[ExpenseEntry]
    settlements: List[SettlementEntry]

    @property
    def member_ids(self) -> List[int]:
        return [m.id for m in self.members]


def to_expense_entry(expense: Expense) -> ExpenseEntry:
    return ExpenseEntry(
        payer_id=expense.paid_by,
        amount=expense.amount,
        participant_ids=[p.member_id for p in expense.participants],
        currency=expense.currency,
    )


def to_settlement_entry(settlement: SettlementHistory) -> SettlementEntry:
    return SettlementEntry(
        from_member=settlement.from_member,
        to_member=settlement.to_member,
        amount=settlement.amount,
        currency=settlement.currency,
    )


async def load_ledger_snapshot(
    db: AsyncSession,
    group_id: int,
    exclude_expense_id: Optional[int] = None,
    exclude_settlement_id: Optional[int] = None,
) -> LedgerSnapshot:
    """
    Reads members, expenses and settlements of a group in one session.

    Members come back in join order, which fixes the order of every balance
    map and therefore of the settlement plan. The exclude ids give the
    ledger as it would look once that entry is gone.
    """
    group = await get_group_or_404(db, group_id)

    q_members = (
        select(GroupMember)
        .where(GroupMember.group_id == group_id)
        .order_by(GroupMember.id)
    )
    members = (await db.scalars(q_members)).all()

    q_exp = (
        select(Expense)
        .where(Expense.group_id == group_id, Expense.is_deleted == False)
        .order_by(Expense.id)
    )
    if exclude_expense_id is not None:
        q_exp = q_exp.where(Expense.id != exclude_expense_id)
    expenses = (await db.scalars(q_exp)).all()

    q_settle = (
        select(SettlementHistory)
        .where(SettlementHistory.group_id == group_id)
        .order_by(SettlementHistory.id)
    )
    if exclude_settlement_id is not None:
        q_settle = q_settle.where(SettlementHistory.id != exclude_settlement_id)
    settlements = (await db.scalars(q_settle)).all()

    return LedgerSnapshot(
        group=group,
        members=list(members),
        expenses=[to_expense_entry(e) for e in expenses],
        settlements=[to_settlement_entry(s) for s in settlements],
    )


async def ensure_removed_members_settled(
    db: AsyncSession,
    group_id: int,
    exclude_expense_id: Optional[int] = None,
    exclude_settlement_id: Optional[int] = None,
):
    """
    Refuses a ledger change that would leave a removed member owing or owed.

    Removed members cannot take part in new settlements, so any balance
    they are left with could never be cleared.
    """
    snap = await load_ledger_snapshot(
        db,
        group_id,
        exclude_expense_id=exclude_expense_id,
        exclude_settlement_id=exclude_settlement_id,
    )

    for member in snap.members:
        if member.is_active:
            continue
        try:
            ensure_removable(
                member.id,
                snap.expenses,
                snap.settlements,
                epsilon=settings.SETTLE_EPSILON,
                default_currency=snap.group.currency,
            )
        except PendingBalanceError as e:
            raise HTTPException(
                409,
                f"Change would reopen the balance of removed member {member.name}: {e}"
            )


async def get_group_balances(db: AsyncSession, group_id: int) -> GroupBalanceOut:
    snap = await load_ledger_snapshot(db, group_id)

    net = compute_balances_by_currency(
        snap.member_ids,
        snap.expenses,
        snap.settlements,
        default_currency=snap.group.currency,
    )
    if not net:
        net = {snap.group.currency: compute_net_balances(snap.member_ids, [], [])}

    plan = generate_plans_by_currency(
        net,
        epsilon=settings.SETTLE_EPSILON,
        places=settings.DISPLAY_PLACES,
        sort_by_magnitude=settings.SORT_BY_MAGNITUDE,
    )

    names = {m.id: m.name for m in snap.members}

    return GroupBalanceOut(
        net={
            currency: {
                uid: round_display(amt, settings.DISPLAY_PLACES)
                for uid, amt in balances.items()
            }
            for currency, balances in net.items()
        },
        settlements=[
            Settlement(
                from_id=t.from_member,
                from_name=names.get(t.from_member),
                to_id=t.to_member,
                to_name=names.get(t.to_member),
                amount=t.amount,
                currency=t.currency,
            )
            for t in plan
        ],
    )


async def get_member_balance(db: AsyncSession, group_id: int, member_id: int) -> MemberBalanceOut:
    await get_group_member(db, group_id, member_id)
    snap = await load_ledger_snapshot(db, group_id)
    default_currency = snap.group.currency

    currencies = []
    for entry in [*snap.expenses, *snap.settlements]:
        if entry.currency not in currencies:
            currencies.append(entry.currency)

    balances = {}
    for currency in currencies or [default_currency]:
        balances[currency] = compute_member_balance(
            member_id,
            [e for e in snap.expenses if e.currency == currency],
            [s for s in snap.settlements if s.currency == currency],
        )

    return MemberBalanceOut(
        member_id=member_id,
        balances={
            currency: round_display(amt, settings.DISPLAY_PLACES)
            for currency, amt in balances.items()
        },
        settled=all(is_settled(amt, settings.SETTLE_EPSILON) for amt in balances.values()),
    )


async def get_spending_summary(
    db: AsyncSession,
    group_id: int,
    currency: Optional[str] = None,
) -> SpendingSummaryOut:
    snap = await load_ledger_snapshot(db, group_id)
    currency = currency or snap.group.currency

    summary = summarize_spending(
        snap.member_ids,
        [e for e in snap.expenses if e.currency == currency],
    )

    return SpendingSummaryOut(
        currency=currency,
        total_spending=summary.total_spending,
        members=summary.members,
    )
