from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from splitledger.core.dependencies import get_active_member_ids, get_group_or_404
from splitledger.core.logger import get_logger
from splitledger.models.expense import Expense
from splitledger.models.expense_participant import ExpenseParticipant
from splitledger.schemas.expense import ExpenseCreate, ExpenseOut
from splitledger.services.balance_services import ensure_removed_members_settled

logger = get_logger(__name__)


def to_expense_out(expense: Expense) -> ExpenseOut:
    return ExpenseOut(
        id=expense.id,
        group_id=expense.group_id,
        paid_by=expense.paid_by,
        amount=expense.amount,
        currency=expense.currency,
        description=expense.description,
        participant_ids=[p.member_id for p in expense.participants],
    )


async def create_expense(db: AsyncSession, group_id: int, data: ExpenseCreate):
    group = await get_group_or_404(db, group_id)

    # -----------------------------------
    # 1. Validate participants
    # -----------------------------------
    member_ids = list(data.participant_ids)

    if len(member_ids) != len(set(member_ids)):
        raise HTTPException(400, "Duplicate members found in participants")

    # -----------------------------------
    # 2. Payer and participants must be active members
    # -----------------------------------
    valid_ids = await get_active_member_ids(db, group_id, member_ids + [data.paid_by])

    if data.paid_by not in valid_ids:
        raise HTTPException(400, "Payer is not a member of the group")

    if not set(member_ids) <= valid_ids:
        raise HTTPException(
            400,
            "One or more participants are not members of the group"
        )

    # -----------------------------------
    # 3. Create expense with its participants
    # -----------------------------------
    expense = Expense(
        group_id=group_id,
        paid_by=data.paid_by,
        amount=data.amount,
        currency=(data.currency or group.currency).upper(),
        description=data.description,
        participants=[ExpenseParticipant(member_id=m) for m in member_ids]
    )

    db.add(expense)
    await db.commit()

    logger.info(
        "Expense %s recorded in group %s: %s %s split %d ways",
        expense.id, group_id, expense.amount, expense.currency, len(member_ids),
    )
    return to_expense_out(expense)


async def list_expenses(db: AsyncSession, group_id: int):
    await get_group_or_404(db, group_id)

    q = (
        select(Expense)
        .where(Expense.group_id == group_id, Expense.is_deleted == False)
        .order_by(Expense.id)
    )
    expenses = (await db.scalars(q)).all()
    return [to_expense_out(e) for e in expenses]


async def delete_expense(db: AsyncSession, expense_id: int):
    q = select(Expense).where(Expense.id == expense_id, Expense.is_deleted == False)
    res = await db.execute(q)
    expense = res.scalar_one_or_none()

    if not expense:
        raise HTTPException(404, "Expense not found")

    await ensure_removed_members_settled(db, expense.group_id, exclude_expense_id=expense_id)

    expense.is_deleted = True
    await db.commit()

    logger.info("Expense %s deleted", expense_id)
    return {"status": "deleted"}
