from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from splitledger.core.dependencies import get_active_member_ids, get_group_or_404
from splitledger.core.logger import get_logger
from splitledger.models.settlement_history import SettlementHistory
from splitledger.schemas.settlements import SettlementHistoryCreate
from splitledger.services.balance_services import ensure_removed_members_settled

logger = get_logger(__name__)

async def add_settlement(db: AsyncSession, group_id: int, data: SettlementHistoryCreate):
    group = await get_group_or_404(db, group_id)

    if data.from_member == data.to_member:
        raise HTTPException(400, "A member cannot settle with themselves")

    valid_ids = await get_active_member_ids(db, group_id, [data.from_member, data.to_member])

    if data.from_member not in valid_ids:
        raise HTTPException(400, "Payer is not in this group")

    if data.to_member not in valid_ids:
        raise HTTPException(400, "Receiver is not in this group")

    settlement = SettlementHistory(
        group_id=group_id,
        from_member=data.from_member,
        to_member=data.to_member,
        amount=data.amount,
        currency=(data.currency or group.currency).upper(),
        note=data.note
    )

    db.add(settlement)
    await db.commit()
    await db.refresh(settlement)

    logger.info(
        "Settlement %s recorded in group %s: %s -> %s %s %s",
        settlement.id, group_id, settlement.from_member, settlement.to_member,
        settlement.amount, settlement.currency,
    )
    return settlement

async def get_settlement_history(db: AsyncSession, group_id: int):
    await get_group_or_404(db, group_id)

    q = select(SettlementHistory).where(
        SettlementHistory.group_id == group_id
    ).order_by(SettlementHistory.created_at.desc(), SettlementHistory.id.desc())

    result = await db.execute(q)
    return result.scalars().all()

async def undo_settlement(db: AsyncSession, settlement_id: int):
    q = select(SettlementHistory).where(SettlementHistory.id == settlement_id)
    result = await db.execute(q)
    settlement = result.scalar_one_or_none()

    if not settlement:
        raise HTTPException(404, "Settlement entry not found")

    await ensure_removed_members_settled(db, settlement.group_id, exclude_settlement_id=settlement_id)

    await db.delete(settlement)
    await db.commit()

    logger.info("Settlement %s undone", settlement_id)
    return { "status": "undo successful" }
