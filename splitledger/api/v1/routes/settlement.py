from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from splitledger.db.session import get_db
from splitledger.schemas.settlements import SettlementHistoryCreate, SettlementHistoryOut
from splitledger.services.settlement_service import add_settlement, get_settlement_history, undo_settlement

router = APIRouter()


@router.post("/{group_id}", response_model=SettlementHistoryOut)
async def record_settlement(group_id: int, data: SettlementHistoryCreate, db: AsyncSession = Depends(get_db)):
    return await add_settlement(db, group_id, data)


@router.get("/{group_id}/history", response_model=list[SettlementHistoryOut])
async def settlement_history(group_id: int, db: AsyncSession = Depends(get_db)):
    return await get_settlement_history(db, group_id)


@router.delete("/{settlement_id}")
async def undo(settlement_id: int, db: AsyncSession = Depends(get_db)):
    return await undo_settlement(db, settlement_id)
