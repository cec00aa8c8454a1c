from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from splitledger.db.session import get_db
from splitledger.schemas.balances import GroupBalanceOut, MemberBalanceOut, SpendingSummaryOut
from splitledger.services.balance_services import get_group_balances, get_member_balance, get_spending_summary

router = APIRouter()

@router.get("/{group_id}", response_model=GroupBalanceOut)
async def group_balances(group_id: int, db: AsyncSession = Depends(get_db)):
    return await get_group_balances(db, group_id)

@router.get("/{group_id}/members/{member_id}", response_model=MemberBalanceOut)
async def member_balance(group_id: int, member_id: int, db: AsyncSession = Depends(get_db)):
    return await get_member_balance(db, group_id, member_id)

@router.get("/{group_id}/summary", response_model=SpendingSummaryOut)
async def spending_summary(group_id: int, currency: Optional[str] = None, db: AsyncSession = Depends(get_db)):
    return await get_spending_summary(db, group_id, currency.upper() if currency else None)
