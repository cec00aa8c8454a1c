from pydantic import BaseModel
from typing import List, Optional


class ExpenseEntry(BaseModel):
    payer_id: int
    amount: float
    participant_ids: List[int]
    currency: Optional[str] = None

    class Config:
        frozen = True


class SettlementEntry(BaseModel):
    from_member: int
    to_member: int
    amount: float
    currency: Optional[str] = None

    class Config:
        frozen = True


class SettlementTransaction(BaseModel):
    from_member: int
    to_member: int
    amount: float
    currency: Optional[str] = None

    class Config:
        frozen = True


class MemberSpending(BaseModel):
    member_id: int
    paid: float
    share: float
    balance: float


class SpendingSummary(BaseModel):
    total_spending: float
    members: List[MemberSpending]
