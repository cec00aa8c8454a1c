from pydantic import BaseModel
from typing import Dict, List, Optional
from splitledger.schemas.ledger import MemberSpending

class Settlement(BaseModel):
    from_id: int
    from_name: Optional[str]
    to_id: int
    to_name: Optional[str]
    amount: float
    currency: str

class GroupBalanceOut(BaseModel):
    net: Dict[str, Dict[int, float]]
    settlements: List[Settlement]

class MemberBalanceOut(BaseModel):
    member_id: int
    balances: Dict[str, float]
    settled: bool

class SpendingSummaryOut(BaseModel):
    currency: str
    total_spending: float
    members: List[MemberSpending]
