from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

class SettlementHistoryCreate(BaseModel):
    from_member: int
    to_member: int
    amount: float = Field(gt=0)
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)
    note: Optional[str] = None

class SettlementHistoryOut(BaseModel):
    id: int
    group_id: int
    from_member: int
    to_member: int
    amount: float
    currency: str
    note: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
