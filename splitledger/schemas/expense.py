from pydantic import BaseModel, Field
from typing import List, Optional

class ExpenseCreate(BaseModel):
    paid_by: int
    amount: float = Field(gt=0)
    participant_ids: List[int] = Field(min_length=1)
    description: Optional[str] = None
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)

class ExpenseOut(BaseModel):
    id: int
    group_id: int
    paid_by: int
    amount: float
    currency: str
    description: Optional[str] = None
    participant_ids: List[int]
