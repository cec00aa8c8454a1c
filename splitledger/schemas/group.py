from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class GroupCreate(BaseModel):
    name: str = Field(min_length=1)
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)

class GroupOut(BaseModel):
    id: int
    name: str
    currency: str

    class Config:
        from_attributes = True

class GroupMemberCreate(BaseModel):
    name: str = Field(min_length=1)

class GroupMemberOut(BaseModel):
    id: int
    group_id: int
    name: str
    is_active: bool
    joined_at: Optional[datetime] = None

    class Config:
        from_attributes = True
