from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from splitledger.db.session import get_db
from splitledger.services.group_services import create_group, add_member, list_members, remove_member
from splitledger.schemas.group import GroupCreate, GroupMemberCreate, GroupMemberOut, GroupOut

router = APIRouter()

@router.post("/", response_model=GroupOut)
async def create_new_group(data: GroupCreate, db: AsyncSession = Depends(get_db)):
    return await create_group(db, data)

@router.post("/{group_id}/members", response_model=GroupMemberOut)
async def add_member_to_group(group_id: int, data: GroupMemberCreate, db: AsyncSession = Depends(get_db)):
    return await add_member(db, group_id, data.name)

@router.get("/{group_id}/members", response_model=list[GroupMemberOut])
async def group_members(group_id: int, include_removed: bool = False, db: AsyncSession = Depends(get_db)):
    return await list_members(db, group_id, include_removed)

@router.delete("/{group_id}/members/{member_id}", response_model=GroupMemberOut)
async def remove_member_from_group(group_id: int, member_id: int, db: AsyncSession = Depends(get_db)):
    return await remove_member(db, group_id, member_id)
