from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from splitledger.models.group import Group
from splitledger.models.group_member import GroupMember

async def get_group_or_404(db: AsyncSession, group_id: int) -> Group:
    res = await db.execute(select(Group).where(Group.id == group_id))
    group = res.scalar_one_or_none()

    if not group:
        raise HTTPException(404, "Group does not exist")

    return group

async def get_group_member(db: AsyncSession, group_id: int, member_id: int) -> GroupMember:
    q = select(GroupMember).where(
        GroupMember.group_id == group_id,
        GroupMember.id == member_id
    )
    res = await db.execute(q)
    member = res.scalar_one_or_none()

    if not member:
        raise HTTPException(404, "Member not found in this group")

    return member

async def get_active_member_ids(db: AsyncSession, group_id: int, member_ids) -> set[int]:
    q = select(GroupMember.id).where(
        GroupMember.group_id == group_id,
        GroupMember.is_active == True,
        GroupMember.id.in_(list(member_ids))
    )
    res = await db.execute(q)
    return {row[0] for row in res.all()}

async def ensure_active_group_member(db: AsyncSession, member_id: int, group_id: int):
    if member_id not in await get_active_member_ids(db, group_id, [member_id]):
        raise HTTPException(400, f"Member {member_id} is not an active member of this group")
