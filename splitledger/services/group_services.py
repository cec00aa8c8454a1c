from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from splitledger.core.config import settings
from splitledger.core.dependencies import get_group_or_404, get_group_member
from splitledger.core.errors import PendingBalanceError
from splitledger.core.logger import get_logger
from splitledger.core.removal_guard import ensure_removable
from splitledger.models.group import Group
from splitledger.models.group_member import GroupMember
from splitledger.schemas.group import GroupCreate
from splitledger.services.balance_services import load_ledger_snapshot

logger = get_logger(__name__)

async def create_group(db: AsyncSession, data: GroupCreate):
    existing = await db.scalar(select(Group).where(Group.name == data.name))
    if existing:
        raise HTTPException(400, "A group with this name already exists")

    group = Group(
        name=data.name,
        currency=(data.currency or settings.DEFAULT_CURRENCY).upper()
    )
    db.add(group)
    await db.commit()
    await db.refresh(group)

    logger.info("Group %s created (%s)", group.id, group.currency)
    return group

async def add_member(db: AsyncSession, group_id: int, name: str):
    await get_group_or_404(db, group_id)

    member = GroupMember(group_id=group_id, name=name)
    db.add(member)
    await db.commit()
    await db.refresh(member)
    return member

async def list_members(db: AsyncSession, group_id: int, include_removed: bool = False):
    await get_group_or_404(db, group_id)

    q = select(GroupMember).where(GroupMember.group_id == group_id)
    if not include_removed:
        q = q.where(GroupMember.is_active == True)

    result = await db.execute(q.order_by(GroupMember.id))
    return result.scalars().all()

async def remove_member(db: AsyncSession, group_id: int, member_id: int):
    member = await get_group_member(db, group_id, member_id)

    if not member.is_active:
        raise HTTPException(400, "Member has already left this group")

    snap = await load_ledger_snapshot(db, group_id)

    try:
        ensure_removable(
            member_id,
            snap.expenses,
            snap.settlements,
            epsilon=settings.SETTLE_EPSILON,
            default_currency=snap.group.currency,
        )
    except PendingBalanceError as e:
        logger.warning("Refused to remove member %s: %s", member_id, e)
        raise HTTPException(409, str(e))

    member.is_active = False
    await db.commit()
    await db.refresh(member)

    logger.info("Member %s removed from group %s", member_id, group_id)
    return member
