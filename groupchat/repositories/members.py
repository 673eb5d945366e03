from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from groupchat.models.group_member import GroupMember


class MembershipRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, group_id: int, user_id: str) -> GroupMember | None:
        result = await self.db.execute(
            select(GroupMember).where(
                GroupMember.group_id == group_id,
                GroupMember.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def exists(self, group_id: int, user_id: str) -> bool:
        return await self.get(group_id, user_id) is not None

    async def add(self, group_id: int, user_id: str) -> GroupMember:
        member = GroupMember(group_id=group_id, user_id=user_id)
        self.db.add(member)
        await self.db.flush()
        return member

    async def remove(self, group_id: int, user_id: str) -> int:
        result = await self.db.execute(
            delete(GroupMember).where(
                GroupMember.group_id == group_id,
                GroupMember.user_id == user_id,
            )
        )
        return result.rowcount

    async def remove_all(self, group_id: int) -> int:
        result = await self.db.execute(delete(GroupMember).where(GroupMember.group_id == group_id))
        return result.rowcount
