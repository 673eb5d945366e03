from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from groupchat.core.validation import is_storable_id
from groupchat.models.chat_group import ChatGroup


class GroupRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, group_id: int) -> ChatGroup | None:
        if not is_storable_id(group_id):
            return None
        return await self.db.get(ChatGroup, group_id)

    async def get_by_name(self, name: str) -> ChatGroup | None:
        result = await self.db.execute(select(ChatGroup).where(ChatGroup.name == name))
        return result.scalar_one_or_none()

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(ChatGroup))
        return result.scalar() or 0

    async def list_page(self, offset: int, limit: int) -> list[ChatGroup]:
        result = await self.db.execute(
            select(ChatGroup).order_by(ChatGroup.id).offset(offset).limit(limit)
        )
        return list(result.scalars().all())

    async def add(self, group: ChatGroup) -> ChatGroup:
        self.db.add(group)
        await self.db.flush()
        return group

    async def delete(self, group_id: int) -> int:
        result = await self.db.execute(delete(ChatGroup).where(ChatGroup.id == group_id))
        return result.rowcount
