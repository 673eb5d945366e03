from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from groupchat.models.message import Message


class MessageRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, message: Message) -> Message:
        self.db.add(message)
        await self.db.flush()
        return message

    async def count_for_group(self, group_id: int) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Message).where(Message.group_id == group_id)
        )
        return result.scalar() or 0

    async def list_latest(self, group_id: int, offset: int, limit: int) -> list[Message]:
        """Newest first; messages sharing a timestamp fall back to insertion order."""
        result = await self.db.execute(
            select(Message)
            .options(joinedload(Message.author))
            .where(Message.group_id == group_id)
            .order_by(Message.created_at.desc(), Message.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def remove_all(self, group_id: int) -> int:
        result = await self.db.execute(delete(Message).where(Message.group_id == group_id))
        return result.rowcount
