import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from groupchat.core.validation import PageRequest, require, sanitize
from groupchat.db.session import transaction
from groupchat.models.message import Message
from groupchat.repositories.messages import MessageRepository
from groupchat.services.membership_service import MembershipService


@dataclass
class MessagePage:
    group_id: int
    messages: list[Message]
    total: int
    page: PageRequest


class MessageService:
    def __init__(self, db: AsyncSession, logger: logging.LoggerAdapter | logging.Logger):
        self.db = db
        self.messages = MessageRepository(db)
        self.membership = MembershipService(db, logger)
        self.logger = logger

    async def send_message(self, group_id: int | None, user_id: str | None, content: str | None) -> Message:
        require(user_id, "User ID is required")
        require(group_id, "Group ID is required")
        require(content, "Message content is required")

        async with transaction(self.db):
            # membership check and insert share one transaction
            await self.membership.assert_member(user_id, group_id)
            msg = await self.messages.add(
                Message(group_id=group_id, user_id=user_id, content=sanitize(content))
            )

        self.logger.info(f"Message {msg.id} posted to group {group_id} by {user_id}")
        return msg

    async def get_group_messages(
        self,
        group_id: int,
        user_id: str | None,
        page: int | None = None,
        limit: int | None = None,
    ) -> MessagePage:
        require(user_id, "User ID is required")
        await self.membership.assert_member(user_id, group_id)

        page_request = PageRequest.of(page, limit)
        total = await self.messages.count_for_group(group_id)
        messages = await self.messages.list_latest(group_id, page_request.offset, page_request.limit)
        self.logger.debug(f"Retrieved {len(messages)} of {total} messages for group {group_id}")
        return MessagePage(group_id=group_id, messages=messages, total=total, page=page_request)
