import logging

from sqlalchemy.ext.asyncio import AsyncSession

from groupchat.core.exceptions import GroupNotFoundError, NotAMemberError, UserNotFoundError
from groupchat.models.chat_group import ChatGroup
from groupchat.repositories.groups import GroupRepository
from groupchat.repositories.members import MembershipRepository
from groupchat.repositories.users import UserRepository


class MembershipService:
    """Point-in-time membership and ownership checks.

    Nothing is cached: every call reads the store, so a check followed by a
    write is only atomic when both run inside the same transaction.
    """

    def __init__(self, db: AsyncSession, logger: logging.LoggerAdapter | logging.Logger):
        self.users = UserRepository(db)
        self.groups = GroupRepository(db)
        self.members = MembershipRepository(db)
        self.logger = logger

    async def is_member(self, user_id: str, group_id: int) -> bool:
        return await self.members.exists(group_id, user_id)

    async def is_owner(self, user_id: str, group_id: int) -> bool:
        group = await self.groups.get(group_id)
        return group is not None and group.created_by == user_id

    async def assert_member(self, user_id: str, group_id: int) -> ChatGroup:
        if not await self.users.exists(user_id):
            self.logger.debug(f"User not found: {user_id}")
            raise UserNotFoundError()

        group = await self.groups.get(group_id)
        if group is None:
            self.logger.debug(f"Group not found: {group_id}")
            raise GroupNotFoundError()

        if not await self.members.exists(group_id, user_id):
            self.logger.warning(f"User {user_id} is not a member of group {group_id}")
            raise NotAMemberError()

        return group
