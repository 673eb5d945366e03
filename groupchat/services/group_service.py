import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from groupchat.core.exceptions import (
    CannotRemoveOwnerError,
    GroupNameTakenError,
    GroupNotFoundError,
    MembershipNotFoundError,
    NotGroupOwnerError,
    StorageError,
    UserNotFoundError,
)
from groupchat.core.validation import PageRequest, require, require_max_length, sanitize
from groupchat.db.session import transaction
from groupchat.models.chat_group import ChatGroup
from groupchat.repositories.groups import GroupRepository
from groupchat.repositories.members import MembershipRepository
from groupchat.repositories.messages import MessageRepository
from groupchat.repositories.users import UserRepository

JOINED = "joined"
ALREADY_MEMBER = "already_member"


@dataclass
class GroupPage:
    groups: list[ChatGroup]
    total: int
    page: PageRequest


class GroupService:
    def __init__(self, db: AsyncSession, logger: logging.LoggerAdapter | logging.Logger):
        self.db = db
        self.users = UserRepository(db)
        self.groups = GroupRepository(db)
        self.members = MembershipRepository(db)
        self.messages = MessageRepository(db)
        self.logger = logger

    async def get_group(self, group_id: int) -> ChatGroup:
        group = await self.groups.get(group_id)
        if group is None:
            self.logger.debug(f"Group not found: {group_id}")
            raise GroupNotFoundError()
        return group

    async def create_group(self, name: str | None, owner_id: str | None) -> ChatGroup:
        require(name, "Group name is required")
        require(owner_id, "User ID is required")
        group_name = require_max_length(sanitize(name.strip()), "Group name")

        if not await self.users.exists(owner_id):
            self.logger.debug(f"Owner not found: {owner_id}")
            raise UserNotFoundError()

        if await self.groups.get_by_name(group_name) is not None:
            self.logger.warning(f"Group name already taken: {group_name}")
            raise GroupNameTakenError()

        try:
            async with transaction(self.db):
                group = await self.groups.add(ChatGroup(name=group_name, created_by=owner_id))
                await self.members.add(group.id, owner_id)
        except IntegrityError:
            self.logger.warning(f"Group name already taken on insert: {group_name}")
            raise GroupNameTakenError()

        self.logger.info(f"Group {group.id} created by {owner_id}")
        return group

    async def list_groups(self, page: int | None = None, limit: int | None = None) -> GroupPage:
        page_request = PageRequest.of(page, limit)
        total = await self.groups.count()
        groups = await self.groups.list_page(page_request.offset, page_request.limit)
        self.logger.debug(f"Retrieved {len(groups)} of {total} groups")
        return GroupPage(groups=groups, total=total, page=page_request)

    async def join_group(self, group_id: int, user_id: str | None) -> str:
        """Add the user to the group. Joining twice is not an error."""
        require(user_id, "User ID is required")

        if not await self.users.exists(user_id):
            raise UserNotFoundError()
        await self.get_group(group_id)

        if await self.members.exists(group_id, user_id):
            self.logger.debug(f"User {user_id} already in group {group_id}")
            return ALREADY_MEMBER

        try:
            async with transaction(self.db):
                await self.members.add(group_id, user_id)
        except IntegrityError:
            # a concurrent join inserted the same row first
            self.logger.debug(f"User {user_id} joined group {group_id} concurrently")
            return ALREADY_MEMBER

        self.logger.info(f"User {user_id} joined group {group_id}")
        return JOINED

    async def remove_member(self, group_id: int, user_id: str | None, owner_id: str | None) -> None:
        require(user_id, "User ID to remove is required")
        require(owner_id, "Owner ID is required")

        if not await self.users.exists(owner_id):
            raise UserNotFoundError("Owner user not found")
        if not await self.users.exists(user_id):
            raise UserNotFoundError("User to remove not found")

        group = await self.get_group(group_id)
        if group.created_by != owner_id:
            self.logger.warning(f"User {owner_id} is not the owner of group {group_id}")
            raise NotGroupOwnerError("Only the group owner can remove users")

        if user_id == group.created_by:
            self.logger.warning(f"Refusing to remove owner from group {group_id}")
            raise CannotRemoveOwnerError()

        if not await self.members.exists(group_id, user_id):
            raise MembershipNotFoundError()

        async with transaction(self.db):
            removed = await self.members.remove(group_id, user_id)
            if removed != 1:
                raise StorageError("Failed to remove user from group")

        self.logger.info(f"User {user_id} removed from group {group_id}")

    async def delete_group(self, group_id: int, user_id: str | None) -> None:
        require(user_id, "User ID is required")

        group = await self.get_group(group_id)
        if group.created_by != user_id:
            self.logger.warning(f"User {user_id} is not the owner of group {group_id}")
            raise NotGroupOwnerError("Only the group owner can delete the group")

        try:
            async with transaction(self.db):
                messages = await self.messages.remove_all(group_id)
                members = await self.members.remove_all(group_id)
                deleted = await self.groups.delete(group_id)
                if deleted != 1:
                    raise StorageError("Failed to delete group")
        except SQLAlchemyError:
            self.logger.exception(f"Failed to delete group {group_id}")
            raise StorageError("Failed to delete group")

        self.logger.info(f"Group {group_id} deleted ({messages} messages, {members} memberships)")
