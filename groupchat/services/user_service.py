import logging
import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from groupchat.core.exceptions import UserNotFoundError, UsernameTakenError
from groupchat.core.validation import require, require_max_length
from groupchat.db.session import transaction
from groupchat.models.user import User
from groupchat.repositories.users import UserRepository


def generate_user_id() -> str:
    return str(uuid.uuid4())


class UserService:
    def __init__(self, db: AsyncSession, logger: logging.LoggerAdapter | logging.Logger):
        self.db = db
        self.users = UserRepository(db)
        self.logger = logger

    async def register(self, username: str | None) -> User:
        require(username, "Username is required")
        require_max_length(username, "Username")

        if await self.users.get_by_username(username) is not None:
            self.logger.warning(f"Username already taken: {username}")
            raise UsernameTakenError()

        try:
            async with transaction(self.db):
                user = await self.users.add(User(id=generate_user_id(), username=username))
        except IntegrityError:
            # lost a race against a concurrent registration
            self.logger.warning(f"Username already taken on insert: {username}")
            raise UsernameTakenError()

        self.logger.info(f"User registered: {user.id}")
        return user

    async def fetch(self, user_id: str) -> User:
        user = await self.users.get(user_id)
        if user is None:
            raise UserNotFoundError()
        return user
