from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from groupchat.core.logging import RequestLogger, get_request_logger
from groupchat.db.session import get_db
from groupchat.services.group_service import GroupService
from groupchat.services.message_service import MessageService
from groupchat.services.user_service import UserService


async def get_user_service(
    db: AsyncSession = Depends(get_db),
    logger: RequestLogger = Depends(get_request_logger),
) -> UserService:
    return UserService(db, logger)


async def get_group_service(
    db: AsyncSession = Depends(get_db),
    logger: RequestLogger = Depends(get_request_logger),
) -> GroupService:
    return GroupService(db, logger)


async def get_message_service(
    db: AsyncSession = Depends(get_db),
    logger: RequestLogger = Depends(get_request_logger),
) -> MessageService:
    return MessageService(db, logger)
