from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from groupchat.core.logging import RequestLogger, get_request_logger
from groupchat.core.rate_limit import limiter
from groupchat.db.session import get_db

router = APIRouter(tags=["health"])


@router.get("/")
async def root():
    return {"message": "Chat API is running"}


@router.get("/health")
@limiter.exempt
async def health_check(
    db: AsyncSession = Depends(get_db),
    logger: RequestLogger = Depends(get_request_logger),
):
    try:
        await db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except (SQLAlchemyError, OSError):
        logger.exception("Health check failed")
        return {"status": "unhealthy", "database": "unreachable"}
