import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from groupchat.core.config import settings
from groupchat.core.logging import configure_logging

configure_logging(settings.LOG_LEVEL)

from groupchat.api import groups, health, messages, users
from groupchat.core.rate_limit import limiter, rate_limit_exceeded_handler
from groupchat.db.session import engine, init_models

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("=== LIFESPAN STARTUP BEGIN ===")
    await init_models()
    logger.info("Database schema ready")
    logger.info("=== LIFESPAN STARTUP COMPLETE ===")

    yield

    await engine.dispose()


app = FastAPI(
    title=settings.API_TITLE,
    description="Group chat backend: users, groups and membership-gated messages",
    version="1.0.0",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        detail = f"{location}: {errors[0].get('msg')}" if location else errors[0].get("msg")
    else:
        detail = "Invalid request"
    return JSONResponse(status_code=400, content={"error": detail})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


app.include_router(health.router)
app.include_router(users.router)
app.include_router(groups.router)
app.include_router(messages.router)
