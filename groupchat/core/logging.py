import logging
import sys
import uuid

from fastapi import Request

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )


class RequestLogger(logging.LoggerAdapter):
    """Logger bound to a single request, prefixing every line with its id."""

    def process(self, msg, kwargs):
        return f"[{self.extra['request_id']}] {msg}", kwargs


def bind_logger(name: str, request_id: str | None = None) -> RequestLogger:
    return RequestLogger(logging.getLogger(name), {"request_id": request_id or uuid.uuid4().hex[:12]})


async def get_request_logger(request: Request) -> RequestLogger:
    return bind_logger("groupchat", request.headers.get("X-Request-ID"))
