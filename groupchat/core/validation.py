import html
import math
from dataclasses import dataclass

from groupchat.core.exceptions import InvalidInputError

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
MAX_NAME_LENGTH = 255
# ids are 32-bit Integer columns, OFFSET takes a signed 64-bit value
MAX_ID = 2**31 - 1
MAX_OFFSET = 2**63 - 1
MAX_PAGE = MAX_OFFSET // MAX_PAGE_SIZE + 1


def is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require(value, message: str):
    if is_blank(value):
        raise InvalidInputError(message)
    return value


def require_max_length(value: str, field: str, max_length: int = MAX_NAME_LENGTH) -> str:
    if len(value) > max_length:
        raise InvalidInputError(f"{field} must be no more than {max_length} characters")
    return value


def is_storable_id(value: int) -> bool:
    return 1 <= value <= MAX_ID


def sanitize(value: str) -> str:
    """Escape HTML-significant characters (& < > " ')."""
    return html.escape(value, quote=True)


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int

    @classmethod
    def of(cls, page: int | None = None, limit: int | None = None) -> "PageRequest":
        page = 1 if page is None else min(max(page, 1), MAX_PAGE)
        limit = DEFAULT_PAGE_SIZE if limit is None else min(max(limit, 1), MAX_PAGE_SIZE)
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def describe(self, total: int) -> dict:
        total_pages = math.ceil(total / self.limit)
        return {
            "current_page": self.page,
            "per_page": self.limit,
            "total_pages": total_pages,
            "has_next_page": self.page < total_pages,
            "has_previous_page": self.page > 1,
        }
