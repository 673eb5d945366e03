from pydantic import BaseModel


class Pagination(BaseModel):
    current_page: int
    per_page: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class Ack(BaseModel):
    message: str
    status: str | None = None
    user_id: str | None = None
    group_id: int | None = None
