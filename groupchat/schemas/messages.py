from datetime import datetime

from pydantic import BaseModel

from groupchat.schemas.common import Pagination


class MessageCreate(BaseModel):
    user_id: str | None = None
    group_id: int | None = None
    content: str | None = None


class MessageResponse(BaseModel):
    id: int
    user_id: str
    group_id: int
    content: str
    created_at: datetime

    class Config:
        from_attributes = True


class MessageAuthor(BaseModel):
    id: str
    username: str

    class Config:
        from_attributes = True


class GroupMessageResponse(BaseModel):
    id: int
    content: str
    created_at: datetime
    user: MessageAuthor


class MessagePagination(Pagination):
    total_messages: int


class MessageListResponse(BaseModel):
    group_id: int
    messages: list[GroupMessageResponse]
    pagination: MessagePagination
