from datetime import datetime

from pydantic import BaseModel

from groupchat.schemas.common import Pagination


class GroupCreate(BaseModel):
    name: str | None = None
    user_id: str | None = None


class GroupJoin(BaseModel):
    user_id: str | None = None


class MemberRemove(BaseModel):
    user_id: str | None = None
    owner_id: str | None = None


class GroupDelete(BaseModel):
    user_id: str | None = None


class GroupResponse(BaseModel):
    id: int
    name: str
    created_by: str
    created_at: datetime

    class Config:
        from_attributes = True


class GroupPagination(Pagination):
    total_groups: int


class GroupListResponse(BaseModel):
    groups: list[GroupResponse]
    pagination: GroupPagination
