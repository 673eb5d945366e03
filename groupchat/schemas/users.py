from datetime import datetime

from pydantic import BaseModel


class UserCreate(BaseModel):
    username: str | None = None


class UserResponse(BaseModel):
    id: str
    username: str
    created_at: datetime

    class Config:
        from_attributes = True
