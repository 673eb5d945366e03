from fastapi import APIRouter, Depends

from groupchat.api.deps import get_user_service
from groupchat.schemas.users import UserCreate, UserResponse
from groupchat.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    body: UserCreate,
    service: UserService = Depends(get_user_service),
):
    user = await service.register(body.username)
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
):
    user = await service.fetch(user_id)
    return UserResponse.model_validate(user)
