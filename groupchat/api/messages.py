from fastapi import APIRouter, Depends

from groupchat.api.deps import get_message_service
from groupchat.schemas.messages import MessageCreate, MessageResponse
from groupchat.services.message_service import MessageService

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", response_model=MessageResponse, status_code=201)
async def send_message(
    body: MessageCreate,
    service: MessageService = Depends(get_message_service),
):
    msg = await service.send_message(body.group_id, body.user_id, body.content)
    return MessageResponse.model_validate(msg)
