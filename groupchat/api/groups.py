from fastapi import APIRouter, Body, Depends, Query

from groupchat.api.deps import get_group_service, get_message_service
from groupchat.schemas.common import Ack
from groupchat.schemas.groups import (
    GroupCreate,
    GroupDelete,
    GroupJoin,
    GroupListResponse,
    GroupPagination,
    GroupResponse,
    MemberRemove,
)
from groupchat.schemas.messages import (
    GroupMessageResponse,
    MessageAuthor,
    MessageListResponse,
    MessagePagination,
)
from groupchat.services.group_service import JOINED, GroupService
from groupchat.services.message_service import MessageService

router = APIRouter(prefix="/groups", tags=["groups"])


@router.post("", response_model=GroupResponse, status_code=201)
async def create_group(
    body: GroupCreate,
    service: GroupService = Depends(get_group_service),
):
    group = await service.create_group(body.name, body.user_id)
    return GroupResponse.model_validate(group)


@router.get("", response_model=GroupListResponse)
async def list_groups(
    page: int = Query(default=1),
    limit: int = Query(default=20),
    service: GroupService = Depends(get_group_service),
):
    result = await service.list_groups(page, limit)
    return GroupListResponse(
        groups=[GroupResponse.model_validate(g) for g in result.groups],
        pagination=GroupPagination(total_groups=result.total, **result.page.describe(result.total)),
    )


@router.post("/{group_id}/join", response_model=Ack, response_model_exclude_none=True)
async def join_group(
    group_id: int,
    body: GroupJoin,
    service: GroupService = Depends(get_group_service),
):
    status = await service.join_group(group_id, body.user_id)
    if status == JOINED:
        return Ack(
            message="User joined the group successfully",
            status=status,
            user_id=body.user_id,
            group_id=group_id,
        )
    return Ack(message="User is already a member of this group", status=status)


@router.delete("/{group_id}/members", response_model=Ack, response_model_exclude_none=True)
async def remove_member(
    group_id: int,
    body: MemberRemove | None = Body(default=None),
    service: GroupService = Depends(get_group_service),
):
    body = body or MemberRemove()
    await service.remove_member(group_id, body.user_id, body.owner_id)
    return Ack(message="User removed from the group successfully")


@router.delete("/{group_id}", response_model=Ack, response_model_exclude_none=True)
async def delete_group(
    group_id: int,
    body: GroupDelete | None = Body(default=None),
    service: GroupService = Depends(get_group_service),
):
    body = body or GroupDelete()
    await service.delete_group(group_id, body.user_id)
    return Ack(message="Group deleted successfully")


@router.get("/{group_id}/messages", response_model=MessageListResponse)
async def list_group_messages(
    group_id: int,
    user_id: str | None = Query(default=None),
    page: int = Query(default=1),
    limit: int = Query(default=20),
    service: MessageService = Depends(get_message_service),
):
    result = await service.get_group_messages(group_id, user_id, page, limit)
    return MessageListResponse(
        group_id=result.group_id,
        messages=[
            GroupMessageResponse(
                id=m.id,
                content=m.content,
                created_at=m.created_at,
                user=MessageAuthor.model_validate(m.author),
            )
            for m in result.messages
        ],
        pagination=MessagePagination(total_messages=result.total, **result.page.describe(result.total)),
    )
