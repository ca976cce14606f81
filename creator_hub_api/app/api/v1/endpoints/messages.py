"""
Message endpoints for API v1.

Clients poll ``GET /messages/`` for everything they sent or received.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from creator_hub_api.app.core.security import get_current_user
from creator_hub_api.app.schemas.message import Message, MessageRequest
from creator_hub_api.app.schemas.user import User
from creator_hub_api.app.services.message_service import MessageService
from creator_hub_api.app.storage import Storage, get_storage


router = APIRouter()


@router.get("/", response_model=List[Message])
async def list_messages(
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
) -> List[Message]:
    return await MessageService.inbox(storage, current_user.id)


@router.post("/", response_model=Message, status_code=status.HTTP_201_CREATED)
async def send_message(
    data: MessageRequest,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
) -> Message:
    """Send a message as the caller."""
    try:
        return await MessageService.send(storage, current_user.id, data)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{message_id}/read", response_model=Message)
async def mark_message_read(
    message_id: int,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
) -> Message:
    message = await MessageService.mark_read(storage, message_id)
    if message is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return message
