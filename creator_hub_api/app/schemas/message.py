"""
Pydantic models for direct messages between users.

Messages are fetched by polling; there is no push transport.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class MessageRequest(BaseModel):
    """Request body for sending a message; the sender is the caller."""

    receiver_id: int = Field(..., gt=0, examples=[2])
    content: str = Field(..., min_length=1, examples=["hi"])


class MessageCreate(MessageRequest):
    sender_id: int


class Message(MessageCreate):
    id: int
    is_read: bool = False
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }
