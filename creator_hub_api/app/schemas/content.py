"""
Pydantic models for uploaded content (videos, images, posts).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ContentBase(BaseModel):
    title: str = Field(..., min_length=1, examples=["Sunset timelapse"])
    description: Optional[str] = Field(None, examples=["Shot over two hours in Lisbon"])
    content_url: str = Field(..., examples=["https://cdn.example.com/v/42.mp4"])
    thumbnail_url: Optional[str] = Field(None, examples=["https://cdn.example.com/t/42.jpg"])
    duration: Optional[int] = Field(None, ge=0, description="Length in seconds")
    is_premium: bool = Field(False, description="Only visible to premium subscribers")
    category: Optional[str] = Field(None, examples=["travel"])


class ContentRequest(ContentBase):
    """Request body for publishing content.

    The creator is always the authenticated user; a ``creator_id`` sent
    by the client is ignored.
    """


class ContentCreate(ContentBase):
    """Fields the store needs to create a content item."""

    creator_id: int


class Content(ContentBase):
    """A stored content item."""

    id: int
    creator_id: int
    views: int = 0
    likes: int = 0
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }
