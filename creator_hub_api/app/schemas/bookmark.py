"""
Pydantic models for bookmarks (a user saving a content item).
"""

from datetime import datetime

from pydantic import BaseModel, Field


class BookmarkRequest(BaseModel):
    """Request body for bookmarking; the owner is the caller."""

    content_id: int = Field(..., gt=0, examples=[1])


class BookmarkCreate(BookmarkRequest):
    user_id: int


class Bookmark(BookmarkCreate):
    id: int
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }
