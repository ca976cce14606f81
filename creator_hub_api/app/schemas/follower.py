"""
Pydantic models for follow relationships.

A ``Follower`` record is a directed edge: ``follower_id`` follows
``followed_id``.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class FollowerCreate(BaseModel):
    follower_id: int
    followed_id: int


class FollowRequest(BaseModel):
    """Request body for ``POST /follow``; the follower is the caller."""

    followed_id: int = Field(..., gt=0, examples=[2])


class Follower(FollowerCreate):
    id: int
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }
