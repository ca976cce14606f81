"""
Pydantic models for user data.

``User`` is the stored entity and includes the password hash, so it
must never be returned from an endpoint directly; use ``UserRead``.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UserProfile(BaseModel):
    display_name: Optional[str] = Field(None, examples=["Alice Liddell"])
    bio: Optional[str] = Field(None, examples=["Travel vlogs every Friday"])
    avatar_url: Optional[str] = Field(None, examples=["https://cdn.example.com/a/1.png"])


class UserCreate(UserProfile):
    """Schema for registering a user.

    ``password`` arrives in plain text from the client and is replaced
    by its hash in ``UserService.register`` before the store sees it.
    """

    username: str = Field(..., min_length=1, examples=["alice"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])


class User(UserCreate):
    """A stored user."""

    id: int
    is_online: bool = False
    is_premium: bool = False
    stripe_customer_id: Optional[str] = None
    stripe_subscription_id: Optional[str] = None
    created_at: datetime


class UserRead(UserProfile):
    """Schema for reading a user from the API (no password)."""

    id: int
    username: str
    is_online: bool = False
    is_premium: bool = False
    stripe_customer_id: Optional[str] = None
    stripe_subscription_id: Optional[str] = None
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }


class UserUpdate(UserProfile):
    """Profile fields a user may change about themselves.

    Only the fields present in the request body are applied.
    """


class LoginRequest(BaseModel):
    username: str = Field(..., examples=["alice"])
    password: str = Field(..., examples=["strongpassword"])


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
