"""
User endpoints for API v1.

Public profile queries (a creator's content, followers, following)
and the authenticated user's own profile update.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from creator_hub_api.app.core.security import get_current_user
from creator_hub_api.app.schemas.content import Content
from creator_hub_api.app.schemas.user import User, UserRead, UserUpdate
from creator_hub_api.app.services.content_service import ContentService
from creator_hub_api.app.services.follow_service import FollowService
from creator_hub_api.app.services.user_service import UserService
from creator_hub_api.app.storage import Storage, get_storage


router = APIRouter()


@router.put("/me", response_model=UserRead)
async def update_profile(
    data: UserUpdate,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
) -> UserRead:
    """Update display name, bio or avatar of the caller.

    Only the fields present in the body change.
    """
    updated = await UserService.update_profile(storage, current_user.id, data)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead.model_validate(updated)


@router.get("/{user_id}/content", response_model=List[Content])
async def list_user_content(user_id: int, storage: Storage = Depends(get_storage)) -> List[Content]:
    return await ContentService.list_by_creator(storage, user_id)


@router.get("/{user_id}/followers", response_model=List[UserRead])
async def list_followers(user_id: int, storage: Storage = Depends(get_storage)) -> List[UserRead]:
    users = await FollowService.followers(storage, user_id)
    return [UserRead.model_validate(user) for user in users]


@router.get("/{user_id}/following", response_model=List[UserRead])
async def list_following(user_id: int, storage: Storage = Depends(get_storage)) -> List[UserRead]:
    users = await FollowService.following(storage, user_id)
    return [UserRead.model_validate(user) for user in users]
