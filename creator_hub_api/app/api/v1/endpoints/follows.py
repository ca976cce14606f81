"""
Follow endpoints for API v1.

``POST /follow/`` makes the caller follow another user;
``DELETE /follow/{user_id}`` undoes it.  Listing followers and
followees lives under ``/users``.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from creator_hub_api.app.core.security import get_current_user
from creator_hub_api.app.schemas.follower import Follower, FollowRequest
from creator_hub_api.app.schemas.user import User
from creator_hub_api.app.services.follow_service import FollowService
from creator_hub_api.app.storage import Storage, get_storage


router = APIRouter()


@router.post("/", response_model=Follower, status_code=status.HTTP_201_CREATED)
async def follow_user(
    data: FollowRequest,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
) -> Follower:
    try:
        return await FollowService.follow(storage, current_user.id, data.followed_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unfollow_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
) -> None:
    if not await FollowService.unfollow(storage, current_user.id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not following this user")
    return None
