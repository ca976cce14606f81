"""
Bookmark endpoints for API v1.  All routes act on the caller's
bookmarks.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from creator_hub_api.app.core.security import get_current_user
from creator_hub_api.app.schemas.bookmark import Bookmark, BookmarkRequest
from creator_hub_api.app.schemas.user import User
from creator_hub_api.app.services.bookmark_service import BookmarkService
from creator_hub_api.app.storage import Storage, get_storage


router = APIRouter()


@router.get("/", response_model=List[Bookmark])
async def list_bookmarks(
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
) -> List[Bookmark]:
    return await BookmarkService.list_for_user(storage, current_user.id)


@router.post("/", response_model=Bookmark, status_code=status.HTTP_201_CREATED)
async def create_bookmark(
    data: BookmarkRequest,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
) -> Bookmark:
    try:
        return await BookmarkService.add(storage, current_user.id, data)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bookmark(
    content_id: int,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
) -> None:
    if not await BookmarkService.remove(storage, current_user.id, content_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Bookmark not found")
    return None
