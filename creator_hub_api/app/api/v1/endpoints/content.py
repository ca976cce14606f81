"""
Content endpoints for API v1.

Browsing is public; publishing requires authentication.  Every
successful ``GET /content/{id}`` counts one view.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from creator_hub_api.app.core.security import get_current_user
from creator_hub_api.app.schemas.content import Content, ContentRequest
from creator_hub_api.app.schemas.user import User
from creator_hub_api.app.services.content_service import ContentService
from creator_hub_api.app.storage import Storage, get_storage


router = APIRouter()


@router.get("/", response_model=List[Content])
async def list_content(storage: Storage = Depends(get_storage)) -> List[Content]:
    return await ContentService.list_all(storage)


@router.get("/{content_id}", response_model=Content)
async def get_content(content_id: int, storage: Storage = Depends(get_storage)) -> Content:
    content = await ContentService.view(storage, content_id)
    if content is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Content not found")
    return content


@router.post("/", response_model=Content, status_code=status.HTTP_201_CREATED)
async def create_content(
    data: ContentRequest,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
) -> Content:
    """Publish content; the caller becomes its creator."""
    return await ContentService.create(storage, data, creator_id=current_user.id)
