"""
Business logic for bookmarks.
"""

from typing import List

from ..schemas.bookmark import Bookmark, BookmarkCreate, BookmarkRequest
from ..storage import Storage


class BookmarkService:

    @classmethod
    async def add(cls, storage: Storage, user_id: int, data: BookmarkRequest) -> Bookmark:
        """Bookmark a content item for ``user_id``.

        Bookmarking the same item twice creates two records; removing
        one leaves the other.

        Raises
        ------
        LookupError
            If the content item does not exist.
        """
        if await storage.get_content_by_id(data.content_id) is None:
            raise LookupError("Content not found")
        return await storage.create_bookmark(BookmarkCreate(**data.model_dump(), user_id=user_id))

    @classmethod
    async def list_for_user(cls, storage: Storage, user_id: int) -> List[Bookmark]:
        return await storage.get_user_bookmarks(user_id)

    @classmethod
    async def remove(cls, storage: Storage, user_id: int, content_id: int) -> bool:
        return await storage.delete_bookmark(user_id, content_id)
