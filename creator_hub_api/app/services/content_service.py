"""
Business logic for content items.
"""

import logging
from typing import List, Optional

from ..schemas.content import Content, ContentCreate, ContentRequest
from ..storage import Storage


class ContentService:
    """Listing, viewing and publishing content."""

    @classmethod
    async def list_all(cls, storage: Storage) -> List[Content]:
        return await storage.get_all_content()

    @classmethod
    async def list_by_creator(cls, storage: Storage, creator_id: int) -> List[Content]:
        return await storage.get_content_by_creator_id(creator_id)

    @classmethod
    async def view(cls, storage: Storage, content_id: int) -> Optional[Content]:
        """Fetch a content item and count the view.

        The item is returned as it was read, before the increment, so
        the viewer sees the count excluding their own view.  Returns
        ``None`` if the id is unknown.
        """
        content = await storage.get_content_by_id(content_id)
        if content is None:
            return None
        await storage.increment_content_views(content_id)
        return content

    @classmethod
    async def create(cls, storage: Storage, data: ContentRequest, creator_id: int) -> Content:
        """Publish content on behalf of ``creator_id``."""
        content = await storage.create_content(ContentCreate(**data.model_dump(), creator_id=creator_id))
        logging.getLogger(__name__).info("User %s published content %s", creator_id, content.id)
        return content
