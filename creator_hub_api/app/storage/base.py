"""
Storage contract shared by every backend.

Routes and services depend on ``Storage`` only, so the in‑memory
implementation can later be swapped for a database‑backed one.
Lookups return ``None`` for unknown ids and deletes return ``False``
when nothing matched; no method raises for "not found".
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..schemas.bookmark import Bookmark, BookmarkCreate
from ..schemas.content import Content, ContentCreate
from ..schemas.follower import Follower, FollowerCreate
from ..schemas.message import Message, MessageCreate
from ..schemas.user import User, UserCreate
from .sessions import MemorySessionStore


class Storage(ABC):
    session_store: MemorySessionStore

    # Users
    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User: ...

    @abstractmethod
    async def update_user(self, user_id: int, data: Dict[str, Any]) -> Optional[User]: ...

    @abstractmethod
    async def update_stripe_customer_id(self, user_id: int, customer_id: str) -> Optional[User]: ...

    @abstractmethod
    async def update_user_stripe_info(
        self, user_id: int, stripe_customer_id: str, stripe_subscription_id: str
    ) -> Optional[User]: ...

    # Content
    @abstractmethod
    async def get_all_content(self) -> List[Content]: ...

    @abstractmethod
    async def get_content_by_id(self, content_id: int) -> Optional[Content]: ...

    @abstractmethod
    async def get_content_by_creator_id(self, creator_id: int) -> List[Content]: ...

    @abstractmethod
    async def create_content(self, data: ContentCreate) -> Content: ...

    @abstractmethod
    async def increment_content_views(self, content_id: int) -> Optional[Content]: ...

    # Messages
    @abstractmethod
    async def get_user_messages(self, user_id: int) -> List[Message]: ...

    @abstractmethod
    async def create_message(self, data: MessageCreate) -> Message: ...

    @abstractmethod
    async def mark_message_as_read(self, message_id: int) -> Optional[Message]: ...

    # Bookmarks
    @abstractmethod
    async def get_user_bookmarks(self, user_id: int) -> List[Bookmark]: ...

    @abstractmethod
    async def create_bookmark(self, data: BookmarkCreate) -> Bookmark: ...

    @abstractmethod
    async def delete_bookmark(self, user_id: int, content_id: int) -> bool: ...

    # Followers
    @abstractmethod
    async def get_user_followers(self, user_id: int) -> List[User]: ...

    @abstractmethod
    async def get_user_following(self, user_id: int) -> List[User]: ...

    @abstractmethod
    async def create_follower(self, data: FollowerCreate) -> Follower: ...

    @abstractmethod
    async def delete_follower(self, follower_id: int, followed_id: int) -> bool: ...
