"""
In‑memory implementation of the storage contract.

``MemStorage`` keeps one ``Collection`` per entity type plus the
session store.  It performs no validation and no referential checks:
callers are expected to have verified usernames, ids and payload
shapes before calling in.  Nothing is persisted; state lives as long
as the instance does.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..schemas.bookmark import Bookmark, BookmarkCreate
from ..schemas.content import Content, ContentCreate
from ..schemas.follower import Follower, FollowerCreate
from ..schemas.message import Message, MessageCreate
from ..schemas.user import User, UserCreate
from .base import Storage
from .collection import Collection
from .sessions import DEFAULT_CHECK_PERIOD, DEFAULT_TTL, MemorySessionStore

logger = logging.getLogger(__name__)

# Fields ``update_user`` never overwrites.
IMMUTABLE_USER_FIELDS = frozenset({"id", "created_at"})


def _now() -> datetime:
    return datetime.now(timezone.utc)


class MemStorage(Storage):
    """Authoritative in‑memory store for users, content, messages,
    bookmarks and follow edges."""

    def __init__(self, session_check_period: int = DEFAULT_CHECK_PERIOD, session_ttl: int = DEFAULT_TTL) -> None:
        self.users: Collection[User] = Collection("users")
        self.content: Collection[Content] = Collection("content")
        self.messages: Collection[Message] = Collection("messages")
        self.bookmarks: Collection[Bookmark] = Collection("bookmarks")
        self.followers: Collection[Follower] = Collection("followers")
        self.session_store = MemorySessionStore(check_period=session_check_period, ttl=session_ttl)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        wanted = username.lower()
        return self.users.find(lambda user: (user.username or "").lower() == wanted)

    async def create_user(self, data: UserCreate) -> User:
        user = self.users.insert(
            lambda user_id: User(
                **data.model_dump(),
                id=user_id,
                is_online=False,
                is_premium=False,
                created_at=_now(),
            )
        )
        logger.debug("Stored user %s (%s)", user.id, user.username)
        return user

    async def update_user(self, user_id: int, data: Dict[str, Any]) -> Optional[User]:
        """Merge ``data`` into the user without validating it.

        Keys that are not user fields are ignored, as are ``id`` and
        ``created_at``.
        """
        changes = {
            key: value
            for key, value in data.items()
            if key in User.model_fields and key not in IMMUTABLE_USER_FIELDS
        }
        return self.users.update(user_id, lambda _: changes)

    async def update_stripe_customer_id(self, user_id: int, customer_id: str) -> Optional[User]:
        return self.users.update(user_id, lambda _: {"stripe_customer_id": customer_id})

    async def update_user_stripe_info(
        self, user_id: int, stripe_customer_id: str, stripe_subscription_id: str
    ) -> Optional[User]:
        # Recording a subscription also grants premium.  Nothing here
        # revokes it when the subscription ends.
        return self.users.update(
            user_id,
            lambda _: {
                "stripe_customer_id": stripe_customer_id,
                "stripe_subscription_id": stripe_subscription_id,
                "is_premium": True,
            },
        )

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    async def get_all_content(self) -> List[Content]:
        return self.content.values()

    async def get_content_by_id(self, content_id: int) -> Optional[Content]:
        return self.content.get(content_id)

    async def get_content_by_creator_id(self, creator_id: int) -> List[Content]:
        return self.content.filter(lambda item: item.creator_id == creator_id)

    async def create_content(self, data: ContentCreate) -> Content:
        return self.content.insert(
            lambda content_id: Content(
                **data.model_dump(),
                id=content_id,
                views=0,
                likes=0,
                created_at=_now(),
            )
        )

    async def increment_content_views(self, content_id: int) -> Optional[Content]:
        return self.content.update(content_id, lambda item: {"views": item.views + 1})

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    async def get_user_messages(self, user_id: int) -> List[Message]:
        return self.messages.filter(
            lambda message: message.sender_id == user_id or message.receiver_id == user_id
        )

    async def create_message(self, data: MessageCreate) -> Message:
        return self.messages.insert(
            lambda message_id: Message(
                **data.model_dump(),
                id=message_id,
                is_read=False,
                created_at=_now(),
            )
        )

    async def mark_message_as_read(self, message_id: int) -> Optional[Message]:
        return self.messages.update(message_id, lambda _: {"is_read": True})

    # ------------------------------------------------------------------
    # Bookmarks
    # ------------------------------------------------------------------

    async def get_user_bookmarks(self, user_id: int) -> List[Bookmark]:
        return self.bookmarks.filter(lambda bookmark: bookmark.user_id == user_id)

    async def create_bookmark(self, data: BookmarkCreate) -> Bookmark:
        return self.bookmarks.insert(
            lambda bookmark_id: Bookmark(**data.model_dump(), id=bookmark_id, created_at=_now())
        )

    async def delete_bookmark(self, user_id: int, content_id: int) -> bool:
        return self.bookmarks.delete_first(
            lambda bookmark: bookmark.user_id == user_id and bookmark.content_id == content_id
        )

    # ------------------------------------------------------------------
    # Followers
    # ------------------------------------------------------------------

    async def get_user_followers(self, user_id: int) -> List[User]:
        follower_ids = {edge.follower_id for edge in self.followers.filter(lambda edge: edge.followed_id == user_id)}
        return self.users.filter(lambda user: user.id in follower_ids)

    async def get_user_following(self, user_id: int) -> List[User]:
        followed_ids = {edge.followed_id for edge in self.followers.filter(lambda edge: edge.follower_id == user_id)}
        return self.users.filter(lambda user: user.id in followed_ids)

    async def create_follower(self, data: FollowerCreate) -> Follower:
        return self.followers.insert(
            lambda edge_id: Follower(**data.model_dump(), id=edge_id, created_at=_now())
        )

    async def delete_follower(self, follower_id: int, followed_id: int) -> bool:
        return self.followers.delete_first(
            lambda edge: edge.follower_id == follower_id and edge.followed_id == followed_id
        )
