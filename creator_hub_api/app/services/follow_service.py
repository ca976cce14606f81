"""
Business logic for following creators.
"""

import logging
from typing import List

from ..schemas.follower import Follower, FollowerCreate
from ..schemas.user import User
from ..storage import Storage


class FollowService:
    """Follow and unfollow users and list both sides of the graph."""

    @classmethod
    async def follow(cls, storage: Storage, follower_id: int, followed_id: int) -> Follower:
        """Make ``follower_id`` follow ``followed_id``.

        Raises
        ------
        LookupError
            If the user to follow does not exist.
        ValueError
            If the edge already exists.
        """
        if await storage.get_user(followed_id) is None:
            raise LookupError("User not found")
        following = await storage.get_user_following(follower_id)
        if any(user.id == followed_id for user in following):
            raise ValueError("Already following this user")
        edge = await storage.create_follower(FollowerCreate(follower_id=follower_id, followed_id=followed_id))
        logging.getLogger(__name__).info("User %s now follows %s", follower_id, followed_id)
        return edge

    @classmethod
    async def unfollow(cls, storage: Storage, follower_id: int, followed_id: int) -> bool:
        return await storage.delete_follower(follower_id, followed_id)

    @classmethod
    async def followers(cls, storage: Storage, user_id: int) -> List[User]:
        return await storage.get_user_followers(user_id)

    @classmethod
    async def following(cls, storage: Storage, user_id: int) -> List[User]:
        return await storage.get_user_following(user_id)
