"""
Business logic for users: registration, login and profile edits.
"""

import logging
from typing import Optional

from ..core.security import hash_password, verify_password
from ..schemas.user import User, UserCreate, UserUpdate
from ..storage import Storage


class UserService:
    """Registration, authentication and profile updates.

    Username uniqueness is checked here, case‑insensitively, because
    the store does not enforce it.
    """

    @classmethod
    async def register(cls, storage: Storage, data: UserCreate) -> User:
        """Create a user after checking the username is free.

        The plain password in ``data`` is replaced by its hash before
        the store sees it.

        Raises
        ------
        ValueError
            If another user already has this username (any case).
        """
        logger = logging.getLogger(__name__)
        if await storage.get_user_by_username(data.username):
            raise ValueError("Username already exists")
        user = await storage.create_user(data.model_copy(update={"password": hash_password(data.password)}))
        logger.info("Registered user %s (%s)", user.id, user.username)
        return user

    @classmethod
    async def authenticate(cls, storage: Storage, username: str, password: str) -> Optional[User]:
        """Return the user if the credentials match, otherwise ``None``."""
        user = await storage.get_user_by_username(username)
        if user is None or not verify_password(password, user.password):
            logging.getLogger(__name__).info("Failed login for %s", username)
            return None
        return user

    @classmethod
    async def update_profile(cls, storage: Storage, user_id: int, data: UserUpdate) -> Optional[User]:
        """Apply the profile fields present in the request body.

        Fields the client did not send are left untouched.  Returns
        ``None`` if the user no longer exists.
        """
        return await storage.update_user(user_id, data.model_dump(exclude_unset=True))

    @classmethod
    async def set_online(cls, storage: Storage, user_id: int, online: bool) -> Optional[User]:
        return await storage.update_user(user_id, {"is_online": online})
