"""
Business logic for direct messages.

Messages are delivered by polling: clients fetch ``inbox`` and group
messages into conversations themselves.
"""

import logging
from typing import List, Optional

from ..schemas.message import Message, MessageCreate, MessageRequest
from ..storage import Storage


class MessageService:
    """Sending, listing and acknowledging messages."""

    @classmethod
    async def send(cls, storage: Storage, sender_id: int, data: MessageRequest) -> Message:
        """Send a message from ``sender_id``.

        Raises
        ------
        LookupError
            If the receiver does not exist.
        """
        if await storage.get_user(data.receiver_id) is None:
            raise LookupError("Receiver not found")
        message = await storage.create_message(MessageCreate(**data.model_dump(), sender_id=sender_id))
        logging.getLogger(__name__).debug(
            "Message %s sent from %s to %s", message.id, sender_id, data.receiver_id
        )
        return message

    @classmethod
    async def inbox(cls, storage: Storage, user_id: int) -> List[Message]:
        """All messages the user sent or received."""
        return await storage.get_user_messages(user_id)

    @classmethod
    async def mark_read(cls, storage: Storage, message_id: int) -> Optional[Message]:
        return await storage.mark_message_as_read(message_id)
