"""Message provenance helpers."""

from __future__ import annotations

from telegram import Bot, Message

from tgcmd.errors import NoSenderChatError


async def is_from_linked_channel(bot: Bot, message: Message) -> bool:
    """Whether `message` was posted by the channel linked to its chat.

    Costs one `get_chat` round trip.
    """

    sender_chat = message.sender_chat
    if sender_chat is None:
        raise NoSenderChatError()
    chat = await bot.get_chat(message.chat.id)
    return chat.linked_chat_id == sender_chat.id
