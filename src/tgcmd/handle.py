"""Request and response envelopes for bot handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from loguru import logger
from telegram import Bot, CallbackQuery, LinkPreviewOptions, Message, MessageEntity, User

from tgcmd.buttons import MessageButtons

S = TypeVar("S")
C = TypeVar("C")


class RequestKind(Enum):
    NEW_MESSAGE = "new_message"
    EDITED_MESSAGE = "edited_message"
    COMMAND = "command"
    CALLBACK_QUERY = "callback_query"


@dataclass(frozen=True)
class Request(Generic[S, C]):
    """One inbound update routed to a handler.

    `message` is set for message and command requests, `command` for command
    requests and `callback_query` for callback requests.
    """

    state: S
    bot: Bot
    me: User
    kind: RequestKind
    message: Message | None = None
    command: C | None = None
    callback_query: CallbackQuery | None = None

    @classmethod
    def new_message(cls, state: S, bot: Bot, me: User, message: Message) -> Request[S, C]:
        return cls(state, bot, me, RequestKind.NEW_MESSAGE, message=message)

    @classmethod
    def edited_message(cls, state: S, bot: Bot, me: User, message: Message) -> Request[S, C]:
        return cls(state, bot, me, RequestKind.EDITED_MESSAGE, message=message)

    @classmethod
    def new_command(cls, state: S, bot: Bot, me: User, message: Message, command: C) -> Request[S, C]:
        return cls(state, bot, me, RequestKind.COMMAND, message=message, command=command)

    @classmethod
    def from_callback_query(cls, state: S, bot: Bot, me: User, query: CallbackQuery) -> Request[S, C]:
        return cls(state, bot, me, RequestKind.CALLBACK_QUERY, callback_query=query)


@dataclass(frozen=True)
class MessageText:
    """Outgoing text with pre-computed entities."""

    text: str
    entities: tuple[MessageEntity, ...] = ()
    disable_preview: bool = True


class ResponseKind(Enum):
    NOTHING = "nothing"
    REPLY_TO = "reply_to"
    NEW_MSG = "new_msg"
    POPUP = "popup"


@dataclass(frozen=True)
class Response:
    kind: ResponseKind
    text: MessageText | None = None
    buttons: MessageButtons | None = None
    popup: str | None = None

    @classmethod
    def nothing(cls) -> Response:
        return cls(ResponseKind.NOTHING)

    @classmethod
    def reply_to(cls, text: str | MessageText, buttons: MessageButtons | None = None) -> Response:
        return cls(ResponseKind.REPLY_TO, text=_as_text(text), buttons=buttons)

    @classmethod
    def new_msg(cls, text: str | MessageText, buttons: MessageButtons | None = None) -> Response:
        return cls(ResponseKind.NEW_MSG, text=_as_text(text), buttons=buttons)

    @classmethod
    def popup_text(cls, text: str) -> Response:
        return cls(ResponseKind.POPUP, popup=text)


def _as_text(text: str | MessageText) -> MessageText:
    return text if isinstance(text, MessageText) else MessageText(text)


@dataclass
class MessageExecutor:
    """Send one message text, with optional buttons, through a bot."""

    bot: Bot
    text: MessageText
    buttons: MessageButtons | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    async def send_message(self, chat_id: int | str, *, reply_to_message_id: int | None = None) -> Message:
        kwargs: dict[str, Any] = dict(self.extra)
        if self.text.entities:
            kwargs["entities"] = list(self.text.entities)
        if self.buttons is not None:
            kwargs["reply_markup"] = self.buttons.to_markup()
        if reply_to_message_id is not None:
            kwargs["reply_to_message_id"] = reply_to_message_id
        logger.debug("message.executor.send chat_id={} length={}", chat_id, len(self.text.text))
        return await self.bot.send_message(
            chat_id=chat_id,
            text=self.text.text,
            link_preview_options=LinkPreviewOptions(is_disabled=self.text.disable_preview),
            **kwargs,
        )


async def respond(request: Request[Any, Any], response: Response) -> Message | None:
    """Deliver `response` for `request`; returns the sent message, if any."""

    if response.kind is ResponseKind.NOTHING:
        return None

    if response.kind is ResponseKind.POPUP:
        if request.callback_query is None:
            raise ValueError("popup response requires a callback query request")
        await request.callback_query.answer(response.popup or "")
        return None

    source = request.message
    if source is None and request.callback_query is not None:
        source = request.callback_query.message
    if source is None or response.text is None:
        raise ValueError(f"{response.kind.value} response requires a message to answer")

    executor = MessageExecutor(request.bot, response.text, response.buttons)
    if response.kind is ResponseKind.REPLY_TO:
        return await executor.send_message(source.chat.id, reply_to_message_id=source.message_id)
    return await executor.send_message(source.chat.id)
