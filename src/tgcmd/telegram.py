"""Bind command argument records to python-telegram-bot command handlers."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

from loguru import logger
from telegram import Update
from telegram.ext import CommandHandler, ContextTypes

from tgcmd.config import get_settings
from tgcmd.core.schema import CmdArgs
from tgcmd.errors import CmdArgError

A = TypeVar("A", bound=CmdArgs)

ArgsCallback = Callable[[Update, ContextTypes.DEFAULT_TYPE, A], Awaitable[None]]


def format_args_error(error: CmdArgError, args_type: type[CmdArgs], *, with_help: bool) -> str:
    text = str(error)
    help_text = args_type.help_text()
    if with_help and help_text:
        text = f"{text}\n\n{help_text}"
    return text


def args_command_handler(
    command: str,
    args_type: type[A],
    callback: ArgsCallback[A],
    *,
    reply_help_on_error: bool | None = None,
) -> CommandHandler:
    """Build a handler for `/command args...` that parses args into `args_type`.

    Argument errors are answered in the chat and never reach `callback`.
    """

    if reply_help_on_error is None:
        reply_help_on_error = get_settings().reply_help_on_error

    async def _handle(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if update.message is None:
            return
        text = " ".join(context.args or ())
        try:
            args = args_type.parse(text)
        except CmdArgError as exc:
            logger.info("telegram.command.rejected command={} error={}", command, exc)
            await update.message.reply_text(format_args_error(exc, args_type, with_help=reply_help_on_error))
            return
        logger.debug("telegram.command.accepted command={} args={}", command, args)
        await callback(update, context, args)

    return CommandHandler(command, _handle)
