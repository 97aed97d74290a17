"""Token classification for free-form command arguments."""

from __future__ import annotations

import re

from tgcmd.core.types import Arg, BoolValue, KVValue
from tgcmd.errors import UnsupportedBoolKVOptionError

SIGNS = ("+", "-")
WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]+")


def split_tokens(text: str) -> list[str]:
    """Split argument text on ASCII whitespace, dropping empty runs."""

    return [token for token in WHITESPACE_RE.split(text) if token]


def parse_arg(token: str) -> Arg:
    """Classify one token as bare, toggle or key/value."""

    sign = token[0] if token[:1] in SIGNS else None
    name, eq, value = token.partition("=")

    if sign is not None and eq:
        raise UnsupportedBoolKVOptionError(token)
    if sign is not None:
        return Arg(name=token[1:], value=BoolValue(enabled=sign == "+"))
    if eq:
        return Arg(name=name, value=KVValue(text=value))
    return Arg(name=token)


def parse_args(text: str) -> list[Arg]:
    """Classify every token of `text`; the first ill-formed token aborts."""

    return [parse_arg(token) for token in split_tokens(text)]


def render_args(args: list[Arg]) -> str:
    return " ".join(str(arg) for arg in args)
