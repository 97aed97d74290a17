"""tgcmd - schema-driven command arguments for Telegram bots."""

from .core import Arg, BoolValue, CmdArgs, FieldKind, FieldSpec, KVValue, parse_arg
from .errors import (
    CmdArgError,
    DownloadError,
    UnrecognizedOrIllFormedError,
    UnsupportedBoolKVOptionError,
)

__version__ = "0.1.0"

__all__ = [
    "Arg",
    "BoolValue",
    "CmdArgError",
    "CmdArgs",
    "DownloadError",
    "FieldKind",
    "FieldSpec",
    "KVValue",
    "UnrecognizedOrIllFormedError",
    "UnsupportedBoolKVOptionError",
    "parse_arg",
]
