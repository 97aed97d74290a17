"""Command argument parsing core."""

from .args import parse_arg, parse_args, split_tokens
from .schema import CmdArgs
from .types import Arg, ArgValue, BoolValue, FieldKind, FieldSpec, KVValue

__all__ = [
    "Arg",
    "ArgValue",
    "BoolValue",
    "CmdArgs",
    "FieldKind",
    "FieldSpec",
    "KVValue",
    "parse_arg",
    "parse_args",
    "split_tokens",
]
