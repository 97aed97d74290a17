"""Application-level exception types for tgcmd."""

from __future__ import annotations


class TgcmdError(Exception):
    """Base exception for tgcmd."""


class ConfigurationError(TgcmdError):
    """Raised when settings or a CLI target cannot be resolved."""


class SchemaError(ConfigurationError):
    """Raised when a command-args record declares an unsupported field."""


class NoSenderChatError(TgcmdError):
    """Raised when a message carries no sender chat."""

    def __init__(self) -> None:
        super().__init__("No sender chat")


class CmdArgError(TgcmdError):
    """Base exception for command argument parsing."""


class UnrecognizedOrIllFormedError(CmdArgError):
    """Raised when a token matches no declared field."""

    def __init__(self, token: str) -> None:
        super().__init__(f"unrecognized or ill-formed argument: {token}")
        self.token = token


class UnsupportedBoolKVOptionError(CmdArgError):
    """Raised for `+name=value` / `-name=value` tokens."""

    def __init__(self, token: str = "") -> None:
        super().__init__("+/-option with =value is not supported yet")
        self.token = token


class DownloadError(CmdArgError):
    """Passthrough for a failed file retrieval reported alongside argument errors."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause))
        self.cause = cause
