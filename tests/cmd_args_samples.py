from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tgcmd import CmdArgs


@dataclass
class SampleArgs(CmdArgs, help="help text"):
    help: bool = False
    opt_bool: bool | None = None
    opt_string: str | None = None


@dataclass
class LegacyOptionalArgs(CmdArgs):
    verbose: bool = False
    notify: Optional[bool] = None
    lang: Optional[str] = None
