"""Shared command argument dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class BoolValue:
    """Toggle payload: `+name` enables, `-name` disables."""

    enabled: bool


@dataclass(frozen=True)
class KVValue:
    """Key/value payload of a `name=value` token."""

    text: str


ArgValue = BoolValue | KVValue


@dataclass(frozen=True)
class Arg:
    """One classified token. `value is None` marks a bare flag."""

    name: str
    value: ArgValue | None = None

    def __str__(self) -> str:
        if isinstance(self.value, BoolValue):
            sign = "+" if self.value.enabled else "-"
            return f"{sign}{self.name}"
        if isinstance(self.value, KVValue):
            return f"{self.name}={self.value.text}"
        return self.name


class FieldKind(Enum):
    BOOL_PRESENCE = "bool_presence"
    OPTIONAL_TOGGLE = "optional_toggle"
    OPTIONAL_KV = "optional_kv"

    def accepts(self, value: ArgValue | None) -> bool:
        if self is FieldKind.BOOL_PRESENCE:
            return value is None
        if self is FieldKind.OPTIONAL_TOGGLE:
            return isinstance(value, BoolValue)
        return isinstance(value, KVValue)


@dataclass(frozen=True)
class FieldSpec:
    """Declared output field of a command-args record."""

    name: str
    kind: FieldKind

    def apply(self, record: object, value: ArgValue | None) -> None:
        if isinstance(value, BoolValue):
            setattr(record, self.name, value.enabled)
        elif isinstance(value, KVValue):
            setattr(record, self.name, value.text)
        else:
            setattr(record, self.name, True)
