"""Schema-driven command argument records."""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Callable
from typing import Any, ClassVar, TypeVar, Union, get_args, get_origin, get_type_hints

from loguru import logger

from tgcmd.core.args import parse_args, render_args
from tgcmd.core.types import Arg, ArgValue, BoolValue, FieldKind, FieldSpec, KVValue
from tgcmd.errors import SchemaError, UnrecognizedOrIllFormedError

T = TypeVar("T", bound="CmdArgs")

Acceptor = Callable[[Any, str, ArgValue | None], bool]


class CmdArgs:
    """Base class for command argument records.

    Subclasses are dataclasses whose fields all carry defaults. The field
    annotation selects the accepted token shape:

    - ``bool``: bare ``name`` sets the field to ``True``
    - ``bool | None``: ``+name`` / ``-name`` sets ``True`` / ``False``
    - ``str | None``: ``name=value`` sets the value text

    Help text is passed as a class keyword::

        @dataclass
        class SearchArgs(CmdArgs, help="search [+exact] [lang=xx]"):
            exact: bool | None = None
            lang: str | None = None
    """

    _help: ClassVar[str] = ""

    def __init_subclass__(cls, help: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if help is not None:
            cls._help = help

    @classmethod
    def help_text(cls) -> str:
        return cls._help

    @classmethod
    def schema(cls) -> tuple[FieldSpec, ...]:
        """Return the ordered field schema, built once per class."""

        cached = cls.__dict__.get("_schema_cache")
        if cached is None:
            cached = _build_schema(cls)
            cls._schema_cache = cached
        return cached

    @classmethod
    def accept(cls, record: CmdArgs, name: str, value: ArgValue | None) -> bool:
        """Apply one token to `record`; the first matching field wins."""

        for spec in cls.schema():
            if spec.name == name and spec.kind.accepts(value):
                spec.apply(record, value)
                return True
        return False

    @classmethod
    def parse(cls: type[T], text: str) -> T:
        return cls.parse_inner(text, cls.accept)

    @classmethod
    def parse_inner(cls: type[T], text: str, accept: Acceptor) -> T:
        """Parse `text` into a default-initialised record using `accept`.

        Every token is classified before any is applied, so a grammar error
        anywhere in the input wins over schema mismatches. The first token
        `accept` rejects aborts the parse.
        """

        cls.schema()
        record = cls()
        for arg in parse_args(text):
            if not accept(record, arg.name, arg.value):
                logger.debug("cmd_arg.rejected args={} token={}", cls.__name__, arg)
                raise UnrecognizedOrIllFormedError(str(arg))
        return record

    def to_text(self) -> str:
        """Render the set fields back to canonical argument text."""

        args: list[Arg] = []
        for spec in self.schema():
            value = getattr(self, spec.name)
            if spec.kind is FieldKind.BOOL_PRESENCE:
                if value:
                    args.append(Arg(spec.name))
            elif value is None:
                continue
            elif spec.kind is FieldKind.OPTIONAL_TOGGLE:
                args.append(Arg(spec.name, BoolValue(enabled=bool(value))))
            else:
                args.append(Arg(spec.name, KVValue(text=str(value))))
        return render_args(args)


def _build_schema(cls: type[CmdArgs]) -> tuple[FieldSpec, ...]:
    if not dataclasses.is_dataclass(cls):
        raise SchemaError(f"{cls.__name__} must be a dataclass")
    if cls.__dataclass_params__.frozen:
        raise SchemaError(f"{cls.__name__} must not be a frozen dataclass")

    hints = get_type_hints(cls)
    specs: list[FieldSpec] = []
    for item in dataclasses.fields(cls):
        if hasattr(CmdArgs, item.name):
            raise SchemaError(f"{cls.__name__}.{item.name} shadows a CmdArgs attribute")
        if item.default is dataclasses.MISSING and item.default_factory is dataclasses.MISSING:
            raise SchemaError(f"{cls.__name__}.{item.name} has no default")
        specs.append(FieldSpec(name=item.name, kind=_field_kind(cls, item.name, hints[item.name])))
    return tuple(specs)


def _field_kind(cls: type, name: str, hint: Any) -> FieldKind:
    if hint is bool:
        return FieldKind.BOOL_PRESENCE
    if get_origin(hint) in (Union, types.UnionType):
        members = set(get_args(hint))
        if members == {bool, type(None)}:
            return FieldKind.OPTIONAL_TOGGLE
        if members == {str, type(None)}:
            return FieldKind.OPTIONAL_KV
    raise SchemaError(f"{cls.__name__}.{name}: unsupported annotation {hint!r}")
