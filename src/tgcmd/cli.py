"""tgcmd command line interface."""

from __future__ import annotations

import dataclasses
import importlib
import json

import typer

from tgcmd.core.args import parse_arg, split_tokens
from tgcmd.core.schema import CmdArgs
from tgcmd.core.types import BoolValue, KVValue
from tgcmd.errors import CmdArgError, ConfigurationError
from tgcmd.logging_utils import configure_logging

app = typer.Typer(name="tgcmd", help="Parse bot command arguments against a declared schema.", add_completion=False)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    configure_logging(profile="cli", level="DEBUG" if verbose else None)


def load_args_type(target: str) -> type[CmdArgs]:
    """Resolve `module:ClassName` to a CmdArgs subclass."""

    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(f"target must look like 'module:ClassName', got {target!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"cannot import {module_name!r}: {exc}") from exc
    args_type = getattr(module, attr, None)
    if not isinstance(args_type, type) or not issubclass(args_type, CmdArgs):
        raise ConfigurationError(f"{target} is not a CmdArgs subclass")
    return args_type


def _resolve(target: str) -> type[CmdArgs]:
    try:
        return load_args_type(target)
    except ConfigurationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


@app.command()
def parse(
    target: str = typer.Argument(..., help="CmdArgs subclass as module:ClassName"),
    text: str = typer.Argument("", help="Argument text, e.g. '+opt key=value'"),
) -> None:
    """Parse TEXT with TARGET and print the record as JSON."""

    args_type = _resolve(target)
    try:
        record = args_type.parse(text)
    except CmdArgError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(2) from exc
    typer.echo(json.dumps(dataclasses.asdict(record), ensure_ascii=False))


@app.command("help")
def help_(target: str = typer.Argument(..., help="CmdArgs subclass as module:ClassName")) -> None:
    """Print the help text declared by TARGET."""

    typer.echo(_resolve(target).help_text())


@app.command()
def tokens(text: str = typer.Argument(..., help="Argument text")) -> None:
    """Show how each token of TEXT is classified."""

    for token in split_tokens(text):
        try:
            arg = parse_arg(token)
        except CmdArgError as exc:
            typer.echo(f"{token}: {exc}", err=True)
            raise typer.Exit(2) from exc
        if isinstance(arg.value, BoolValue):
            typer.echo(f"toggle\t{arg.name}\t{str(arg.value.enabled).lower()}")
        elif isinstance(arg.value, KVValue):
            typer.echo(f"kv\t{arg.name}\t{arg.value.text}")
        else:
            typer.echo(f"bare\t{arg.name}")


if __name__ == "__main__":
    app()
