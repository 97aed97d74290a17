import json

import pytest
from typer.testing import CliRunner

from tgcmd.cli import app, load_args_type
from tgcmd.errors import ConfigurationError

runner = CliRunner()

TARGET = "cmd_args_samples:SampleArgs"


def test_parse_prints_record_as_json() -> None:
    result = runner.invoke(app, ["parse", TARGET, "help +opt_bool opt_string=abc"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"help": True, "opt_bool": True, "opt_string": "abc"}


def test_parse_empty_text_gives_defaults() -> None:
    result = runner.invoke(app, ["parse", TARGET])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"help": False, "opt_bool": None, "opt_string": None}


def test_parse_reports_rejected_token() -> None:
    result = runner.invoke(app, ["parse", TARGET, "opt_bool"])
    assert result.exit_code == 2
    assert "unrecognized or ill-formed argument: opt_bool" in result.output


def test_help_prints_declared_text() -> None:
    result = runner.invoke(app, ["help", TARGET])
    assert result.exit_code == 0
    assert result.stdout.strip() == "help text"


def test_unknown_target_exits_with_error() -> None:
    result = runner.invoke(app, ["help", "cmd_args_samples:Missing"])
    assert result.exit_code == 1
    assert "is not a CmdArgs subclass" in result.output


def test_tokens_lists_classifications() -> None:
    result = runner.invoke(app, ["tokens", "help +a -b k=v"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["bare\thelp", "toggle\ta\ttrue", "toggle\tb\tfalse", "kv\tk\tv"]


def test_tokens_rejects_signed_value() -> None:
    result = runner.invoke(app, ["tokens", "ok +a=1"])
    assert result.exit_code == 2
    assert "not supported yet" in result.output


@pytest.mark.parametrize("target", ["cmd_args_samples", ":SampleArgs", "no_such_module_xyz:Args"])
def test_load_args_type_rejects_bad_targets(target: str) -> None:
    with pytest.raises(ConfigurationError):
        load_args_type(target)


def test_load_args_type_resolves_subclass() -> None:
    args_type = load_args_type(TARGET)
    assert args_type.__name__ == "SampleArgs"
