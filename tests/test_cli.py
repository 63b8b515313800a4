from __future__ import annotations

import json
from pathlib import Path

import pytest

from liteargs import ArgumentType
from liteargs.cli import main, parse_args, split_argv


def test_split_argv_at_first_separator() -> None:
    assert split_argv(["--json", "--", "-t", "--", "x"]) == (["--json"], ["-t", "--", "x"])
    assert split_argv(["--json"]) == (["--json"], [])


def test_parse_args_keeps_declaration_order() -> None:
    args = parse_args(["--int", "count:c:1", "--string", "file:f:out.txt", "--", "-c", "2"])
    assert [p.id for p in args.parameters] == ["count", "file"]
    assert [p.type for p in args.parameters] == [ArgumentType.INT, ArgumentType.STRING]


def test_string_default_may_contain_colons() -> None:
    args = parse_args(["--string", "url:u:http://localhost:8080"])
    assert args.parameters[0].default_value == "http://localhost:8080"


def test_main_prints_resolved_values(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        ["--string", "file:f:out.txt", "--int", "count:c:1", "--", "--file=in.txt", "-c", "3", "0"]
    )
    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["file=in.txt", "count=30"]


def test_main_json_output_uses_defaults(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--json", "--string", "file:f:out.txt", "--int", "count:c:1", "--", "--count=abc"])
    assert code == 0
    assert json.loads(capsys.readouterr().out) == {"file": "out.txt", "count": 1}


def test_main_without_declarations(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "No parameters declared." in capsys.readouterr().out


def test_config_file_tokens_and_flag_override(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps({"prefix": "/", "value_separator": ":"}), encoding="utf-8")
    main(["--json", "--config", str(path), "--string", "name:n:?", "--", "/name:Ada"])
    assert json.loads(capsys.readouterr().out) == {"name": "Ada"}

    main(
        ["--json", "--config", str(path), "--separator=+", "--string", "name:n:?", "--", "/name+Bob"]
    )
    assert json.loads(capsys.readouterr().out) == {"name": "Bob"}


@pytest.mark.parametrize(
    "declaration",
    [
        ["--string", "file:f"],
        ["--string", ":f:x"],
        ["--int", "count:c:many"],
    ],
)
def test_malformed_declaration_is_usage_error(declaration: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(declaration)
    assert excinfo.value.code == 2


def test_unreadable_config_is_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path / "missing.json")])
    assert excinfo.value.code == 2


def test_module_entrypoint(capsys: pytest.CaptureFixture[str]) -> None:
    from liteargs.__main__ import main as module_main

    assert module_main(["--string", "name:n:?", "--", "-n", "Ada", "Lovelace"]) == 0
    assert capsys.readouterr().out.strip() == "name=Ada Lovelace"


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    from liteargs import __version__

    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == f"liteargs {__version__}"
