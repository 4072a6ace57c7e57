"""CLI tests for resolve and languages subcommands."""

import json
import sys

import pytest

from coderunner import cli


def _run_cli(args, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["coderunner"] + args)
    return cli.main()


def test_resolve_json(monkeypatch, capsys):
    _run_cli(["resolve", "--language", "c", "main.c", "b.c", "a.c", "notes.txt"], monkeypatch)
    out = capsys.readouterr().out
    assert out == '{"build_commands":["clang -o a.out -lm main.c b.c a.c"],"run_command":"./a.out"}\n'


def test_resolve_json_is_parseable(monkeypatch, capsys):
    _run_cli(["resolve", "--language", "erlang", "main.erl", "x.erl", "y.erl"], monkeypatch)
    data = json.loads(capsys.readouterr().out)
    assert data == {
        "build_commands": ["erlc x.erl", "erlc y.erl"],
        "run_command": "escript main.erl",
    }


def test_resolve_text(monkeypatch, capsys):
    _run_cli(["resolve", "--language", "csharp", "--format", "text", "main.cs", "Util.cs"], monkeypatch)
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "[OK] Resolved C# (2 files)",
        "build: mcs -out:a.exe main.cs Util.cs",
        "run: mono a.exe",
    ]


def test_resolve_text_quiet(monkeypatch, capsys):
    _run_cli(["resolve", "--quiet", "--language", "python", "--format", "text", "main.py"], monkeypatch)
    out = capsys.readouterr().out
    assert out.splitlines() == ["run: python main.py"]


def test_resolve_unknown_language_fails(monkeypatch, capsys):
    with pytest.raises(SystemExit) as excinfo:
        _run_cli(["resolve", "--language", "cobra", "main.cob"], monkeypatch)
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: Unknown language 'cobra'" in captured.err


def test_resolve_requires_files(monkeypatch, capsys):
    with pytest.raises(SystemExit) as excinfo:
        _run_cli(["resolve", "--language", "c"], monkeypatch)
    assert excinfo.value.code == 2


def test_languages(monkeypatch, capsys):
    _run_cli(["languages"], monkeypatch)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 15
    assert "cpp\tC++" in lines
    assert lines[0] == "assembly\tAssembly"


def test_languages_quiet(monkeypatch, capsys):
    _run_cli(["languages", "--quiet"], monkeypatch)
    lines = capsys.readouterr().out.splitlines()
    assert lines == sorted(lines)
    assert "coffee_script" in lines


def test_no_command_prints_help(monkeypatch, capsys):
    with pytest.raises(SystemExit) as excinfo:
        _run_cli([], monkeypatch)
    assert excinfo.value.code == 1
    assert "usage: coderunner" in capsys.readouterr().out


def test_version(monkeypatch, capsys):
    with pytest.raises(SystemExit) as excinfo:
        _run_cli(["--version"], monkeypatch)
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("coderunner ")
