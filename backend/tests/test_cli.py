"""Tests for the stackmodel command."""
import io
import json

from stackmodel.cli import main

TRACE = (
    "TypeError: bad\n"
    "    at render (/srv/view.js:42:10)\n"
    "    at eval (eval at compile (eval at load (/srv/a.js:1:1), <anonymous>:2:2), <anonymous>:3:3)\n"
)


def test_parses_file(tmp_path, capsys):
    trace_file = tmp_path / "trace.txt"
    trace_file.write_text(TRACE, encoding="utf-8")

    assert main([str(trace_file)]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["kind"] == "TypeError"
    assert out["message"] == "bad"
    assert out["frames"][0]["name"] == "render"
    assert out["frames"][1]["evaluator"]["evaluator"]["name"] == "load"


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(TRACE))

    assert main(["--indent", "0"]) == 0

    out = capsys.readouterr().out
    assert "\n" not in out.strip()
    assert len(json.loads(out)["frames"]) == 2


def test_unparseable_trace(tmp_path, capsys):
    trace_file = tmp_path / "trace.txt"
    trace_file.write_text("Error: x\nthis is not a frame\n", encoding="utf-8")

    assert main([str(trace_file)]) == 1
    assert "could not be parsed" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_settings_file_limits_eval_depth(tmp_path, capsys):
    settings_file = tmp_path / "stackmodel.settings.yaml"
    settings_file.write_text("parser:\n  max_eval_depth: 1\n", encoding="utf-8")
    trace_file = tmp_path / "trace.txt"
    trace_file.write_text(TRACE, encoding="utf-8")

    assert main([str(trace_file), "--settings", str(settings_file)]) == 0

    frame = json.loads(capsys.readouterr().out)["frames"][1]
    assert frame["name"] == "eval"
    assert frame["evaluator"] is None
