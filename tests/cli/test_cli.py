import json
import logging
from pathlib import Path

import pytest

from ekflow import cli
from ekflow.config import CliConfig


def extract_json_from_stdout(output: str) -> str:
    """Return the JSON payload from stdout that may include log lines."""
    json_start = output.find("{")
    json_end = output.rfind("}")
    if json_start == -1 or json_end == -1:
        return output
    return output[json_start : json_end + 1]


@pytest.fixture
def diamond_file(tmp_path: Path) -> Path:
    path = tmp_path / "diamond.txt"
    path.write_text("4\n0 1 10\n0 2 10\n1 3 10\n2 3 10\n")
    return path


def test_no_arguments_prints_help_and_exits_zero(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: ekflow" in capsys.readouterr().out


def test_solve_prints_paths_and_total(diamond_file: Path, capsys) -> None:
    cli.main(["--quiet", "solve", str(diamond_file)])
    out = capsys.readouterr().out
    assert "Final Augmenting Paths and Flow Calculations:" in out
    assert "Path 1: 0 -> 1 -> 3 with flow = 10" in out
    assert "Path 2: 0 -> 2 -> 3 with flow = 10" in out
    assert "Maximum Flow: 20" in out


def test_solve_with_edges_and_min_cut(diamond_file: Path, capsys) -> None:
    cli.main(["--quiet", "solve", str(diamond_file), "--edges", "--min-cut"])
    out = capsys.readouterr().out
    assert "Edge Flows:" in out
    assert "0->1" in out and "Saturated" in out
    assert "Minimum Cut:" in out
    assert "Source side: {0}" in out
    assert "Cut capacity: 20" in out


def test_solve_json(diamond_file: Path, capsys) -> None:
    cli.main(
        ["--quiet", "solve", str(diamond_file), "--json", "--edges", "--min-cut"]
    )
    payload = json.loads(extract_json_from_stdout(capsys.readouterr().out))
    assert payload["source"] == 0 and payload["sink"] == 3
    assert payload["total_flow"] == 20
    assert payload["iterations"] == 3
    assert payload["paths"] == [
        {"path": [0, 1, 3], "amount": 10},
        {"path": [0, 2, 3], "amount": 10},
    ]
    assert len(payload["edges"]) == 4
    assert payload["min_cut"]["capacity"] == 20


def test_solve_explicit_terminals(diamond_file: Path, capsys) -> None:
    cli.main(["--quiet", "solve", str(diamond_file), "-s", "1", "-t", "3"])
    assert "Maximum Flow: 10" in capsys.readouterr().out


def test_solve_yaml_uses_file_terminals(tmp_path: Path, capsys) -> None:
    path = tmp_path / "net.yaml"
    path.write_text("nodes: 3\nsource: 2\nsink: 0\nedges: [[2, 1, 4], [1, 0, 3]]\n")
    cli.main(["--quiet", "solve", str(path)])
    out = capsys.readouterr().out
    assert "Path 1: 2 -> 1 -> 0 with flow = 3" in out
    assert "Maximum Flow: 3" in out


def test_solve_missing_file_exits_one(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--quiet", "solve", str(tmp_path / "missing.txt")])
    assert exc_info.value.code == 1
    assert "ERROR: Network file not found" in capsys.readouterr().out


def test_solve_invalid_file_exits_one(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("3\n0 5 1\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--quiet", "solve", str(path)])
    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert "ERROR: Failed to solve network: ValueError" in out
    assert "out of range" in out


def test_solve_bad_terminal_exits_one(diamond_file: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--quiet", "solve", str(diamond_file), "--sink", "9"])
    assert exc_info.value.code == 1
    assert "sink node 9 is out of range" in capsys.readouterr().out


def test_verbose_logs_paths(diamond_file: Path, caplog, capsys) -> None:
    with caplog.at_level(logging.DEBUG, logger="ekflow"):
        cli.main(["--verbose", "solve", str(diamond_file)])
    messages = [r.message for r in caplog.records]
    assert "Debug logging enabled" in messages
    assert "Path 2: 0 -> 2 -> 3 with flow = 10" in messages


def test_quiet_suppresses_info(diamond_file: Path, caplog, capsys) -> None:
    cli.main(["--quiet", "solve", str(diamond_file)])
    assert not any(
        r.levelno == logging.INFO and r.name.startswith("ekflow")
        for r in caplog.records
    )


def _feed(*answers: str):
    it = iter(answers)

    def fake_input(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return fake_input


def test_interactive_loop_solves_until_exit(tmp_path: Path, capsys) -> None:
    (tmp_path / "chain_3.txt").write_text("3\n0 1 5\n1 2 3\n")
    (tmp_path / "diamond_4.txt").write_text("4\n0 1 10\n0 2 10\n1 3 10\n2 3 10\n")
    config = CliConfig(benchmarks_dir=str(tmp_path))

    cli._run_interactive(config, _feed("chain_3", "", "diamond_4.txt", "0", "never"))

    out = capsys.readouterr().out
    assert "Network Flow Algorithm" in out
    assert "Maximum Flow: 3" in out
    assert "Maximum Flow: 20" in out
    assert out.rstrip().endswith("*" * 39)
    assert "Program terminated successfully!" in out


def test_interactive_loop_reports_errors_and_continues(tmp_path: Path, capsys) -> None:
    (tmp_path / "bad.txt").write_text("2\n0 1\n")
    (tmp_path / "ok.txt").write_text("2\n0 1 4\n")
    config = CliConfig(benchmarks_dir=str(tmp_path))

    cli._run_interactive(config, _feed("missing", "bad", "ok"))

    out = capsys.readouterr().out
    assert "Error reading the file" in out
    assert "An error occurred: ValueError" in out
    assert "Maximum Flow: 4" in out
    assert "Program terminated successfully!" in out


def test_interactive_command_uses_benchmarks_dir(
    tmp_path: Path, capsys, monkeypatch
) -> None:
    (tmp_path / "one.txt").write_text("2\n0 1 6\n")
    captured = {}

    def fake_run(config, input_func=None):
        captured["dir"] = config.benchmarks_dir

    monkeypatch.setattr(cli, "_run_interactive", fake_run)
    cli.main(["--quiet", "interactive", "--benchmarks", str(tmp_path)])
    assert captured["dir"] == str(tmp_path)


def test_format_duration() -> None:
    assert cli._format_duration(0.123) == "123.0 ms"
    assert cli._format_duration(1.234) == "1.23 s"
    assert cli._format_duration(75.2) == "1m 15.2s"
