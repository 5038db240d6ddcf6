"""Tests for the command-line entry point and the benchmark runner."""

import io
import json

import matplotlib

matplotlib.use("Agg")

import pytest

from crucible_lab import Grid
from crucible_lab.benchmarks.run_all import random_grid, run_one
from crucible_lab.benchmarks.run_all import main as bench_main
from crucible_lab.cli import main
from crucible_lab.core.metrics import MeasuredRun

from conftest import EXAMPLE, LONG_RUN


def _run(monkeypatch, text: str, argv):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main(argv)


class TestMain:
    @pytest.mark.parametrize("part,expected", [("1", 102), ("2", 94), ("A", 102), ("b", 94)])
    def test_parts(self, monkeypatch, capsys, part: str, expected: int) -> None:
        assert _run(monkeypatch, EXAMPLE, [part]) == 0
        assert capsys.readouterr().out == f"{expected}\n"

    def test_explicit_runs(self, monkeypatch, capsys) -> None:
        assert _run(monkeypatch, LONG_RUN, ["--min-run", "4", "--max-run", "10"]) == 0
        assert capsys.readouterr().out == "71\n"

    def test_heap_strategy(self, monkeypatch, capsys) -> None:
        assert _run(monkeypatch, EXAMPLE, ["2", "--strategy", "heap"]) == 0
        assert capsys.readouterr().out == "94\n"

    def test_input_file(self, tmp_path, capsys) -> None:
        path = tmp_path / "grid.txt"
        path.write_text(EXAMPLE)
        assert main(["1", "--input", str(path)]) == 0
        assert capsys.readouterr().out == "102\n"

    def test_malformed_grid(self, monkeypatch, capsys) -> None:
        assert _run(monkeypatch, "12\n3x\n", ["1"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "MalformedGrid" in captured.err

    def test_unreachable(self, monkeypatch, capsys) -> None:
        assert _run(monkeypatch, "12\n34\n", ["2"]) == 1
        assert "UnreachableDestination" in capsys.readouterr().err

    def test_missing_file(self, capsys) -> None:
        assert main(["1", "--input", "/nonexistent/grid.txt"]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_non_utf8_input_file(self, tmp_path, capsys) -> None:
        path = tmp_path / "grid.txt"
        path.write_bytes(b"12\n3\xff\n")
        assert main(["1", "--input", str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "MalformedGrid" in captured.err
        assert "Traceback" not in captured.err

    def test_bad_default_strategy_is_a_usage_error(self, monkeypatch) -> None:
        monkeypatch.setattr("crucible_lab.cli.DEFAULT_STRATEGY", "lifo")
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, EXAMPLE, ["1"])
        assert exc.value.code == 2

    def test_help_survives_bad_default_strategy(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("crucible_lab.cli.DEFAULT_STRATEGY", "lifo")
        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0
        assert "--strategy" in capsys.readouterr().out

    def test_usage_error_without_part(self, monkeypatch) -> None:
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, EXAMPLE, [])
        assert exc.value.code == 2

    def test_unknown_part(self, monkeypatch) -> None:
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, EXAMPLE, ["3"])
        assert exc.value.code == 2

    def test_show_path(self, monkeypatch, capsys) -> None:
        assert _run(monkeypatch, "12\n34\n", ["1", "--show-path"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "6\n"
        assert "1>\n3v" in captured.err

    def test_plot(self, monkeypatch, capsys, tmp_path) -> None:
        out = tmp_path / "route.png"
        assert _run(monkeypatch, EXAMPLE, ["1", "--plot", str(out)]) == 0
        assert out.exists() and out.stat().st_size > 0


class TestBenchmarks:
    def test_strategies_agree(self) -> None:
        grid = random_grid(12, 3)
        for variant in ("A", "B"):
            fifo = run_one(grid, "fifo", variant, trace_memory=False)
            heap = run_one(grid, "heap", variant, trace_memory=False)
            assert fifo.success and heap.success
            assert fifo.cost == heap.cost

    def test_unreachable_is_reported_not_raised(self) -> None:
        r = run_one(Grid.from_text("12\n34"), "fifo", "B", trace_memory=False)
        assert not r.success
        assert "UnreachableDestination" in r.error

    def test_main_writes_json_and_plot(self, tmp_path, capsys) -> None:
        out = tmp_path / "results.json"
        plot = tmp_path / "bars.png"
        assert bench_main(["--size", "8", "--no-trace", "--out", str(out), "--plot", str(plot)]) == 0
        data = json.loads(out.read_text())
        assert len(data["results"]) == 4
        assert len({r["cost"] for r in data["results"] if r["variant"] == "A"}) == 1
        assert plot.exists()

    def test_main_reports_missing_input(self, capsys) -> None:
        assert bench_main(["--input", "/nonexistent/grid.txt", "--no-trace"]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_main_reports_malformed_input(self, tmp_path, capsys) -> None:
        path = tmp_path / "grid.txt"
        path.write_text("12\n3x\n")
        assert bench_main(["--input", str(path), "--no-trace"]) == 1
        captured = capsys.readouterr()
        assert "MalformedGrid" in captured.err
        assert "Traceback" not in captured.err

    def test_measured_run_records_time_and_memory(self) -> None:
        with MeasuredRun() as meter:
            blob = [0] * 100_000
        assert len(blob) == 100_000
        assert meter.elapsed > 0
        assert meter.peak_kb > 0

    def test_measured_run_without_tracing(self) -> None:
        with MeasuredRun(trace_memory=False) as meter:
            pass
        assert meter.peak_kb == 0
        assert meter.elapsed >= 0
