"""Tests for report() output and result rendering."""

import re

import pytest

from perfmeasures import BenchmarkResult, BenchmarkRunner, InvalidConfiguration, report


class TestReport:
    """report() prints one line in the documented format."""

    def test_report_line_with_constant_timing(self, capsys, constant_computation, step_clock):
        """Constant value and constant timing give the literal line."""
        BenchmarkRunner(clock=step_clock).report(constant_computation, 5)
        out = capsys.readouterr().out
        assert out == "function computes result: 42 in 1000.0 ms on average with standard deviation 0.0\n"

    def test_report_returns_none(self, capsys, constant_computation, step_clock):
        """report() has no return value."""
        assert BenchmarkRunner(clock=step_clock).report(constant_computation) is None
        capsys.readouterr()

    def test_module_level_report_format(self, capsys):
        """Module-level report() prints a single matching line."""
        report(lambda: "done", 3)
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert re.fullmatch(
            r"function computes result: done in \S+ ms on average with standard deviation \S+",
            lines[0],
        )

    def test_report_rejects_single_repetition(self, capsys, counter):
        """report() shares measure()'s validation and prints nothing."""
        with pytest.raises(InvalidConfiguration):
            report(counter, 1)
        assert counter.calls == 0
        assert capsys.readouterr().out == ""


class TestBenchmarkResult:
    """BenchmarkResult rendering and dict conversion."""

    def test_render_and_str(self):
        result = BenchmarkResult(value=[1, 2], mean_ms=1.5, stddev_ms=0.25)
        expected = "function computes result: [1, 2] in 1.5 ms on average with standard deviation 0.25"
        assert result.render() == expected
        assert str(result) == expected

    def test_is_immutable(self):
        result = BenchmarkResult(value=1, mean_ms=1.0, stddev_ms=0.0)
        with pytest.raises(AttributeError):
            result.mean_ms = 2.0

    def test_equality_ignores_timings(self):
        a = BenchmarkResult(value=1, mean_ms=2.0, stddev_ms=1.0, timings_ms=(1.0, 3.0))
        b = BenchmarkResult(value=1, mean_ms=2.0, stddev_ms=1.0)
        assert a == b

    def test_to_dict_from_dict(self):
        result = BenchmarkResult(value="x", mean_ms=2.0, stddev_ms=1.0, timings_ms=(1.0, 3.0), warmup_runs=5)
        payload = result.to_dict()
        assert payload["repetitions"] == 2
        restored = BenchmarkResult.from_dict(payload)
        assert restored == result
        assert restored.timings_ms == (1.0, 3.0)
        assert restored.warmup_runs == 5

    def test_from_dict_missing_field(self):
        with pytest.raises(ValueError, match="Missing required field: stddev_ms"):
            BenchmarkResult.from_dict({"value": 1, "mean_ms": 1.0})

    def test_summary(self):
        result = BenchmarkResult(value=None, mean_ms=2.0, stddev_ms=1.0, timings_ms=(1.0, 3.0))
        summary = result.summary()
        assert summary["min"] == 1.0
        assert summary["max"] == 3.0
        assert summary["num_samples"] == 2
