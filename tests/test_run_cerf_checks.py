"""Tests for the scripts/run_cerf_checks.py report driver."""

import importlib.util
import json
from pathlib import Path

import pytest

from cerf_lab.faddeeva import CheckResult

SCRIPT = Path(__file__).parent.parent / "scripts" / "run_cerf_checks.py"


@pytest.fixture
def script():
    """Load the driver as a module without running it."""
    spec = importlib.util.spec_from_file_location("run_cerf_checks", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestReportDriver:
    """Exit status, summary line and JSON report."""

    def test_success_writes_report(self, script, temp_dir, capsys):
        """A passing suite exits 0 and saves the JSON report."""
        path = temp_dir / "r.json"
        status = script.main(
            ["--suite", "erfi", "--sweep-points", "0", "--json", str(path)]
        )
        assert status == 0

        out = capsys.readouterr().out
        assert "OVERALL SUCCESS" in out
        assert "Saved:" in out

        with open(path) as f:
            data = json.load(f)
        assert list(data["suites"]) == ["erfi"]
        assert [r["name"] for r in data["suites"]["erfi"]] == ["erfi(z)", "erfi(inf)"]
        assert data["overall"]["passed"] is True
        assert data["overall"]["failed"] == 0

    def test_failure_exits_nonzero(self, script, monkeypatch, capsys):
        """Any failing check makes main() return 1 and report the count."""
        def failing_suite(name, n_sweep):
            return [CheckResult(f"{name}(z)", 2, 1, 0.5, (f"{name}(1+0i) off",))]

        monkeypatch.setattr(script, "run_suite", failing_suite)
        status = script.main(["--suite", "erf", "dawson", "--sweep-points", "0"])
        assert status == 1

        out = capsys.readouterr().out
        assert "ERR erf(1+0i) off" in out
        assert "ERR dawson(1+0i) off" in out
        assert "IN TOTAL, FAILURE IN 2 TESTS" in out
        assert "OVERALL SUCCESS" not in out

    def test_all_expands_to_every_suite(self, script, monkeypatch):
        """--suite all runs every registered function in report order."""
        seen = []

        def recording_suite(name, n_sweep):
            seen.append((name, n_sweep))
            return [CheckResult(f"{name}(z)", 1, 0, 0.0)]

        monkeypatch.setattr(script, "run_suite", recording_suite)
        assert script.main(["--sweep-points", "7"]) == 0
        assert [name for name, _ in seen] == list(script.SUITES)
        assert all(n == 7 for _, n in seen)

    def test_unknown_suite_rejected(self, script):
        """argparse refuses names outside the registry."""
        with pytest.raises(SystemExit):
            script.main(["--suite", "lambert"])
