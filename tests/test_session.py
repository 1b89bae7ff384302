"""End-to-end tests running collected suites."""

from pathlib import Path

import zest
from zest.config import RunConfig
from zest.discovery.collector import collect
from zest.discovery.registry import TestCase

DEMO = Path(__file__).resolve().parents[1] / "demo" / "sample_suite.py"


def test_demo_suite(stream, clock):
    cases = collect([DEMO])

    result = zest.run(cases, config=RunConfig(color="never", show_traces=False), stream=stream, clock=clock)

    assert stream.getvalue() == (
        "  PASS  sample_suite: addition (1.0µs)\n"
        "  PASS  sample_suite: string equality (1.0µs)\n"
        "  FAIL  sample_suite: deliberate failure (1.0µs)\n"
        "  error.AssertionError\n"
        "  SKIP  sample_suite: skip example\n"
        "  PASS  sample_suite: slice contains (1.0µs)\n"
        "\n"
        "3 passed, 1 failed, 1 skipped in 11.0µs\n"
    )
    assert result.hook_failures == []
    assert result.exit_code == 1


def test_clean_run_exits_zero(stream, clock):
    cases = [TestCase(name="m.test.ok", func=lambda: None)]

    result = zest.run(cases, config=RunConfig(color="never"), stream=stream, clock=clock)

    assert result.exit_code == 0
    assert result.counters.passed == 1
    assert result.log_errors == 0
    assert stream.getvalue().endswith("\n1 passed in 3.0µs\n")


def test_before_all_failure_report(stream, clock):
    def broken_setup():
        raise ConnectionError()

    cases = [
        TestCase(name="db.test.zest.beforeAll", func=broken_setup),
        TestCase(name="db.test.query", func=lambda: None),
    ]

    result = zest.run(cases, config=RunConfig(color="never"), stream=stream, clock=clock)

    assert stream.getvalue().splitlines()[:2] == [
        "  HOOK FAIL  db: zest.beforeAll (error.ConnectionError)",
        "  SKIP  db: query (module setup failed)",
    ]
    assert result.exit_code == 0


def test_system_exit_still_prints_summary(stream, clock):
    def fails():
        assert 1 == 2

    def quits():
        raise SystemExit(0)

    cases = [
        TestCase(name="m.test.bad", func=fails),
        TestCase(name="m.test.quits", func=quits),
    ]

    result = zest.run(cases, config=RunConfig(color="never", show_traces=False), stream=stream, clock=clock)

    assert "  error.SystemExit\n" in stream.getvalue()
    assert "0 passed, 2 failed in " in stream.getvalue()
    assert result.exit_code == 1
