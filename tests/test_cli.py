"""Tests for the command line interface."""

import textwrap

import pytest
from click.testing import CliRunner

from zest.cli import main

PASSING = """
    import zest

    @zest.test("adds")
    def adds():
        assert 1 + 1 == 2
"""

FAILING = """
    import zest

    @zest.test("breaks")
    def breaks():
        assert 1 + 1 == 3
"""


@pytest.fixture()
def runner():
    try:
        return CliRunner(mix_stderr=False)
    except TypeError:
        return CliRunner()


def write(path, source):
    path.write_text(textwrap.dedent(source), encoding="utf-8")
    return path


def test_passing_run(runner, tmp_path):
    write(tmp_path / "math_test.py", PASSING)

    result = runner.invoke(main, [str(tmp_path), "--color", "never"])

    assert result.exit_code == 0
    assert "  PASS  math_test: adds (" in result.stderr
    assert "1 passed in " in result.stderr


def test_failing_run(runner, tmp_path):
    write(tmp_path / "math_test.py", FAILING)

    result = runner.invoke(main, [str(tmp_path), "--color", "never", "--no-traces"])

    assert result.exit_code == 1
    assert "  FAIL  math_test: breaks (" in result.stderr
    assert "  error.AssertionError" in result.stderr
    assert "Traceback" not in result.stderr
    assert "0 passed, 1 failed in " in result.stderr


def test_logged_error_fails_run(runner, tmp_path):
    write(tmp_path / "log_test.py", """
        import logging
        import zest

        @zest.test("logs")
        def logs():
            logging.getLogger("svc").error("something broke")
    """)

    result = runner.invoke(main, [str(tmp_path), "--color", "never"])

    assert result.exit_code == 1
    assert "[svc] (error): something broke" in result.stderr
    assert "1 passed in " in result.stderr


def test_collection_error(runner, tmp_path):
    write(tmp_path / "broken_test.py", "raise RuntimeError('import time')\n")

    result = runner.invoke(main, [str(tmp_path)])

    assert result.exit_code == 2
    assert "broken_test.py" in result.stderr


def test_missing_path(runner, tmp_path):
    result = runner.invoke(main, [str(tmp_path / "missing")])

    assert result.exit_code == 2


def test_config_file(runner, tmp_path):
    write(tmp_path / "math_spec.py", PASSING)
    config = tmp_path / "zest.yaml"
    config.write_text("color: never\npattern: ['*_spec.py']\n", encoding="utf-8")

    result = runner.invoke(main, [str(tmp_path), "--config", str(config)])

    assert result.exit_code == 0
    assert "math_spec: adds" in result.stderr


def test_invalid_config(runner, tmp_path):
    config = tmp_path / "zest.yaml"
    config.write_text("color: sometimes\n", encoding="utf-8")

    result = runner.invoke(main, [str(tmp_path), "--config", str(config)])

    assert result.exit_code == 2
    assert "Invalid: 1 errors, 0 warnings in config: color:" in result.stderr


def test_config_warnings_are_printed(runner, tmp_path):
    write(tmp_path / "math_test.py", PASSING)

    result = runner.invoke(main, [str(tmp_path / "math_test.py"), "--color", "never", "-p", "*.txt"])

    assert result.exit_code == 0
    assert "Warning: pattern[0]: Pattern '*.txt' does not match Python files." in result.stderr
