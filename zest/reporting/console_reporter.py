"""Console reporter for zest runs.

Prints one line per test as results arrive and a summary line at the end::

      PASS  credentials: static credentials (9.1µs)
      FAIL  imds: parseJsonField (410.0µs)
      error.TestExpectedEqual
      SKIP  network: requires interface

    84 passed, 1 failed, 1 skipped in 6.0ms
"""

import os
import sys
import traceback
from dataclasses import dataclass
from typing import Optional, TextIO

from ..discovery.naming import decompose
from ..runner.result_collector import HookFailure, Outcome, RunCounters, TestResult


@dataclass(frozen=True)
class Ansi:
    """Colour codes; every field is empty when colour is off."""
    pass_: str = ""
    fail: str = ""
    skip: str = ""
    dim: str = ""
    reset: str = ""


ANSI_ON = Ansi(
    pass_="\x1b[32m",
    fail="\x1b[31m",
    skip="\x1b[33m",
    dim="\x1b[2m",
    reset="\x1b[0m",
)
ANSI_OFF = Ansi()


def supports_ansi(stream: TextIO) -> bool:
    """Whether ``stream`` is a terminal that understands ANSI escapes."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def resolve_ansi(stream: TextIO, color: str = "auto") -> Ansi:
    """Pick the palette for a colour mode (auto, always or never)."""
    if color == "always":
        return ANSI_ON
    if color == "never":
        return ANSI_OFF
    return ANSI_ON if supports_ansi(stream) else ANSI_OFF


def format_duration(ns: int) -> str:
    """Format nanoseconds with a unit chosen by magnitude, one decimal place."""
    if ns < 1_000:
        return f"{float(ns):.1f}ns"
    if ns < 1_000_000:
        return f"{ns / 1_000:.1f}µs"
    if ns < 1_000_000_000:
        return f"{ns / 1_000_000:.1f}ms"
    return f"{ns / 1_000_000_000:.1f}s"


def render_name(name: str, a: Ansi) -> str:
    dn = decompose(name)
    if dn.module:
        return f"{a.dim}{dn.module}{a.reset}: {dn.name}"
    return dn.name


def render_summary(counters: RunCounters, total_ns: int, a: Ansi) -> str:
    """Summary line for the end of a run."""
    if counters.failed == 0 and counters.leaked == 0:
        line = f"{a.pass_}{counters.passed} passed{a.reset}"
    else:
        line = f"{counters.passed} passed"
        if counters.failed > 0:
            line += f", {a.fail}{counters.failed} failed{a.reset}"
    if counters.skipped > 0:
        line += f", {counters.skipped} skipped"
    if counters.leaked > 0:
        line += f", {a.fail}{counters.leaked} leaked{a.reset}"
    return line + f" {a.dim}in {format_duration(total_ns)}{a.reset}"


class ConsoleReporter:
    """Writes the human-readable report to a stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        color: str = "auto",
        show_traces: bool = True,
    ):
        """Initialize console reporter.

        Args:
            stream: Output stream. Defaults to stderr.
            color: Colour mode: auto, always or never.
            show_traces: Print tracebacks for failing tests.
        """
        self.stream = stream or sys.stderr
        self.ansi = resolve_ansi(self.stream, color)
        self.show_traces = show_traces

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream)

    def test_finished(self, result: TestResult) -> None:
        a = self.ansi
        name = render_name(result.name, a)

        if result.outcome is Outcome.PASS:
            self._print(f"{a.pass_}  PASS{a.reset}  {name}{self._duration(result)}")

        elif result.outcome is Outcome.FAIL:
            self._print(f"{a.fail}  FAIL{a.reset}  {name}{self._duration(result)}")
            if result.error is not None:
                self._print(f"  {a.fail}error.{type(result.error).__name__}{a.reset}")
                if self.show_traces:
                    self.stream.write("".join(traceback.format_exception(result.error)))

        else:
            line = f"{a.skip}  SKIP{a.reset}  {name}"
            if result.reason:
                line += f" {a.dim}({result.reason}){a.reset}"
            self._print(line)

        if result.has_leaks:
            count = len(result.leaked)
            noun = "allocation" if count == 1 else "allocations"
            self._print(f"  {a.fail}leaked {count} {noun}{a.reset}")

    def hook_failed(self, failure: HookFailure) -> None:
        a = self.ansi
        self._print(
            f"{a.fail}  HOOK FAIL{a.reset}  {failure.module}: {failure.kind.label} "
            f"{a.dim}(error.{type(failure.error).__name__}){a.reset}"
        )

    def summary(self, counters: RunCounters, total_ns: int) -> None:
        self._print()
        self._print(render_summary(counters, total_ns, self.ansi))

    def _duration(self, result: TestResult) -> str:
        if result.duration_ns is None:
            return ""
        a = self.ansi
        return f" {a.dim}({format_duration(result.duration_ns)}){a.reset}"
