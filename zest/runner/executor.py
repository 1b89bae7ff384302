"""Test executor - runs a single test or hook.

Regular tests run inside an isolated arena with log capture active. Every
exception a test or hook raises is caught here and turned into a result.
"""

import time
import unittest
from typing import Callable, Optional

from ..discovery.registry import TestCase
from ..errors import SkipTest
from .arena import ArenaReport, isolated_arena
from .context import RunContext, capture_logs
from .result_collector import Outcome, TestResult

SKIP_SIGNALS = (SkipTest, unittest.SkipTest)

Clock = Callable[[], int]


class TestExecutor:
    """Executes test bodies and hooks."""

    __test__ = False

    def __init__(self, context: Optional[RunContext] = None, clock: Clock = time.perf_counter_ns):
        """Initialize test executor.

        Args:
            context: Run context receiving log counts.
            clock: Monotonic clock returning nanoseconds.
        """
        self.context = context or RunContext()
        self.clock = clock

    def run_test(self, case: TestCase) -> TestResult:
        """Run a regular test and classify its outcome."""
        arena_report = ArenaReport()
        error: Optional[BaseException] = None

        with isolated_arena(arena_report) as arena, capture_logs(self.context):
            self.context.reset_test_log_errors()
            start = self.clock()
            try:
                case.invoke(arena)
                outcome = Outcome.PASS
            except SKIP_SIGNALS:
                outcome = Outcome.SKIP
            except (Exception, SystemExit) as e:
                outcome = Outcome.FAIL
                error = e
            duration_ns = self.clock() - start

        return TestResult(
            name=case.name,
            outcome=outcome,
            duration_ns=duration_ns,
            error=error,
            leaked=arena_report.leaked,
        )

    def run_hook(self, hook: TestCase) -> Optional[BaseException]:
        """Run a hook. Returns the exception it raised, or None.

        Errors the hook logs count towards the run total but leave the
        current test's count alone.
        """
        with capture_logs(self.context, per_test=False):
            try:
                hook.invoke()
            except (Exception, SystemExit) as e:
                return e
        return None
