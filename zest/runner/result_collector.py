"""Result collection for a test run.

Accumulates per-test results and hook failures, keeps the run counters and
computes the final verdict.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol

from ..discovery.naming import HookKind, decompose
from ..discovery.registry import TestCase
from .arena import Allocation

MODULE_SETUP_FAILED = "module setup failed"
BEFORE_EACH_FAILED = "beforeEach failed"


class Outcome(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"


@dataclass
class TestResult:
    """Outcome of one regular test."""
    name: str
    outcome: Outcome
    duration_ns: Optional[int] = None
    error: Optional[BaseException] = None
    reason: Optional[str] = None
    leaked: list[Allocation] = field(default_factory=list)

    __test__ = False

    @property
    def module(self) -> str:
        return decompose(self.name).module

    @property
    def display_name(self) -> str:
        return decompose(self.name).name

    @property
    def has_leaks(self) -> bool:
        return len(self.leaked) > 0


@dataclass
class HookFailure:
    """A hook that raised."""
    module: str
    kind: HookKind
    hook: TestCase
    error: BaseException


@dataclass(frozen=True)
class RunCounters:
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    leaked: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.skipped


@dataclass(frozen=True)
class Verdict:
    """Final classification of a run."""
    success: bool

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1


class ResultListener(Protocol):
    def test_finished(self, result: TestResult) -> None: ...

    def hook_failed(self, failure: HookFailure) -> None: ...


class ResultCollector:
    """Collects test results and hook failures for a run."""

    def __init__(self, listener: Optional[ResultListener] = None):
        """Initialize result collector.

        Args:
            listener: Notified of each result as it is recorded (usually the
                console reporter).
        """
        self.listener = listener
        self.results: list[TestResult] = []
        self.hook_failures: list[HookFailure] = []
        self.total_duration_ns: int = 0
        self._passed = 0
        self._failed = 0
        self._skipped = 0
        self._leaked = 0

    @property
    def counters(self) -> RunCounters:
        return RunCounters(
            passed=self._passed,
            failed=self._failed,
            skipped=self._skipped,
            leaked=self._leaked,
        )

    def record(self, result: TestResult) -> None:
        if result.outcome is Outcome.PASS:
            self._passed += 1
        elif result.outcome is Outcome.FAIL:
            self._failed += 1
        else:
            self._skipped += 1
        if result.has_leaks:
            self._leaked += 1

        self.results.append(result)
        if self.listener:
            self.listener.test_finished(result)

    def record_skip(self, case: TestCase, reason: str) -> TestResult:
        """Record a test skipped without running its body."""
        result = TestResult(name=case.name, outcome=Outcome.SKIP, reason=reason)
        self.record(result)
        return result

    def record_hook_failure(self, failure: HookFailure) -> None:
        self.hook_failures.append(failure)
        if self.listener:
            self.listener.hook_failed(failure)

    def verdict(self, log_errors: int = 0) -> Verdict:
        """Failing when any test failed or leaked, or an error was logged."""
        counters = self.counters
        return Verdict(
            success=counters.failed == 0 and counters.leaked == 0 and log_errors == 0
        )
