"""Wires a full run together: executor, collector, reporter and coordinator."""

import sys
import time
from dataclasses import dataclass, field
from typing import Optional, Sequence, TextIO

from .config.schema import RunConfig
from .discovery.registry import TestCase
from .reporting.console_reporter import ConsoleReporter
from .runner.context import RunContext
from .runner.coordinator import Coordinator
from .runner.executor import Clock, TestExecutor
from .runner.result_collector import HookFailure, ResultCollector, RunCounters, TestResult, Verdict


@dataclass
class RunResult:
    """Everything a finished run produced."""
    verdict: Verdict
    counters: RunCounters
    total_duration_ns: int = 0
    log_errors: int = 0
    results: list[TestResult] = field(default_factory=list)
    hook_failures: list[HookFailure] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return self.verdict.exit_code


def run(
    cases: Sequence[TestCase],
    config: Optional[RunConfig] = None,
    stream: Optional[TextIO] = None,
    clock: Clock = time.perf_counter_ns,
) -> RunResult:
    """Run ``cases`` in order and print the report to ``stream``.

    Raises:
        BookkeepingError: If module state could not be recorded.
    """
    config = config or RunConfig()
    stream = stream or sys.stderr

    context = RunContext(log_level=config.log_level_number, stream=stream)
    reporter = ConsoleReporter(stream=stream, color=config.color, show_traces=config.show_traces)
    collector = ResultCollector(listener=reporter)
    executor = TestExecutor(context=context, clock=clock)

    verdict = Coordinator(cases, executor=executor, collector=collector).run()
    reporter.summary(collector.counters, collector.total_duration_ns)

    return RunResult(
        verdict=verdict,
        counters=collector.counters,
        total_duration_ns=collector.total_duration_ns,
        log_errors=context.log_errors,
        results=collector.results,
        hook_failures=collector.hook_failures,
    )
