"""Module lifecycle coordination.

Runs the discovered tests in order, running each module's hooks around them:

1. The first regular test of a module triggers its beforeAll hooks. A failing
   beforeAll marks the module skipped and every test in it is skipped.
2. beforeEach hooks run before each test; a failure skips only that test.
3. afterEach hooks run after each test that got past module setup, whatever
   its outcome.
4. afterAll hooks run once at the end for every module that was reached.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..discovery.naming import HookKind, is_hook, module_prefix
from ..discovery.registry import TestCase
from ..errors import BookkeepingError
from .executor import TestExecutor
from .hooks import HookIndex, ModuleHooks
from .result_collector import (
    BEFORE_EACH_FAILED,
    MODULE_SETUP_FAILED,
    HookFailure,
    ResultCollector,
    Verdict,
)


@dataclass
class ModuleState:
    """Lifecycle of one module within a run."""
    key: str
    hooks: ModuleHooks
    before_all_attempted: bool = False
    skipped: bool = False


class Coordinator:
    """Drives a single run over an ordered list of test cases."""

    def __init__(
        self,
        cases: Sequence[TestCase],
        executor: Optional[TestExecutor] = None,
        collector: Optional[ResultCollector] = None,
    ):
        self.cases = list(cases)
        self.executor = executor or TestExecutor()
        self.collector = collector or ResultCollector()
        self.index = HookIndex()
        self.modules: dict[str, ModuleState] = {}

    def run(self) -> Verdict:
        """Run every test, then the pending afterAll hooks.

        Returns:
            The run verdict.

        Raises:
            BookkeepingError: If module state could not be recorded.
        """
        self.index = HookIndex.build(self.cases)
        self.modules = {}
        start = self.executor.clock()

        for case in self.cases:
            if is_hook(case.name):
                continue

            state = self._module_state(module_prefix(case.name))

            if not state.before_all_attempted:
                self._run_before_all(state)

            if state.skipped:
                self.collector.record_skip(case, MODULE_SETUP_FAILED)
                continue

            self._run_test(case, state)

        for state in self.modules.values():
            self._run_hooks(state, HookKind.AFTER_ALL)
        self.modules = {}

        self.collector.total_duration_ns = self.executor.clock() - start
        return self.collector.verdict(self.executor.context.log_errors)

    def _module_state(self, key: str) -> ModuleState:
        state = self.modules.get(key)
        if state is not None:
            return state
        try:
            state = ModuleState(key=key, hooks=self.index.for_module(key))
            self.modules[key] = state
        except MemoryError as e:
            raise BookkeepingError(f"Failed to track module '{key}'") from e
        return state

    def _run_before_all(self, state: ModuleState) -> None:
        if self._run_hooks(state, HookKind.BEFORE_ALL, stop_on_failure=True):
            state.skipped = True
        state.before_all_attempted = True

    def _run_test(self, case: TestCase, state: ModuleState) -> None:
        if self._run_hooks(state, HookKind.BEFORE_EACH, stop_on_failure=True):
            self.collector.record_skip(case, BEFORE_EACH_FAILED)
        else:
            self.collector.record(self.executor.run_test(case))

        self._run_hooks(state, HookKind.AFTER_EACH)

    def _run_hooks(self, state: ModuleState, kind: HookKind, stop_on_failure: bool = False) -> bool:
        """Run the module's hooks of one kind in order. Returns True if any failed."""
        failed = False
        for hook in state.hooks.get(kind):
            error = self.executor.run_hook(hook)
            if error is None:
                continue
            failed = True
            self.collector.record_hook_failure(
                HookFailure(module=state.key, kind=kind, hook=hook, error=error)
            )
            if stop_on_failure:
                break
        return failed
