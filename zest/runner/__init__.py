"""Runner module - test orchestration."""

from .arena import Allocation, Arena, ArenaReport, isolated_arena
from .context import LogCaptureHandler, RunContext, capture_logs
from .coordinator import Coordinator, ModuleState
from .executor import TestExecutor
from .hooks import HookIndex, ModuleHooks
from .result_collector import (
    HookFailure,
    Outcome,
    ResultCollector,
    RunCounters,
    TestResult,
    Verdict,
)

__all__ = [
    "Allocation",
    "Arena",
    "ArenaReport",
    "isolated_arena",
    "LogCaptureHandler",
    "RunContext",
    "capture_logs",
    "Coordinator",
    "ModuleState",
    "TestExecutor",
    "HookIndex",
    "ModuleHooks",
    "HookFailure",
    "Outcome",
    "ResultCollector",
    "RunCounters",
    "TestResult",
    "Verdict",
]
