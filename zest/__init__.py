"""zest - a test runner with per-module setup and teardown hooks."""

from .discovery.registry import (
    Registry,
    TestCase,
    after_all,
    after_each,
    before_all,
    before_each,
    test,
)
from .errors import SkipTest
from .runner.arena import Allocation, Arena
from .session import RunResult, run

__version__ = "0.1.0"

__all__ = [
    "Registry",
    "TestCase",
    "after_all",
    "after_each",
    "before_all",
    "before_each",
    "test",
    "SkipTest",
    "Allocation",
    "Arena",
    "RunResult",
    "run",
]
