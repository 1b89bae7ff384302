import io
import logging

import pytest

from zest.discovery.registry import TestCase
from zest.runner.context import RunContext
from zest.runner.executor import TestExecutor
from zest.runner.result_collector import ResultCollector


class FakeClock:
    """Advances by a fixed step on every reading."""

    def __init__(self, step: int = 1_000):
        self.now = 0
        self.step = step

    def __call__(self) -> int:
        value = self.now
        self.now += self.step
        return value


class Recorder:
    """Records the order in which test bodies and hooks are called."""

    def __init__(self):
        self.calls: list[str] = []

    def case(self, name: str, fail: BaseException = None, takes_arena: bool = False) -> TestCase:
        def body():
            self.calls.append(name)
            if fail is not None:
                raise fail

        def body_with_arena(arena):
            body()

        return TestCase(name=name, func=body_with_arena if takes_arena else body)

    def count(self, name: str) -> int:
        return self.calls.count(name)


@pytest.fixture()
def stream():
    return io.StringIO()


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def context(stream):
    return RunContext(log_level=logging.WARNING, stream=stream)


@pytest.fixture()
def executor(context, clock):
    return TestExecutor(context=context, clock=clock)


@pytest.fixture()
def collector():
    return ResultCollector()


@pytest.fixture()
def recorder():
    return Recorder()
