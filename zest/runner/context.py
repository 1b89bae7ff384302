"""Run context and log capture.

The run context carries the log threshold and error counters that a test
run needs. Passing it explicitly keeps several runs in one process (such as
zest's own tests) independent of each other.
"""

import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, TextIO


@dataclass
class RunContext:
    """Mutable per-run state shared by the executor and log capture."""
    log_level: int = logging.WARNING
    stream: TextIO = field(default_factory=lambda: sys.stderr)
    test_log_errors: int = 0
    log_errors: int = 0

    def reset_test_log_errors(self) -> None:
        self.test_log_errors = 0

    def record_log_error(self, per_test: bool = True) -> None:
        if per_test:
            self.test_log_errors += 1
        self.log_errors += 1


class LogCaptureHandler(logging.Handler):
    """Counts error records and echoes records above the run's threshold."""

    def __init__(self, context: RunContext, per_test: bool = True):
        super().__init__(level=logging.NOTSET)
        self.context = context
        self.per_test = per_test

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno >= logging.ERROR:
            self.context.record_log_error(self.per_test)
        if record.levelno >= self.context.log_level:
            try:
                message = record.getMessage()
            except Exception:
                self.handleError(record)
                return
            level = record.levelname.lower()
            print(f"[{record.name}] ({level}): {message}", file=self.context.stream)


@contextmanager
def capture_logs(context: RunContext, per_test: bool = True) -> Iterator[LogCaptureHandler]:
    """Route root logger records through a capture handler.

    With ``per_test`` false (hooks), errors only count towards the run total.
    """
    root = logging.getLogger()
    handler = LogCaptureHandler(context, per_test=per_test)
    previous_level = root.level
    root.addHandler(handler)
    root.setLevel(min(context.log_level, logging.ERROR))
    try:
        yield handler
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)
