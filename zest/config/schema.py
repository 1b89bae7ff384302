"""Run configuration models."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from ..discovery.collector import DEFAULT_PATTERNS


class ColorMode(str, Enum):
    """Supported colour modes."""
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


VALID_COLOR_MODES = {e.value for e in ColorMode}
VALID_LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


@dataclass
class RunConfig:
    """Configuration for a zest run."""
    color: str = ColorMode.AUTO.value
    log_level: str = "warning"
    show_traces: bool = True
    pattern: list[str] = field(default_factory=lambda: list(DEFAULT_PATTERNS))

    def __post_init__(self):
        self.color = str(self.color).lower()
        self.log_level = str(self.log_level).lower()
        if isinstance(self.pattern, str):
            self.pattern = [self.pattern]

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


@dataclass(frozen=True)
class ConfigIssue:
    """One problem found in a config, located by its key path."""
    path: str
    message: str
    severity: str = "error"


@dataclass
class ConfigValidation:
    """Issues found by ``validate_config``; valid when there are no errors."""
    errors: list[ConfigIssue] = field(default_factory=list)
    warnings: list[ConfigIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def __str__(self) -> str:
        if self.valid:
            return f"Valid ({len(self.warnings)} warnings)" if self.warnings else "Valid"
        return f"Invalid: {len(self.errors)} errors, {len(self.warnings)} warnings"
