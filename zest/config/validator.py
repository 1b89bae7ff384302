"""Config validator for zest.

Validates parsed RunConfig objects.
"""

from .schema import (
    RunConfig,
    ConfigIssue,
    ConfigValidation,
    VALID_COLOR_MODES,
    VALID_LOG_LEVELS,
)


def validate_config(config: RunConfig) -> ConfigValidation:
    """Validate a RunConfig.

    Checks:
    - Colour mode is one of auto/always/never
    - Log level is a known logging level name
    - At least one non-empty collection pattern

    Args:
        config: RunConfig to validate.

    Returns:
        ConfigValidation with errors and warnings.
    """
    errors: list[ConfigIssue] = []
    warnings: list[ConfigIssue] = []

    if config.color not in VALID_COLOR_MODES:
        errors.append(ConfigIssue(
            path="color",
            message=f"Invalid color mode '{config.color}'. Must be one of: {', '.join(sorted(VALID_COLOR_MODES))}",
        ))

    if config.log_level not in VALID_LOG_LEVELS:
        errors.append(ConfigIssue(
            path="log_level",
            message=f"Invalid log level '{config.log_level}'. Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}",
        ))

    if not config.pattern:
        errors.append(ConfigIssue(
            path="pattern",
            message="At least one collection pattern is required.",
        ))
    for i, pattern in enumerate(config.pattern):
        if not pattern.endswith(".py"):
            warnings.append(ConfigIssue(
                path=f"pattern[{i}]",
                message=f"Pattern '{pattern}' does not match Python files.",
                severity="warning",
            ))

    return ConfigValidation(
        errors=errors,
        warnings=warnings,
    )
