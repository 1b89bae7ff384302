"""Reporting module - console output."""

from .console_reporter import (
    ANSI_OFF,
    ANSI_ON,
    Ansi,
    ConsoleReporter,
    format_duration,
    render_name,
    render_summary,
    resolve_ansi,
    supports_ansi,
)

__all__ = [
    "ANSI_OFF",
    "ANSI_ON",
    "Ansi",
    "ConsoleReporter",
    "format_duration",
    "render_name",
    "render_summary",
    "resolve_ansi",
    "supports_ansi",
]
