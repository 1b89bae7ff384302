"""Discovery module - test naming, registration and collection."""

from .collector import DEFAULT_PATTERNS, collect, find_test_files, module_name_for
from .naming import DisplayName, HookKind, decompose, hook_kind, is_hook, module_prefix
from .registry import Registry, TestCase, active_registry, default_registry

__all__ = [
    "DEFAULT_PATTERNS",
    "collect",
    "find_test_files",
    "module_name_for",
    "DisplayName",
    "HookKind",
    "decompose",
    "hook_kind",
    "is_hook",
    "module_prefix",
    "Registry",
    "TestCase",
    "active_registry",
    "default_registry",
]
