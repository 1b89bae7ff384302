"""Hook grouping.

Hooks are grouped by the module key of their qualified name, keeping
discovery order within each module and kind.
"""

from dataclasses import dataclass, field
from typing import Iterable

from ..discovery.naming import HookKind, hook_kind, module_prefix
from ..discovery.registry import TestCase


@dataclass
class ModuleHooks:
    """Hooks of every kind registered for one module."""
    by_kind: dict[HookKind, list[TestCase]] = field(
        default_factory=lambda: {kind: [] for kind in HookKind}
    )

    def get(self, kind: HookKind) -> list[TestCase]:
        return self.by_kind[kind]

    def add(self, kind: HookKind, case: TestCase) -> None:
        self.by_kind[kind].append(case)

    @property
    def empty(self) -> bool:
        return not any(self.by_kind.values())


class HookIndex:
    """Module key -> hooks, built once per run."""

    def __init__(self):
        self._modules: dict[str, ModuleHooks] = {}

    @classmethod
    def build(cls, cases: Iterable[TestCase]) -> "HookIndex":
        index = cls()
        for case in cases:
            kind = hook_kind(case.name)
            if kind is None:
                continue
            index._modules.setdefault(module_prefix(case.name), ModuleHooks()).add(kind, case)
        return index

    def __contains__(self, module: str) -> bool:
        return module in self._modules

    def __len__(self) -> int:
        return len(self._modules)

    def for_module(self, module: str) -> ModuleHooks:
        """Hooks for ``module``; an empty set when it registered none."""
        return self._modules.get(module) or ModuleHooks()

    def hooks(self, module: str, kind: HookKind) -> list[TestCase]:
        return self.for_module(module).get(kind)
