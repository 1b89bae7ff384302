"""Qualified test name handling.

Test names are dotted identifiers produced by the host, for example
``aws.imds.test.parseJsonField``. The ``.test.`` token separates the module
from the test's display name, and hooks are recognised by a reserved
``.zest.<kind>`` suffix.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

SEPARATOR = ".test."


class HookKind(str, Enum):
    """Reserved hook kinds."""
    BEFORE_ALL = "beforeAll"
    AFTER_ALL = "afterAll"
    BEFORE_EACH = "beforeEach"
    AFTER_EACH = "afterEach"

    @property
    def suffix(self) -> str:
        return f".zest.{self.value}"

    @property
    def label(self) -> str:
        """Label used in hook failure lines, e.g. ``zest.beforeAll``."""
        return f"zest.{self.value}"


@dataclass(frozen=True)
class DisplayName:
    """Module and display portions of a qualified test name."""
    module: str
    name: str


def decompose(name: str) -> DisplayName:
    """Split a qualified name on the rightmost separator.

    ``foo.test.test.my test`` yields module ``foo.test`` and name ``my test``.
    Names without a separator have an empty module.
    """
    i = name.rfind(SEPARATOR)
    if i < 0:
        return DisplayName(module="", name=name)
    return DisplayName(module=name[:i], name=name[i + len(SEPARATOR):])


def module_prefix(name: str) -> str:
    """Module key used to associate hooks with tests (leftmost separator)."""
    i = name.find(SEPARATOR)
    if i < 0:
        return ""
    return name[:i]


def hook_kind(name: str) -> Optional[HookKind]:
    """Return the hook kind for ``name``, or None for a regular test."""
    for kind in HookKind:
        if name.endswith(kind.suffix):
            return kind
    return None


def is_hook(name: str) -> bool:
    return hook_kind(name) is not None
