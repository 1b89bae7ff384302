"""Test registration.

Test files register their tests with decorators::

    import zest

    @zest.before_each
    def reset():
        ...

    @zest.test("static credentials")
    def static_credentials(arena):
        ...

A test named ``"static credentials"`` in module ``credentials`` is registered
as ``credentials.test.static credentials``; hooks are registered as
``credentials.test.zest.beforeEach`` and so on.
"""

import inspect
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from .naming import SEPARATOR, HookKind


@dataclass(frozen=True)
class TestCase:
    """A named unit of work supplied to the runner."""
    name: str
    func: Callable[..., Any]

    __test__ = False  # not a pytest test class

    @property
    def accepts_arena(self) -> bool:
        """Whether the body declares a required positional parameter for the arena."""
        try:
            params = inspect.signature(self.func).parameters.values()
        except (TypeError, ValueError):
            return False
        return any(
            p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
            for p in params
        )

    def invoke(self, arena=None) -> Any:
        """Call the test body, passing ``arena`` if the body takes one."""
        if self.accepts_arena:
            return self.func(arena)
        return self.func()


class Registry:
    """Ordered collection of registered test cases."""

    def __init__(self):
        self._cases: list[TestCase] = []

    def __len__(self) -> int:
        return len(self._cases)

    def __iter__(self) -> Iterator[TestCase]:
        return iter(self._cases)

    @property
    def cases(self) -> list[TestCase]:
        return list(self._cases)

    def add(self, name: str, func: Callable[..., Any]) -> TestCase:
        case = TestCase(name=name, func=func)
        self._cases.append(case)
        return case

    def test(self, name: Optional[str] = None) -> Callable:
        """Decorator registering a regular test.

        Args:
            name: Display name. Defaults to the function name.
        """
        def decorator(func):
            display = name if name is not None else func.__name__
            self.add(f"{func.__module__}{SEPARATOR}{display}", func)
            return func
        return decorator

    def hook(self, kind: HookKind) -> Callable:
        """Decorator registering a hook of the given kind."""
        def decorator(func):
            self.add(f"{func.__module__}{SEPARATOR}{kind.label}", func)
            return func
        return decorator

    @contextmanager
    def activate(self) -> Iterator["Registry"]:
        """Make this registry the target of the module-level decorators."""
        global _active
        previous = _active
        _active = self
        try:
            yield self
        finally:
            _active = previous


default_registry = Registry()
_active: Optional[Registry] = None


def active_registry() -> Registry:
    return _active if _active is not None else default_registry


def test(name: Optional[str] = None) -> Callable:
    """Register a test in the active registry.

    Usable both as ``@zest.test`` and ``@zest.test("display name")``.
    """
    if callable(name):
        return active_registry().test()(name)
    return active_registry().test(name)


def before_all(func):
    return active_registry().hook(HookKind.BEFORE_ALL)(func)


def after_all(func):
    return active_registry().hook(HookKind.AFTER_ALL)(func)


def before_each(func):
    return active_registry().hook(HookKind.BEFORE_EACH)(func)


def after_each(func):
    return active_registry().hook(HookKind.AFTER_EACH)(func)
