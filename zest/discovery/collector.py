"""Test file collection.

Imports test files into a fresh registry and returns the registered test
cases in discovery order.
"""

import importlib.util
import sys
from pathlib import Path
from typing import Iterable, Optional, Union

from ..errors import CollectionError
from .registry import Registry, TestCase

DEFAULT_PATTERNS = ("*_test.py", "test_*.py")


def find_test_files(
    paths: Iterable[Union[str, Path]],
    patterns: Optional[Iterable[str]] = None,
) -> list[tuple[Path, Path]]:
    """Resolve paths into ``(root, file)`` pairs in collection order.

    Files given explicitly are always collected. Directories are walked
    recursively and filtered by ``patterns``.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    patterns = tuple(patterns or DEFAULT_PATTERNS)
    found: list[tuple[Path, Path]] = []
    seen: set[Path] = set()

    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise FileNotFoundError(f"Test path not found: {raw}")

        if path.is_file():
            candidates = [(path.parent, path)]
        else:
            files: set[Path] = set()
            for pattern in patterns:
                files.update(path.rglob(pattern))
            candidates = [
                (path, f) for f in sorted(files, key=lambda f: f.relative_to(path).parts)
                if not _is_hidden(f.relative_to(path))
            ]

        for root, file in candidates:
            key = file.resolve()
            if key in seen:
                continue
            seen.add(key)
            found.append((root, file))

    return found


def module_name_for(root: Path, file: Path) -> str:
    """Dotted module name of ``file`` relative to ``root``."""
    rel = file.relative_to(root).with_suffix("")
    return ".".join(rel.parts)


def collect(
    paths: Iterable[Union[str, Path]],
    patterns: Optional[Iterable[str]] = None,
) -> list[TestCase]:
    """Import test files and return their registered tests.

    Raises:
        FileNotFoundError: If a path does not exist.
        CollectionError: If a test file fails to import.
    """
    registry = Registry()
    with registry.activate():
        for root, file in find_test_files(paths, patterns):
            _import_file(module_name_for(root, file), file)
    return registry.cases


def _import_file(module_name: str, file: Path) -> None:
    spec = importlib.util.spec_from_file_location(module_name, file)
    if spec is None or spec.loader is None:
        raise CollectionError(file, ImportError(f"cannot load {file}"))

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise CollectionError(file, e) from e


def _is_hidden(rel: Path) -> bool:
    return any(part.startswith(".") or part == "__pycache__" for part in rel.parts[:-1])
