"""Smoke tests checking that every rabbit_topology module imports cleanly."""

import importlib
from pathlib import Path

import pytest


pytestmark = pytest.mark.smoke

PACKAGE_DIR = Path(__file__).parent.parent / "src" / "rabbit_topology"


def _package_modules() -> list[str]:
    modules = []
    for path in sorted(PACKAGE_DIR.rglob("*.py")):
        if path.name.endswith("_test.py"):
            continue
        parts = list(path.relative_to(PACKAGE_DIR.parent).with_suffix("").parts)
        if parts[-1] == "__init__":
            parts.pop()
        modules.append(".".join(parts))
    return modules


@pytest.mark.parametrize("module_name", _package_modules())
def test_module_imports(module_name: str) -> None:
    importlib.import_module(module_name)


def test_public_api_is_exported() -> None:
    package = importlib.import_module("rabbit_topology")

    missing = [name for name in package.__all__ if not hasattr(package, name)]

    assert not missing, f"Names listed in __all__ but not exported: {missing}"
