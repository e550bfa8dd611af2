"""Fixtures for the switchyard example apps."""

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest


def load_app_module(app_path: Path) -> ModuleType:
    """Execute *app_path* as a fresh module named after its directory."""
    spec = importlib.util.spec_from_file_location(f"{app_path.parent.name}_app", app_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot load {app_path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> ModuleType:
    """The ``app.py`` beside the requesting test, reloaded per test so
    module-level state such as in-memory stores starts clean."""
    return load_app_module(Path(request.path).with_name("app.py"))
