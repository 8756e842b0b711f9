"""Shared pytest configuration for vouch examples.

``example_module`` imports the ``app.py`` beside the requesting test
under a throwaway module name, so module-level state (the signup
example's user store) starts empty for every test.
"""

import importlib.util
import logging
from pathlib import Path
from types import ModuleType

import pytest


@pytest.fixture
def example_module(request: pytest.FixtureRequest) -> ModuleType:
    """A freshly executed copy of the example's app.py."""
    app_path = Path(request.path).with_name("app.py")
    spec = importlib.util.spec_from_file_location(f"vouch_example_{app_path.parent.name}", app_path)
    if spec is None or spec.loader is None:
        pytest.fail(f"Cannot load example module from {app_path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def _capture_example_logs(caplog: pytest.LogCaptureFixture) -> None:
    """Capture example INFO logs so tests can inspect rejections."""
    caplog.set_level(logging.INFO, logger="vouch.examples")
