"""Shared pytest configuration for urlshort examples.

Provides the ``example_app`` fixture that loads a fresh App from the
``app.py`` file next to the test. Each call re-executes app.py in its
own module namespace, so documents are re-read for every test.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    """Load the App defined by the sibling app.py."""
    app_path = Path(request.path).parent / "app.py"
    spec = importlib.util.spec_from_file_location(f"example_{app_path.parent.name}", app_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.app
