"""
Global pytest fixtures for stencil tests.

This module provides:
- The imported package as a fixture
- Isolation of module-level configuration between tests
"""

import pytest


@pytest.fixture(scope="session")
def stencil():
    """The stencil package."""
    import stencil

    return stencil


@pytest.fixture(autouse=True)
def _reset_template_config():
    """Restore template configuration after every test."""
    from stencil.template import config

    yield
    config.debug = False
