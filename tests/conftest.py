"""
Pytest configuration and shared fixtures for msbuildlocator tests.
"""

import sys

import pytest

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.installations import (
    dotnet_install,
    visual_studio_root,
)
from tests.fixtures.environments import (
    platform_linux,
    platform_windows,
    platform_macos,
    path_env,
)

import msbuildlocator.locator
from msbuildlocator.core.platform import clear_platform_cache


@pytest.fixture(autouse=True)
def reset_default_locator(monkeypatch):
    """Give every test a fresh process-wide locator."""
    monkeypatch.setattr(msbuildlocator.locator, "_default_locator", None)
    yield
    clear_platform_cache()


@pytest.fixture
def isolated_meta_path(monkeypatch):
    """Copy of sys.meta_path that is restored after the test."""
    meta_path = list(sys.meta_path)
    monkeypatch.setattr(sys, "meta_path", meta_path)
    return meta_path
