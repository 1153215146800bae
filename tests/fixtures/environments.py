"""Environment and platform fixtures for testing."""


import pytest

from msbuildlocator.core.platform import PlatformInfo


@pytest.fixture
def platform_linux() -> PlatformInfo:
    """Linux platform info."""
    return PlatformInfo("linux", "x64")


@pytest.fixture
def platform_windows() -> PlatformInfo:
    """Windows platform info."""
    return PlatformInfo("windows", "x64")


@pytest.fixture
def platform_macos() -> PlatformInfo:
    """macOS platform info."""
    return PlatformInfo("macos", "arm64")


@pytest.fixture
def path_env(dotnet_install, tmp_path):
    """
    POSIX-style environment whose PATH lists an empty entry and an empty
    directory before the .NET install.
    """
    other = tmp_path / "usr-bin"
    other.mkdir()
    return {"PATH": ":".join(["", str(other), str(dotnet_install)])}
