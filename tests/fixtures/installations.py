"""Reusable installation fixtures for testing.

These build fake .NET SDK and Visual Studio directory trees under tmp_path so
discovery can be tested without real installations.
"""

from pathlib import Path
from typing import Iterable, Optional

import pytest

MARKER_FILE = "MSBuild.dll"


def make_dotnet_install(
    base: Path,
    versions: Iterable[str] = (),
    without_marker: Iterable[str] = (),
    executable: str = "dotnet",
) -> Path:
    """
    Create a fake .NET installation.

    Args:
        base: Directory to create the installation in
        versions: SDK directory names that get a marker file
        without_marker: SDK directory names created without a marker file
        executable: Host executable file name

    Returns:
        The installation directory (``base``)
    """
    base.mkdir(parents=True, exist_ok=True)
    (base / executable).write_text("#!/bin/sh\n")

    sdk_dir = base / "sdk"
    sdk_dir.mkdir(exist_ok=True)

    for name in versions:
        version_dir = sdk_dir / name
        version_dir.mkdir()
        (version_dir / MARKER_FILE).write_bytes(b"MZ")

    for name in without_marker:
        (sdk_dir / name).mkdir()

    return base


def make_msbuild_dir(root: Path, modules: Optional[dict] = None, suffix: str = ".py") -> Path:
    """
    Create an MSBuild directory holding module files.

    Args:
        root: Directory to create
        modules: Mapping of module name to file content
        suffix: Module file extension

    Returns:
        The created directory
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, content in (modules or {}).items():
        (root / f"{name}{suffix}").write_text(content)
    return root


@pytest.fixture
def dotnet_install(tmp_path) -> Path:
    """
    Fake .NET installation with three valid SDKs and two invalid entries.

    Layout:
        dotnet/dotnet
        dotnet/sdk/1.0.0/MSBuild.dll
        dotnet/sdk/2.1.3/MSBuild.dll
        dotnet/sdk/1.9.9/MSBuild.dll
        dotnet/sdk/not-a-version/MSBuild.dll
        dotnet/sdk/junk/            (no marker)
    """
    base = make_dotnet_install(
        tmp_path / "dotnet",
        versions=["1.0.0", "2.1.3", "1.9.9", "not-a-version"],
        without_marker=["junk"],
    )
    return base


@pytest.fixture
def visual_studio_root(tmp_path) -> Path:
    """Fake Visual Studio installation with an MSBuild bin directory."""
    root = tmp_path / "VS" / "2022" / "Enterprise"
    (root / "MSBuild" / "15.0" / "Bin").mkdir(parents=True)
    return root
