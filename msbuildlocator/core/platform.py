"""
Platform detection for msbuildlocator.

Discovery only needs a few platform facts: whether the host is Windows (the
installation catalog exists only there), how PATH entries are separated, and
what the .NET host executable is called.

Usage:
    from msbuildlocator.core.platform import detect_platform

    platform_info = detect_platform()
    print(platform_info.path_separator, platform_info.dotnet_executable)
"""

import functools
import platform
from dataclasses import dataclass


@dataclass(frozen=True)
class PlatformInfo:
    """
    Platform information relevant to toolchain discovery.

    Attributes:
        os: Operating system ('windows', 'linux', 'macos')
        arch: CPU architecture ('x64', 'arm64', 'x86', 'arm')
    """

    os: str
    arch: str = "x64"

    @property
    def is_windows(self) -> bool:
        """True when running on Windows."""
        return self.os == "windows"

    @property
    def path_separator(self) -> str:
        """
        Separator used between entries of the PATH variable.

        Example:
            >>> PlatformInfo("windows").path_separator
            ';'
        """
        return ";" if self.is_windows else ":"

    @property
    def dotnet_executable(self) -> str:
        """
        File name of the .NET host executable.

        Example:
            >>> PlatformInfo("linux").dotnet_executable
            'dotnet'
        """
        return "dotnet.exe" if self.is_windows else "dotnet"

    def platform_string(self) -> str:
        """
        Get canonical platform string (e.g., 'linux-x64', 'macos-arm64').
        """
        return f"{self.os}-{self.arch}"

    def __str__(self) -> str:
        return self.platform_string()


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect current platform information.

    This function is cached - it only runs detection once per process.

    Returns:
        PlatformInfo for the running interpreter
    """
    return PlatformInfo(os=_detect_os(), arch=_detect_architecture())


def _detect_os() -> str:
    """
    Detect operating system.

    Returns:
        Normalized OS name: 'windows', 'linux', 'macos', or the raw
        lower-cased system name for anything else
    """
    system = platform.system().lower()

    if system == "windows":
        return "windows"
    elif system == "darwin":
        return "macos"
    elif system == "linux":
        return "linux"
    return system or "unknown"


def _detect_architecture() -> str:
    """
    Detect CPU architecture.

    Returns:
        Normalized architecture: 'x64', 'arm64', 'x86', 'arm'
    """
    machine = platform.machine().lower()

    if machine in ("x86_64", "amd64", "x64"):
        return "x64"
    elif machine in ("aarch64", "arm64"):
        return "arm64"
    elif machine in ("i386", "i686", "x86"):
        return "x86"
    elif machine.startswith("arm"):
        return "arm"
    else:
        # Return original for unknown architectures
        return machine


def clear_platform_cache():
    """
    Clear the platform detection cache.

    This forces the next call to detect_platform() to re-detect.
    """
    detect_platform.cache_clear()


__all__ = [
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
]
