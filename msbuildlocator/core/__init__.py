"""
Core functionality for msbuildlocator.

This package contains the foundational modules that discovery and resolution
depend on.
"""

from .config import (
    CatalogConfig,
    DeveloperConsoleConfig,
    LocatorConfig,
    MSBUILD_MODULE_NAMES,
    ResolutionConfig,
    SdkScanConfig,
    find_config_file,
    load_config,
    parse_config_data,
)

from .exceptions import (
    MSBuildLocatorError,
    DiscoveryError,
    InvalidVersionError,
    ArgumentError,
    ConfigError,
)

from .platform import (
    PlatformInfo,
    detect_platform,
    clear_platform_cache,
)

from .version import Version

__all__ = [
    "CatalogConfig",
    "DeveloperConsoleConfig",
    "LocatorConfig",
    "MSBUILD_MODULE_NAMES",
    "ResolutionConfig",
    "SdkScanConfig",
    "find_config_file",
    "load_config",
    "parse_config_data",
    "MSBuildLocatorError",
    "DiscoveryError",
    "InvalidVersionError",
    "ArgumentError",
    "ConfigError",
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
    "Version",
]
