"""
Discovery module for msbuildlocator.

This module provides:
- The instance data model and query options
- Developer console detection from environment variables
- Visual Studio catalog probing via vswhere
- .NET SDK directory scanning
"""

from .instances import (
    DiscoveryType,
    MSBuildInstance,
    VisualStudioInstance,
    DotNetSdkInstance,
    QueryOptions,
)
from .environment import DeveloperConsoleProbe
from .catalog import (
    CatalogProbe,
    EmptyCatalogProbe,
    StaticCatalogProbe,
    VsWhereCatalogProbe,
    default_catalog_probe,
)
from .sdk_scanner import DotNetSdkScanner, SkipReason

__all__ = [
    "DiscoveryType",
    "MSBuildInstance",
    "VisualStudioInstance",
    "DotNetSdkInstance",
    "QueryOptions",
    "DeveloperConsoleProbe",
    "CatalogProbe",
    "EmptyCatalogProbe",
    "StaticCatalogProbe",
    "VsWhereCatalogProbe",
    "default_catalog_probe",
    "DotNetSdkScanner",
    "SkipReason",
]
