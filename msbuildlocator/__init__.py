"""
msbuildlocator - find installed MSBuild instances and register one for module
resolution.

Example:
    import msbuildlocator

    instance = msbuildlocator.register_defaults()
    print(f"Using {instance.name} {instance.version} at {instance.msbuild_path}")
"""

from .core.exceptions import (
    MSBuildLocatorError,
    DiscoveryError,
    InvalidVersionError,
    ArgumentError,
    ConfigError,
)
from .core.config import LocatorConfig, load_config
from .core.version import Version
from .discovery.instances import (
    DiscoveryType,
    MSBuildInstance,
    VisualStudioInstance,
    DotNetSdkInstance,
    QueryOptions,
)
from .resolution import ArmMode, ResolutionRegistry
from .locator import (
    MSBuildLocator,
    get_default_locator,
    query_visual_studio_instances,
    get_dotnet_sdk_instances,
    get_all_instances,
    register_defaults,
    register_instance,
)

__all__ = [
    "MSBuildLocatorError",
    "DiscoveryError",
    "InvalidVersionError",
    "ArgumentError",
    "ConfigError",
    "LocatorConfig",
    "load_config",
    "Version",
    "DiscoveryType",
    "MSBuildInstance",
    "VisualStudioInstance",
    "DotNetSdkInstance",
    "QueryOptions",
    "ArmMode",
    "ResolutionRegistry",
    "MSBuildLocator",
    "get_default_locator",
    "query_visual_studio_instances",
    "get_dotnet_sdk_instances",
    "get_all_instances",
    "register_defaults",
    "register_instance",
]
