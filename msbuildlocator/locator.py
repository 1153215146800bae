"""
msbuildlocator/locator.py

Locator facade - merges developer console, installation catalog and .NET SDK
discovery, and registers one instance for module resolution.

Nothing is cached: every query re-reads the environment and filesystem.

Usage:
    from msbuildlocator import MSBuildLocator

    locator = MSBuildLocator()
    for instance in locator.get_all_instances():
        print(instance)

    locator.register_defaults()
"""

import logging
from typing import List, Mapping, Optional

from .core.config import LocatorConfig
from .core.exceptions import ArgumentError
from .core.platform import PlatformInfo, detect_platform
from .discovery.catalog import CatalogProbe, default_catalog_probe
from .discovery.environment import DeveloperConsoleProbe
from .discovery.instances import (
    DotNetSdkInstance,
    MSBuildInstance,
    QueryOptions,
    VisualStudioInstance,
)
from .discovery.sdk_scanner import DotNetSdkScanner, SkipCallback
from .resolution import ArmMode, ResolutionRegistry

logger = logging.getLogger(__name__)


class MSBuildLocator:
    """
    Finds MSBuild instances and registers one for module resolution.

    Discovery sources:
    - Developer console environment (VSINSTALLDIR)
    - Installation catalog (vswhere, Windows only)
    - .NET SDK directories next to ``dotnet`` on PATH

    The locator owns a ResolutionRegistry; register_instance() arms it.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        platform: Optional[PlatformInfo] = None,
        config: Optional[LocatorConfig] = None,
        catalog: Optional[CatalogProbe] = None,
        registry: Optional[ResolutionRegistry] = None,
        on_skip: Optional[SkipCallback] = None,
    ):
        """
        Initialize locator.

        Args:
            environ: Environment mapping (defaults to os.environ at query time)
            platform: Platform information (defaults to the detected platform)
            config: Discovery and resolution settings
            catalog: Installation catalog probe (defaults to vswhere on
                Windows, an empty catalog elsewhere)
            registry: Resolution registry to arm (defaults to a new one built
                from config)
            on_skip: Called with (directory, reason) for SDK candidates the
                scan skips
        """
        self.platform = platform or detect_platform()
        self.config = config or LocatorConfig()
        self.catalog = catalog or default_catalog_probe(self.platform, self.config.catalog)
        self.registry = registry or ResolutionRegistry(
            module_names=self.config.resolution.module_names,
            suffix=self.config.resolution.suffix,
        )
        self.developer_console = DeveloperConsoleProbe(
            environ=environ,
            config=self.config.developer_console,
            msbuild_subpath=self.config.catalog.msbuild_subpath,
        )
        self.sdk_scanner = DotNetSdkScanner(
            environ=environ,
            platform=self.platform,
            config=self.config.sdk,
            on_skip=on_skip,
        )

    @property
    def is_registered(self) -> bool:
        """True once an instance has been registered."""
        return self.registry.is_armed

    def query_visual_studio_instances(
        self, options: QueryOptions = QueryOptions.DEFAULT
    ) -> List[VisualStudioInstance]:
        """
        Query Visual Studio instances.

        Args:
            options: Discovery type filter

        Returns:
            Developer console instance (if any) followed by catalog instances,
            restricted to those whose discovery type intersects the mask
        """
        instances = [inst for inst in self._visual_studio_instances() if options.matches(inst)]
        logger.debug(
            f"{len(instances)} Visual Studio instance(s) match {options.discovery_types}"
        )
        return instances

    def get_dotnet_sdk_instances(self) -> List[DotNetSdkInstance]:
        """
        Find all installed .NET SDK instances.

        Returns:
            SDK instances, newest first

        Raises:
            DiscoveryError: If the .NET base directory cannot be determined
        """
        return self.sdk_scanner.scan()

    def get_all_instances(self) -> List[MSBuildInstance]:
        """
        Find all MSBuild instances, Visual Studio first, then .NET SDKs.

        Raises:
            DiscoveryError: If the SDK scan fails, even when Visual Studio
                instances were found
        """
        instances: List[MSBuildInstance] = []
        instances.extend(self._visual_studio_instances())
        instances.extend(self.get_dotnet_sdk_instances())
        return instances

    def register_defaults(self, mode: ArmMode = ArmMode.ADD) -> MSBuildInstance:
        """
        Discover instances and register the first one.

        Prefers the first Visual Studio instance, then the newest .NET SDK.

        Args:
            mode: How to arm an already-armed registry

        Returns:
            The registered instance

        Raises:
            ArgumentError: If no instance was found
            DiscoveryError: If there is no Visual Studio instance and the
                SDK scan fails
        """
        instance: Optional[MSBuildInstance] = next(
            iter(self.query_visual_studio_instances()), None
        )
        if instance is None:
            logger.debug("No Visual Studio instance, falling back to .NET SDKs")
            instance = next(iter(self.get_dotnet_sdk_instances()), None)

        self.register_instance(instance, mode=mode)
        return instance

    def register_instance(
        self, instance: Optional[MSBuildInstance], mode: ArmMode = ArmMode.ADD
    ) -> None:
        """
        Redirect reserved module names to an instance's MSBuild directory.

        Args:
            instance: Instance to register
            mode: ADD stacks behind earlier registrations, REPLACE drops them

        Raises:
            ArgumentError: If instance is None
        """
        if instance is None:
            raise ArgumentError("instance", "No MSBuild instance to register")

        logger.info(f"Registering {instance}")
        self.registry.arm(instance.msbuild_path, mode=mode)

    def _visual_studio_instances(self) -> List[VisualStudioInstance]:
        """Developer console instance (if any) followed by catalog instances."""
        instances = []

        devconsole = self.developer_console.probe()
        if devconsole is not None:
            instances.append(devconsole)

        try:
            instances.extend(self.catalog.list_instances())
        except Exception as e:
            logger.warning(f"Catalog probe {self.catalog.__class__.__name__} failed: {e}")

        return instances


# ============================================================================
# Process-wide default locator
# ============================================================================

_default_locator: Optional[MSBuildLocator] = None


def get_default_locator() -> MSBuildLocator:
    """
    Get the process-wide locator, creating it on first use.

    Its registry is the one the module-level register functions arm.
    """
    global _default_locator
    if _default_locator is None:
        _default_locator = MSBuildLocator()
    return _default_locator


def query_visual_studio_instances(
    options: QueryOptions = QueryOptions.DEFAULT,
) -> List[VisualStudioInstance]:
    """Query Visual Studio instances with the default locator."""
    return get_default_locator().query_visual_studio_instances(options)


def get_dotnet_sdk_instances() -> List[DotNetSdkInstance]:
    """Find .NET SDK instances with the default locator."""
    return get_default_locator().get_dotnet_sdk_instances()


def get_all_instances() -> List[MSBuildInstance]:
    """Find all MSBuild instances with the default locator."""
    return get_default_locator().get_all_instances()


def register_defaults(mode: ArmMode = ArmMode.ADD) -> MSBuildInstance:
    """Register the default instance with the default locator."""
    return get_default_locator().register_defaults(mode=mode)


def register_instance(
    instance: Optional[MSBuildInstance], mode: ArmMode = ArmMode.ADD
) -> None:
    """Register an instance with the default locator."""
    get_default_locator().register_instance(instance, mode=mode)
