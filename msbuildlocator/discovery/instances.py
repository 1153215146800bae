"""
msbuildlocator/discovery/instances.py

Data model for discovered MSBuild instances and the query options used to
filter them.
"""

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from ..core.version import Version

SDK_INSTANCE_NAME = ".NET Core SDK"
DEVELOPER_CONSOLE_NAME = "DEVCONSOLE"

DEFAULT_MSBUILD_SUBPATH = ("MSBuild", "15.0", "Bin")


class DiscoveryType(enum.Flag):
    """
    How an instance was discovered.

    Used both as the tag on each instance and as the filter mask in
    QueryOptions.
    """

    DEVELOPER_CONSOLE = 1
    VISUAL_STUDIO_SETUP = 2
    DOTNET_SDK = 4

    OTHER = 4
    ALL = 7

    @property
    def label(self) -> str:
        """Short kebab-case label, e.g. 'developer-console'."""
        return (self.name or "none").lower().replace("_", "-")

    @classmethod
    def from_label(cls, label: str) -> "DiscoveryType":
        """
        Look up a single discovery type by its label.

        Accepts 'developer-console', 'visual-studio-setup' (or 'setup'),
        'dotnet-sdk' (or 'sdk', 'other').

        Raises:
            ValueError: If the label is unknown
        """
        aliases = {
            "developer-console": cls.DEVELOPER_CONSOLE,
            "devconsole": cls.DEVELOPER_CONSOLE,
            "visual-studio-setup": cls.VISUAL_STUDIO_SETUP,
            "setup": cls.VISUAL_STUDIO_SETUP,
            "dotnet-sdk": cls.DOTNET_SDK,
            "sdk": cls.DOTNET_SDK,
            "other": cls.DOTNET_SDK,
        }
        try:
            return aliases[label.strip().lower()]
        except KeyError:
            raise ValueError(
                f"Unknown discovery type: {label} (expected one of {sorted(aliases)})"
            ) from None


@dataclass(frozen=True)
class MSBuildInstance:
    """
    An installed instance of MSBuild.

    Attributes:
        name: Display name of the instance
        msbuild_path: Directory holding the MSBuild assemblies
        version: Instance version, None when it could not be determined
        discovery_type: Which discovery source found the instance
    """

    name: str
    msbuild_path: Path
    version: Optional[Version]
    discovery_type: DiscoveryType

    def __post_init__(self):
        raw = self.msbuild_path
        if raw is None or str(raw).strip() in ("", "."):
            raise ValueError("msbuild_path must be a non-empty path")
        object.__setattr__(self, "msbuild_path", Path(raw))

    def __str__(self) -> str:
        """String representation."""
        version = self.version if self.version is not None else "unknown"
        return f"{self.name} {version} ({self.discovery_type.label}) at {self.msbuild_path}"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-serializable dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "name": self.name,
            "version": str(self.version) if self.version is not None else None,
            "msbuild_path": str(self.msbuild_path),
            "discovery_type": self.discovery_type.label,
        }


@dataclass(frozen=True)
class VisualStudioInstance(MSBuildInstance):
    """
    A Visual Studio installation (found via developer console or vswhere).

    ``msbuild_path`` lives below ``visual_studio_root_path``; use create()
    to derive it.
    """

    visual_studio_root_path: Path

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(
            self, "visual_studio_root_path", Path(self.visual_studio_root_path)
        )

    @classmethod
    def create(
        cls,
        name: str,
        root_path: Union[str, Path],
        version: Optional[Version],
        discovery_type: DiscoveryType,
        msbuild_subpath: Sequence[str] = DEFAULT_MSBUILD_SUBPATH,
    ) -> "VisualStudioInstance":
        """
        Build an instance from a Visual Studio installation root.

        Args:
            name: Display name
            root_path: Visual Studio installation directory
            version: Installation version, may be None
            discovery_type: Discovery source
            msbuild_subpath: Path components from the root to the MSBuild bin
                directory

        Returns:
            VisualStudioInstance with msbuild_path derived from root_path
        """
        root = Path(root_path)
        return cls(
            name=name,
            msbuild_path=root.joinpath(*msbuild_subpath),
            version=version,
            discovery_type=discovery_type,
            visual_studio_root_path=root,
        )

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["visual_studio_root_path"] = str(self.visual_studio_root_path)
        return result


@dataclass(frozen=True)
class DotNetSdkInstance(MSBuildInstance):
    """An installed .NET SDK. The MSBuild assemblies sit in the SDK directory itself."""

    name: str = field(default=SDK_INSTANCE_NAME, init=False)

    @classmethod
    def create(
        cls,
        version: Version,
        path: Union[str, Path],
        discovery_type: DiscoveryType = DiscoveryType.DOTNET_SDK,
    ) -> "DotNetSdkInstance":
        """Build an instance for one SDK version directory."""
        return cls(msbuild_path=Path(path), version=version, discovery_type=discovery_type)


@dataclass(frozen=True)
class QueryOptions:
    """
    Options for querying Visual Studio instances.

    An instance matches when its discovery type intersects ``discovery_types``.
    """

    discovery_types: DiscoveryType = DiscoveryType.ALL

    def matches(self, instance: MSBuildInstance) -> bool:
        """True if the instance's discovery type is in the requested mask."""
        return bool(instance.discovery_type & self.discovery_types)


QueryOptions.DEFAULT = QueryOptions()
