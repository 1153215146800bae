"""
msbuildlocator/discovery/catalog.py

Visual Studio installation catalog - enumerates Visual Studio 2017+ instances
through vswhere.exe.

The catalog is platform-specific. On platforms without one, and whenever the
catalog cannot be queried, probes return an empty list; a missing catalog is a
normal condition, not an error.
"""

import json
import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ..core.config import CatalogConfig
from ..core.platform import PlatformInfo, detect_platform
from ..core.version import Version
from .instances import DiscoveryType, VisualStudioInstance

logger = logging.getLogger(__name__)


class CatalogProbe(ABC):
    """Interface for installation catalog probes."""

    @abstractmethod
    def list_instances(self) -> List[VisualStudioInstance]:
        """
        List catalog instances.

        Returns:
            Visual Studio instances in catalog order; the caller must not
            assume any particular count or ordering
        """
        pass


class EmptyCatalogProbe(CatalogProbe):
    """Catalog probe for platforms without an installation catalog."""

    def list_instances(self) -> List[VisualStudioInstance]:
        return []


class StaticCatalogProbe(CatalogProbe):
    """Catalog probe that returns a fixed list of instances."""

    def __init__(self, instances: List[VisualStudioInstance]):
        self.instances = list(instances)

    def list_instances(self) -> List[VisualStudioInstance]:
        return list(self.instances)


class VsWhereCatalogProbe(CatalogProbe):
    """
    Query the Visual Studio installer catalog with vswhere.exe.

    Runs ``vswhere.exe -products * -prerelease -format json`` and turns each
    record with an installation version of at least 15.0 (Visual Studio 2017)
    into a VisualStudioInstance.

    Windows only.
    """

    def __init__(
        self,
        platform: Optional[PlatformInfo] = None,
        config: Optional[CatalogConfig] = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        """
        Initialize probe.

        Args:
            platform: Platform information (defaults to the detected platform)
            config: vswhere location and instance layout
            runner: Function used to run vswhere (subprocess.run signature)
        """
        self.platform = platform or detect_platform()
        self.config = config or CatalogConfig()
        self.runner = runner

    @property
    def vswhere_path(self) -> Path:
        return Path(self.config.vswhere_path)

    def list_instances(self) -> List[VisualStudioInstance]:
        """
        Query vswhere.

        Returns:
            Visual Studio instances, empty if the catalog is unavailable
        """
        if not self.platform.is_windows:
            logger.debug(f"No installation catalog on {self.platform.os}")
            return []

        if not self.vswhere_path.exists():
            logger.debug(f"vswhere not found at {self.vswhere_path}")
            return []

        records = self._run_vswhere()
        instances = []
        for record in records:
            instance = self._create_instance(record)
            if instance is not None:
                instances.append(instance)

        logger.debug(f"vswhere reported {len(instances)} usable instance(s)")
        return instances

    def _run_vswhere(self) -> List[Dict[str, Any]]:
        """
        Run vswhere and decode its JSON output.

        Returns:
            List of installation records, empty on any failure
        """
        try:
            result = self.runner(
                [
                    str(self.vswhere_path),
                    "-products",
                    "*",
                    "-prerelease",
                    "-format",
                    "json",
                    "-utf8",
                ],
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.config.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug("vswhere timed out")
            return []
        except OSError as e:
            logger.debug(f"Failed to run vswhere: {e}")
            return []

        if result.returncode != 0:
            logger.debug(f"vswhere returned {result.returncode}")
            return []

        try:
            records = json.loads(result.stdout or "[]")
        except json.JSONDecodeError as e:
            logger.debug(f"Could not parse vswhere output: {e}")
            return []

        if not isinstance(records, list):
            logger.debug("Unexpected vswhere output, expected a JSON array")
            return []

        return [record for record in records if isinstance(record, dict)]

    def _create_instance(self, record: Dict[str, Any]) -> Optional[VisualStudioInstance]:
        """
        Build an instance from one vswhere record.

        Args:
            record: vswhere JSON record

        Returns:
            VisualStudioInstance or None if the record is unusable
        """
        install_path = record.get("installationPath")
        if not install_path:
            logger.debug(f"Skipping vswhere record without installationPath: {record}")
            return None

        version = Version.try_parse(record.get("installationVersion"))
        if version is None or version.major < self.config.minimum_major_version:
            logger.debug(
                f"Skipping {install_path}: version "
                f"{record.get('installationVersion')!r} is unsupported"
            )
            return None

        name = record.get("displayName") or record.get("instanceId") or "Visual Studio"
        instance = VisualStudioInstance.create(
            name,
            install_path,
            version,
            DiscoveryType.VISUAL_STUDIO_SETUP,
            msbuild_subpath=self.config.msbuild_subpath,
        )
        logger.info(f"Found {instance} via vswhere")
        return instance


def default_catalog_probe(
    platform: Optional[PlatformInfo] = None,
    config: Optional[CatalogConfig] = None,
) -> CatalogProbe:
    """
    Pick the catalog probe for a platform.

    Returns:
        VsWhereCatalogProbe on Windows, EmptyCatalogProbe elsewhere
    """
    platform = platform or detect_platform()
    if platform.is_windows:
        return VsWhereCatalogProbe(platform=platform, config=config)
    return EmptyCatalogProbe()
