"""
msbuildlocator/discovery/sdk_scanner.py

.NET SDK detection - finds SDK version directories next to the ``dotnet`` host
executable on PATH.
"""

import logging
import os
from pathlib import Path
from typing import Callable, List, Mapping, Optional

from ..core.config import SdkScanConfig
from ..core.exceptions import DiscoveryError
from ..core.platform import PlatformInfo, detect_platform
from ..core.version import Version
from .instances import DiscoveryType, DotNetSdkInstance

logger = logging.getLogger(__name__)


class SkipReason:
    """Why a candidate SDK directory was not reported."""

    NOT_A_DIRECTORY = "not-a-directory"
    MISSING_MARKER = "missing-marker"
    INVALID_VERSION = "invalid-version"


SkipCallback = Callable[[Path, str], None]


class DotNetSdkScanner:
    """
    Scan the .NET installation on PATH for SDK instances.

    The scan:
    1. Finds the first PATH entry holding the ``dotnet`` host executable
    2. Lists the immediate subdirectories of ``<base>/sdk``
    3. Keeps those containing ``MSBuild.dll`` whose name parses as a version
    4. Sorts the result newest first

    Directories that fail a check are skipped, never raised. Each skip is
    logged at DEBUG and reported to ``on_skip`` when one is given.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        platform: Optional[PlatformInfo] = None,
        config: Optional[SdkScanConfig] = None,
        on_skip: Optional[SkipCallback] = None,
    ):
        """
        Initialize scanner.

        Args:
            environ: Environment mapping to read PATH from (defaults to
                os.environ at scan time)
            platform: Platform information (defaults to the detected platform)
            config: SDK layout names
            on_skip: Called with (directory, reason) for every skipped candidate
        """
        self._environ = environ
        self.platform = platform or detect_platform()
        self.config = config or SdkScanConfig()
        self.on_skip = on_skip

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def find_base_directory(self) -> Path:
        """
        Find the .NET installation directory on PATH.

        Returns:
            First PATH entry that contains the host executable

        Raises:
            DiscoveryError: If no PATH entry contains the host executable
        """
        executable = self.platform.dotnet_executable
        search_path = self.environ.get(self.config.path_variable) or ""

        for entry in search_path.split(self.platform.path_separator):
            if not entry:
                continue
            candidate = Path(entry) / executable
            if candidate.is_file():
                logger.debug(f"Found {executable} in {entry}")
                return Path(entry)

        raise DiscoveryError(
            f"Unable to determine base directory for .NET Core SDKs: "
            f"no {self.config.path_variable} entry contains {executable}"
        )

    def scan(self) -> List[DotNetSdkInstance]:
        """
        Find all installed .NET SDK instances.

        Returns:
            SDK instances sorted by version, newest first

        Raises:
            DiscoveryError: If the .NET base directory cannot be determined
        """
        base_dir = self.find_base_directory()
        sdks_dir = base_dir / self.config.directory

        if not sdks_dir.is_dir():
            logger.debug(f"SDK directory does not exist: {sdks_dir}")
            return []

        instances = []
        for version_dir in sdks_dir.iterdir():
            instance = self._create_instance(version_dir)
            if instance is not None:
                instances.append(instance)

        instances.sort(key=lambda inst: inst.version, reverse=True)
        logger.info(f"Found {len(instances)} .NET SDK instance(s) in {sdks_dir}")
        return instances

    def _create_instance(self, version_dir: Path) -> Optional[DotNetSdkInstance]:
        """
        Validate one candidate directory.

        Args:
            version_dir: Entry of the sdk directory

        Returns:
            DotNetSdkInstance or None if the candidate was skipped
        """
        if not version_dir.is_dir():
            self._skip(version_dir, SkipReason.NOT_A_DIRECTORY)
            return None

        if not (version_dir / self.config.marker_file).is_file():
            self._skip(version_dir, SkipReason.MISSING_MARKER)
            return None

        version = Version.try_parse(version_dir.name)
        if version is None:
            self._skip(version_dir, SkipReason.INVALID_VERSION)
            return None

        logger.debug(f"Found .NET SDK {version} at {version_dir}")
        return DotNetSdkInstance.create(version, version_dir, DiscoveryType.DOTNET_SDK)

    def _skip(self, path: Path, reason: str) -> None:
        logger.debug(f"Skipping {path}: {reason}")
        if self.on_skip is not None:
            self.on_skip(path, reason)
