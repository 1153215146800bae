"""
msbuildlocator/discovery/environment.py

Developer console detection - finds the Visual Studio instance whose developer
command prompt the current process was started from.
"""

import logging
import os
from typing import Mapping, Optional, Sequence

from ..core.config import DeveloperConsoleConfig
from ..core.version import Version
from .instances import DEVELOPER_CONSOLE_NAME, DiscoveryType, VisualStudioInstance

logger = logging.getLogger(__name__)


class DeveloperConsoleProbe:
    """
    Probe environment variables set by a Visual Studio developer console.

    ``VSINSTALLDIR`` names the installation root. The version comes from
    ``VSCMD_VER``, or from ``VisualStudioVersion`` when the first is missing
    or unparsable. An instance without any usable version is still returned,
    with ``version=None``.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        config: Optional[DeveloperConsoleConfig] = None,
        msbuild_subpath: Optional[Sequence[str]] = None,
    ):
        """
        Initialize probe.

        Args:
            environ: Environment mapping to read (defaults to os.environ at
                probe time)
            config: Variable names to read
            msbuild_subpath: Path components from the installation root to
                the MSBuild bin directory
        """
        self._environ = environ
        self.config = config or DeveloperConsoleConfig()
        self.msbuild_subpath = msbuild_subpath

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def probe(self) -> Optional[VisualStudioInstance]:
        """
        Look for an active developer console.

        Returns:
            VisualStudioInstance tagged DEVELOPER_CONSOLE, or None if no
            developer console environment is active
        """
        env = self.environ
        install_dir = env.get(self.config.install_dir_variable)
        if not install_dir:
            logger.debug(
                f"{self.config.install_dir_variable} not set, no developer console"
            )
            return None

        version = self._read_version(env)

        kwargs = {}
        if self.msbuild_subpath is not None:
            kwargs["msbuild_subpath"] = self.msbuild_subpath

        instance = VisualStudioInstance.create(
            DEVELOPER_CONSOLE_NAME,
            install_dir,
            version,
            DiscoveryType.DEVELOPER_CONSOLE,
            **kwargs,
        )
        logger.info(f"Found developer console instance: {instance}")
        return instance

    def _read_version(self, env: Mapping[str, str]) -> Optional[Version]:
        """Return the first parsable version among the configured variables."""
        for variable in self.config.version_variables:
            raw = env.get(variable)
            version = Version.try_parse(raw)
            if version is not None:
                logger.debug(f"Developer console version {version} from {variable}")
                return version
            if raw:
                logger.debug(f"Ignoring unparsable {variable}={raw!r}")

        logger.debug("Developer console version could not be determined")
        return None
