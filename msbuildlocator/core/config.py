"""YAML configuration for msbuildlocator.

Every well-known name used during discovery (environment variables, directory
names, marker files, the vswhere location, reserved module names) has a default
here. A ``msbuildlocator.yaml`` file can override any of them:

    developer_console:
      install_dir_variable: VSINSTALLDIR
      version_variables: [VSCMD_VER, VisualStudioVersion]
    sdk:
      path_variable: PATH
      directory: sdk
      marker_file: MSBuild.dll
    catalog:
      vswhere_path: C:/Program Files (x86)/Microsoft Visual Studio/Installer/vswhere.exe
      minimum_major_version: 15
      msbuild_subpath: [MSBuild, "15.0", Bin]
      timeout: 10
    resolution:
      module_names: [Microsoft.Build, Microsoft.Build.Framework]
      suffix: .py
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "msbuildlocator.yaml"

MSBUILD_MODULE_NAMES: Tuple[str, ...] = (
    "Microsoft.Build",
    "Microsoft.Build.Framework",
    "Microsoft.Build.Tasks.Core",
    "Microsoft.Build.Utilities.Core",
)


@dataclass(frozen=True)
class DeveloperConsoleConfig:
    """Environment variables set by a Visual Studio developer console."""

    install_dir_variable: str = "VSINSTALLDIR"
    version_variables: Tuple[str, ...] = ("VSCMD_VER", "VisualStudioVersion")


@dataclass(frozen=True)
class SdkScanConfig:
    """Layout of a .NET SDK installation."""

    path_variable: str = "PATH"
    directory: str = "sdk"
    marker_file: str = "MSBuild.dll"


@dataclass(frozen=True)
class CatalogConfig:
    """Visual Studio installation catalog (vswhere) settings."""

    vswhere_path: str = (
        "C:/Program Files (x86)/Microsoft Visual Studio/Installer/vswhere.exe"
    )
    minimum_major_version: int = 15
    msbuild_subpath: Tuple[str, ...] = ("MSBuild", "15.0", "Bin")
    timeout: float = 10.0


@dataclass(frozen=True)
class ResolutionConfig:
    """Reserved module names redirected to the registered instance."""

    module_names: Tuple[str, ...] = MSBUILD_MODULE_NAMES
    suffix: str = ".py"


@dataclass(frozen=True)
class LocatorConfig:
    """Complete msbuildlocator configuration."""

    developer_console: DeveloperConsoleConfig = field(
        default_factory=DeveloperConsoleConfig
    )
    sdk: SdkScanConfig = field(default_factory=SdkScanConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    resolution: ResolutionConfig = field(default_factory=ResolutionConfig)


DEFAULT_CONFIG = LocatorConfig()


def load_config(config_path: Path) -> LocatorConfig:
    """
    Parse a msbuildlocator.yaml configuration file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Parsed configuration; sections that are not given keep their defaults

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or contains
            unknown keys or values of the wrong type
    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {config_path}: {e}")

    if data is None:
        logger.debug(f"Configuration file {config_path} is empty, using defaults")
        return LocatorConfig()

    config = parse_config_data(data)
    logger.debug(f"Loaded configuration from {config_path}")
    return config


def parse_config_data(data: Any) -> LocatorConfig:
    """
    Build a LocatorConfig from already-parsed YAML data.

    Raises:
        ConfigError: If the data does not describe a valid configuration
    """
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a mapping")

    sections = {
        "developer_console": DeveloperConsoleConfig,
        "sdk": SdkScanConfig,
        "catalog": CatalogConfig,
        "resolution": ResolutionConfig,
    }

    unknown = set(data) - set(sections)
    if unknown:
        raise ConfigError(f"Unknown configuration section(s): {sorted(unknown)}")

    parsed = {}
    for name, section_type in sections.items():
        section_data = data.get(name)
        if section_data is None:
            continue
        parsed[name] = _parse_section(name, section_type, section_data)

    return LocatorConfig(**parsed)


def _parse_section(name: str, section_type: type, data: Any):
    """Parse one configuration section into its dataclass."""
    if not isinstance(data, dict):
        raise ConfigError(f"Section '{name}' must be a mapping")

    defaults = section_type()
    known = {f.name for f in fields(section_type)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown key(s) in section '{name}': {sorted(unknown)}")

    values: Dict[str, Any] = {}
    for key, value in data.items():
        values[key] = _coerce(f"{name}.{key}", getattr(defaults, key), value)

    return section_type(**values)


def _coerce(key: str, default: Any, value: Any) -> Any:
    """Validate ``value`` against the type of its default."""
    if isinstance(default, tuple):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"{key} must be a list of strings")
        if not value:
            raise ConfigError(f"{key} must not be empty")
        return tuple(value)

    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ConfigError(f"{key} must be a boolean")
        return value

    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{key} must be an integer")
        return value

    if isinstance(default, float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{key} must be a number")
        if value <= 0:
            raise ConfigError(f"{key} must be positive")
        return float(value)

    if not isinstance(value, str) or not value:
        raise ConfigError(f"{key} must be a non-empty string")
    return value


def find_config_file(start_dir: Path) -> Optional[Path]:
    """
    Look for the default configuration file in a directory.

    Returns:
        Path to ``msbuildlocator.yaml`` in ``start_dir``, or None
    """
    candidate = Path(start_dir) / DEFAULT_CONFIG_FILENAME
    return candidate if candidate.is_file() else None
