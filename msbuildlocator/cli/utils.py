"""
Shared utilities for CLI commands.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from msbuildlocator.core.config import LocatorConfig, find_config_file, load_config
from msbuildlocator.discovery.instances import MSBuildInstance
from msbuildlocator.locator import MSBuildLocator

logger = logging.getLogger(__name__)


def load_locator_config(config_file: Optional[Path] = None) -> LocatorConfig:
    """
    Load the configuration named on the command line, or the default file in
    the current directory if there is one.

    Raises:
        ConfigError: If an explicitly given file is missing or invalid
    """
    if config_file is None:
        config_file = find_config_file(Path.cwd())
        if config_file is None:
            logger.debug("No config file found, using defaults")
            return LocatorConfig()

    return load_config(config_file)


def create_locator(args) -> MSBuildLocator:
    """Build a locator from parsed command-line arguments."""
    config = load_locator_config(getattr(args, "config", None))

    def report_skip(path: Path, reason: str) -> None:
        logger.debug(f"Skipped SDK candidate {path} ({reason})")

    return MSBuildLocator(config=config, on_skip=report_skip)


def safe_print(message: str, file=None):
    """
    Print message, replacing characters the console cannot encode.

    Args:
        message: Message to print
        file: Output file (default: stdout)
    """
    try:
        print(message, file=file)
    except UnicodeEncodeError:
        print(message.encode("ascii", "replace").decode("ascii"), file=file)


def print_instances(instances: Iterable[MSBuildInstance], as_json: bool = False) -> None:
    """
    Print instances as text lines or as a JSON array.

    Args:
        instances: Instances to print
        as_json: Print ``to_dict()`` records as JSON
    """
    instances = list(instances)
    if as_json:
        safe_print(json.dumps([inst.to_dict() for inst in instances], indent=2))
        return

    if not instances:
        safe_print("No MSBuild instances found")
        return

    for inst in instances:
        safe_print(str(inst))
