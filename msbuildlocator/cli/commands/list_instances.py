"""
List command implementation.

Prints every MSBuild instance: Visual Studio instances first, then .NET SDKs.
"""

import logging

from msbuildlocator.cli.utils import create_locator, print_instances
from msbuildlocator.core.exceptions import DiscoveryError

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if SDK discovery failed)
    """
    locator = create_locator(args)

    try:
        instances = locator.get_all_instances()
    except DiscoveryError as e:
        logger.error(f"Error: {e}")
        return 1

    print_instances(instances, as_json=args.json)
    return 0
