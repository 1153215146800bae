"""
SDKs command implementation.

Prints installed .NET SDK instances, newest first.
"""

import logging

from msbuildlocator.cli.utils import create_locator, print_instances
from msbuildlocator.core.exceptions import DiscoveryError

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the sdks command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if the .NET base directory is missing)
    """
    locator = create_locator(args)

    try:
        instances = locator.get_dotnet_sdk_instances()
    except DiscoveryError as e:
        logger.error(f"Error: {e}")
        return 1

    if args.latest:
        instances = instances[:1]

    print_instances(instances, as_json=args.json)
    return 0
