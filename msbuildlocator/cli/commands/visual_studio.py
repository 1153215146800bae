"""
VS command implementation.

Prints Visual Studio instances, optionally filtered by discovery type.
"""

import functools
import logging
import operator

from msbuildlocator.cli.utils import create_locator, print_instances
from msbuildlocator.discovery.instances import DiscoveryType, QueryOptions

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the vs command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for an unknown discovery type)
    """
    options = QueryOptions.DEFAULT
    if args.types:
        try:
            mask = functools.reduce(
                operator.or_, (DiscoveryType.from_label(t) for t in args.types)
            )
        except ValueError as e:
            logger.error(f"Error: {e}")
            return 1
        options = QueryOptions(discovery_types=mask)

    locator = create_locator(args)
    print_instances(locator.query_visual_studio_instances(options), as_json=args.json)
    return 0
