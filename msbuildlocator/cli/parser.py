"""
msbuildlocator CLI argument parser.

This module implements the command-line interface for msbuildlocator using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Get version from package
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("msbuildlocator")
except PackageNotFoundError:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """msbuildlocator command-line interface."""

    command_map = {
        "list": "msbuildlocator.cli.commands.list_instances",
        "vs": "msbuildlocator.cli.commands.visual_studio",
        "sdks": "msbuildlocator.cli.commands.sdks",
    }

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="msbuildlocator",
            description="msbuildlocator - find installed MSBuild instances",
            epilog='Use "msbuildlocator COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"msbuildlocator {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./msbuildlocator.yaml)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_list_command(subparsers)
        self._add_vs_command(subparsers)
        self._add_sdks_command(subparsers)

        return parser

    def _add_json_option(self, parser):
        parser.add_argument(
            "--json", action="store_true", help="Print instances as JSON"
        )

    def _add_list_command(self, subparsers):
        """Add 'list' subcommand."""
        parser = subparsers.add_parser(
            "list",
            help="List all MSBuild instances",
            description="List Visual Studio instances followed by .NET SDK instances",
        )
        self._add_json_option(parser)

    def _add_vs_command(self, subparsers):
        """Add 'vs' subcommand."""
        parser = subparsers.add_parser(
            "vs",
            help="List Visual Studio instances",
            description="List Visual Studio instances from the developer console "
            "environment and the installation catalog",
        )
        parser.add_argument(
            "--type",
            dest="types",
            action="append",
            metavar="TYPE",
            help="Discovery type to include: developer-console, setup or sdk "
            "(repeatable, default: all)",
        )
        self._add_json_option(parser)

    def _add_sdks_command(self, subparsers):
        """Add 'sdks' subcommand."""
        parser = subparsers.add_parser(
            "sdks",
            help="List .NET SDK instances",
            description="List .NET SDK instances next to dotnet on PATH, newest first",
        )
        parser.add_argument(
            "--latest", action="store_true", help="Only print the newest SDK"
        )
        self._add_json_option(parser)

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.WARNING
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        module_name = self.command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main(args: Optional[List[str]] = None) -> None:
    """Console script entry point."""
    sys.exit(CLI().run(args))
