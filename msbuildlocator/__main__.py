"""
Entry point for running the msbuildlocator CLI as a module.

Usage: python -m msbuildlocator [command] [options]
"""

from msbuildlocator.cli.parser import main

if __name__ == "__main__":
    main()
