"""
Entry point for running the msbuildlocator CLI as a module.

Usage: python -m msbuildlocator.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
