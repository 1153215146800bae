"""
Command-line interface for msbuildlocator.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
