"""Test fixtures for msbuildlocator tests.

Fixtures are organized by type:

- installations: Fake .NET and Visual Studio installation trees
- environments: Environment mappings and platform info

Import fixtures in your tests using:
    from tests.fixtures.installations import make_dotnet_install
"""

__all__ = [
    "installations",
    "environments",
]
