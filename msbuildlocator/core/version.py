"""
Version value type for discovered MSBuild instances.

Accepts the same shapes as .NET's ``System.Version``: two to four
dot-separated non-negative integers (``major.minor[.build[.revision]]``).
Components that were not given compare as -1, so ``1.0 < 1.0.0 < 1.0.0.0``.

Example:
    >>> Version.parse("6.0.100") > Version.parse("6.0.99")
    True
    >>> Version.try_parse("6.0.100-preview.1") is None
    True
"""

import re
from typing import Optional, Tuple

from .exceptions import InvalidVersionError

_VERSION_PATTERN = re.compile(
    r"^\s*([0-9]+)\.([0-9]+)(?:\.([0-9]+))?(?:\.([0-9]+))?\s*$"
)

# System.Version components are Int32.
_MAX_COMPONENT = 2**31 - 1

_UNSET = -1


class Version:
    """
    Structured, comparable toolchain version.

    Example:
        >>> v1 = Version.parse("16.11")
        >>> v2 = Version.parse("17.0.31903.59")
        >>> v2 > v1
        True
        >>> str(v1)
        '16.11'
    """

    __slots__ = ("major", "minor", "build", "revision")

    def __init__(self, major: int, minor: int, build: int = _UNSET, revision: int = _UNSET):
        """
        Create a version from its components.

        Args:
            major: Major component
            minor: Minor component
            build: Build component, -1 when absent
            revision: Revision component, -1 when absent (requires build)

        Raises:
            InvalidVersionError: If a component is out of range
        """
        for component in (major, minor):
            if component < 0 or component > _MAX_COMPONENT:
                raise InvalidVersionError(f"Version component out of range: {component}")
        for component in (build, revision):
            if component < _UNSET or component > _MAX_COMPONENT:
                raise InvalidVersionError(f"Version component out of range: {component}")
        if build == _UNSET and revision != _UNSET:
            raise InvalidVersionError("Version revision requires a build component")

        object.__setattr__(self, "major", major)
        object.__setattr__(self, "minor", minor)
        object.__setattr__(self, "build", build)
        object.__setattr__(self, "revision", revision)

    def __setattr__(self, name, value):
        raise AttributeError(f"Version is immutable, cannot set '{name}'")

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """
        Parse a version string.

        Args:
            version_string: Version in format "major.minor[.build[.revision]]"

        Returns:
            Parsed Version

        Raises:
            InvalidVersionError: If the format is invalid
        """
        if version_string is None:
            raise InvalidVersionError("Version string must not be None")

        match = _VERSION_PATTERN.match(version_string)
        if not match:
            raise InvalidVersionError(
                f"Invalid version format: {version_string!r}. "
                f"Expected format: major.minor[.build[.revision]]"
            )

        parts = [int(group) if group is not None else _UNSET for group in match.groups()]
        return cls(*parts)

    @classmethod
    def try_parse(cls, version_string: Optional[str]) -> Optional["Version"]:
        """
        Parse a version string, returning None instead of raising.

        Args:
            version_string: Version string, may be None

        Returns:
            Parsed Version or None if the string is missing or invalid
        """
        if not version_string:
            return None
        try:
            return cls.parse(version_string)
        except InvalidVersionError:
            return None

    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Comparison key; absent components are -1."""
        return (self.major, self.minor, self.build, self.revision)

    def __lt__(self, other: "Version") -> bool:
        """Less than comparison."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: "Version") -> bool:
        """Less than or equal comparison."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: "Version") -> bool:
        """Greater than comparison."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: "Version") -> bool:
        """Greater than or equal comparison."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() >= other.as_tuple()

    def __eq__(self, other: object) -> bool:
        """Equality comparison."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __ne__(self, other: object) -> bool:
        """Inequality comparison."""
        if not isinstance(other, Version):
            return NotImplemented
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __str__(self) -> str:
        """String representation with only the components that were given."""
        return ".".join(str(part) for part in self.as_tuple() if part != _UNSET)

    def __repr__(self) -> str:
        """Developer representation."""
        return f"Version('{self}')"
