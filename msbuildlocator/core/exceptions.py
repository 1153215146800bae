"""
Centralized exception hierarchy for msbuildlocator.

Discovery code raises only for conditions the caller has to act on. Per-candidate
problems (unparsable version directories, missing marker files, an absent
installation catalog) are logged and skipped instead.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class MSBuildLocatorError(Exception):
    """Base exception for all msbuildlocator errors."""

    pass


# ============================================================================
# Discovery Exceptions
# ============================================================================


class DiscoveryError(MSBuildLocatorError):
    """Raised when a discovery source cannot run at all.

    The SDK scan raises this when no PATH entry holds the ``dotnet`` host
    executable. It is fatal for that call and never retried.
    """

    pass


class InvalidVersionError(MSBuildLocatorError, ValueError):
    """Invalid version format."""

    pass


# ============================================================================
# Registration Exceptions
# ============================================================================


class ArgumentError(MSBuildLocatorError, ValueError):
    """Raised when an operation receives a missing or invalid argument."""

    def __init__(self, argument: str, message: str = ""):
        self.argument = argument
        super().__init__(message or f"Argument must not be None: {argument}")


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(MSBuildLocatorError):
    """Configuration parsing or validation error."""

    pass
