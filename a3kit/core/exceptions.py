"""
Centralized exception hierarchy for a3kit.

The resolution core never raises these to its caller; it reports failures
through ResolutionResult. They are raised by configuration loading and by
callers that require a usable tool path.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class A3KitError(Exception):
    """Base exception for all a3kit errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(A3KitError):
    """Configuration parsing or validation error."""

    pass


# ============================================================================
# Resolution Exceptions
# ============================================================================


class ResolutionError(A3KitError):
    """Base exception when the a³ tool path could not be resolved."""

    pass


class NoCandidateFoundError(ResolutionError):
    """Raised when no installer package or launcher could be resolved."""

    pass


class UnsupportedModeError(ResolutionError):
    """Raised when a resolution mode is not available for the OS class."""

    pass


class MalformedPathError(ResolutionError):
    """Raised when a configured path cannot be turned into a tool path."""

    pass
