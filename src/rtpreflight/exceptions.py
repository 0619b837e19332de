"""Exceptions raised by rtpreflight."""


class PreflightError(Exception):
    """Base exception for all rtpreflight errors."""


class RuntimeVersionError(PreflightError):
    """Base for errors describing an incompatible container runtime."""


class MinVersionNotMetError(RuntimeVersionError):
    """Installed runtime is older than the minimum supported version."""


class WindowsContainersError(RuntimeVersionError):
    """Runtime is running in Windows containers mode."""


class InvalidVersionError(PreflightError, ValueError):
    """Raised when a version literal cannot be parsed."""


class ConfigError(PreflightError):
    """Raised when configuration cannot be loaded or is invalid."""
