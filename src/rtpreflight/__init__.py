"""rtpreflight - container runtime version preflight checks.

Decides whether the version string reported by an installed container runtime
meets a minimum supported version, and explains how to fix it when it does
not.
"""

from ._interpreter import InterpretedVersion, VersionKind, interpret_version
from ._version import __version__
from .checker import VersionChecker, check_version, meets_minimum
from .config import PreflightConfig, load_config
from .diagnostic import DiagnosticResult, ReasonCode
from .exceptions import (
    ConfigError,
    InvalidVersionError,
    MinVersionNotMetError,
    PreflightError,
    RuntimeVersionError,
    WindowsContainersError,
)
from .runtime_version import RuntimeVersion

__all__ = [
    "ConfigError",
    "DiagnosticResult",
    "InterpretedVersion",
    "InvalidVersionError",
    "MinVersionNotMetError",
    "PreflightConfig",
    "PreflightError",
    "ReasonCode",
    "RuntimeVersion",
    "RuntimeVersionError",
    "VersionChecker",
    "VersionKind",
    "WindowsContainersError",
    "__version__",
    "check_version",
    "interpret_version",
    "load_config",
    "meets_minimum",
]
