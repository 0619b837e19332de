"""Runtime version check."""

from typing import Self

from ._interpreter import (
    InterpretedVersion,
    VersionKind,
    interpret_version,
    split_platform,
)
from .config import PreflightConfig
from .diagnostic import DiagnosticResult, ReasonCode
from .exceptions import MinVersionNotMetError, WindowsContainersError
from .runtime_version import RuntimeVersion

WINDOWS_CONTAINERS_ANCHOR = "#verify-docker-container-type-is-linux"


def meets_minimum(version: RuntimeVersion, minimum: RuntimeVersion) -> bool:
    """Compare a runtime version against the minimum.

    Components are compared major first. Only the components the runtime
    actually reported take part: ``18.09`` meets ``18.09.5`` because its
    leading components already match and the patch was never supplied.

    Args:
        version: Parsed runtime version.
        minimum: Minimum supported version.

    Returns:
        True if the version is new enough.
    """
    for have, need in zip(version.as_tuple(), minimum.as_tuple(), strict=False):
        if have != need:
            return have > need
    return True


class VersionChecker:
    """Checks raw runtime version strings against a minimum version.

    Example:
        >>> checker = VersionChecker()
        >>> checker.check("linux-20.10.7").healthy
        True
        >>> checker.check("windows-20.10.7").reason
        'PROVIDER_DOCKER_WINDOWS_CONTAINERS'
    """

    def __init__(
        self: Self,
        config: PreflightConfig | None = None,
        minimum: RuntimeVersion | None = None,
    ) -> None:
        """Initialize the checker.

        Args:
            config: Check settings. Defaults to ``PreflightConfig()``.
            minimum: Overrides ``config.minimum_version`` when given.
        """
        self.config = config or PreflightConfig()
        self.minimum = minimum or self.config.minimum_version

    def check(self: Self, version_string: str) -> DiagnosticResult:
        """Check the version string reported by the runtime.

        Args:
            version_string: Output of the runtime in the form
                ``<platform>-<version-or-tag>``, e.g. ``"linux-20.10.7"``.

        Returns:
            The diagnostic. Every outcome is returned, never raised.
        """
        platform, version_part = split_platform(version_string)

        if platform.lower() in self.config.unsupported_platforms:
            return DiagnosticResult(
                reason=ReasonCode.WINDOWS_CONTAINERS,
                error=WindowsContainersError,
                doc=self.config.doc_url + WINDOWS_CONTAINERS_ANCHOR,
            )

        return self._diagnose(interpret_version(version_part))

    def _diagnose(self: Self, interpreted: InterpretedVersion) -> DiagnosticResult:
        version = interpreted.version
        if interpreted.kind is VersionKind.NUMERIC and version is not None:
            if meets_minimum(version, self.minimum):
                return DiagnosticResult()
            return DiagnosticResult(
                reason=ReasonCode.VERSION_LOW,
                error=MinVersionNotMetError,
                doc=self.config.doc_url,
            )

        return DiagnosticResult(fix=self.unverified_fix(interpreted.raw))

    def unverified_fix(self: Self, current: str) -> str:
        """Build the advice shown when the version could not be verified.

        Args:
            current: Version part exactly as the runtime reported it.

        Returns:
            Remediation message naming the minimum and current versions.
        """
        return (
            f"Install the official release of {self.config.runtime_name} "
            f"(Minimum recommended version is {self.minimum}, "
            f"current version is {current})"
        )


_default_checker = VersionChecker()


def check_version(version_string: str) -> DiagnosticResult:
    """Check a runtime version string against the default minimum version.

    Args:
        version_string: Output of the runtime, e.g. ``"linux-20.10.7"``.

    Returns:
        The diagnostic.
    """
    return _default_checker.check(version_string)
