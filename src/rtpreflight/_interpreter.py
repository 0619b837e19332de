"""Interpretation of raw runtime version strings."""

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from .runtime_version import FULL_COMPONENTS, RuntimeVersion

PLATFORM_SEPARATOR = "-"

# Two zero-padded leading ASCII components, an optional patch, then either the
# end of the string or a build-metadata suffix such as "-20180720214833-f61e0f7".
NUMERIC_VERSION_RE = re.compile(
    r"^(?P<major>[0-9]{2,})"
    r"\.(?P<minor>[0-9]{2,})"
    r"(?:\.(?P<patch>[0-9]+))?"
    r"(?:[-+].*)?\Z"
)

# "dev" is reported by `make binary && make install` builds of Docker (Moby),
# "library-import" by `go build github.com/docker/docker/cmd/dockerd`.
TRUSTED_BUILD_TAGS = frozenset({"dev", "library-import"})


class VersionKind(StrEnum):
    """How a version part was classified."""

    NUMERIC = "numeric"
    TRUSTED_TAG = "trusted_tag"
    UNPARSABLE = "unparsable"


@dataclass(frozen=True)
class InterpretedVersion:
    """Result of interpreting the version part of a runtime version string.

    Attributes:
        kind: Classification of the version part.
        raw: The version part exactly as reported.
        version: Parsed version, only set for ``VersionKind.NUMERIC``.
    """

    kind: VersionKind
    raw: str
    version: RuntimeVersion | None = None

    @property
    def is_numeric(self: Self) -> bool:
        """Whether a numeric version was parsed."""
        return self.kind is VersionKind.NUMERIC


def split_platform(version_string: str) -> tuple[str, str]:
    """Split ``<platform>-<versionPart>`` into its two parts.

    Only the first separator splits, so suffixes keep their own dashes. A
    string without a separator has an empty platform and is all version part.

    Args:
        version_string: Raw string reported by the runtime.

    Returns:
        Tuple of (platform, version part).
    """
    platform, sep, version_part = version_string.partition(PLATFORM_SEPARATOR)
    if not sep:
        return "", version_string
    return platform, version_part


def interpret_version(version_part: str) -> InterpretedVersion:
    """Classify a version part as numeric, trusted build tag or unparsable.

    Args:
        version_part: Everything after the platform prefix.

    Returns:
        The interpretation. Never raises.
    """
    match = NUMERIC_VERSION_RE.match(version_part)
    if match:
        patch = match.group("patch")
        try:
            version = RuntimeVersion(
                int(match.group("major")),
                int(match.group("minor")),
                int(patch) if patch is not None else 0,
                components=FULL_COMPONENTS if patch is not None else 2,
            )
        except ValueError:
            # int() refuses components longer than sys.get_int_max_str_digits().
            return InterpretedVersion(VersionKind.UNPARSABLE, version_part)
        return InterpretedVersion(VersionKind.NUMERIC, version_part, version)

    if version_part in TRUSTED_BUILD_TAGS:
        return InterpretedVersion(VersionKind.TRUSTED_TAG, version_part)

    return InterpretedVersion(VersionKind.UNPARSABLE, version_part)
