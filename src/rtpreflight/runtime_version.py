"""Models the numeric version reported by a container runtime."""

from dataclasses import dataclass, field
from typing import Self

from .exceptions import InvalidVersionError

FULL_COMPONENTS = 3


@dataclass(frozen=True, order=True)
class RuntimeVersion:
    """Numeric runtime version.

    Ordering only looks at the numeric components. ``components`` records how
    many of them the version string actually carried, so a two-part version
    such as ``"18.09"`` can be compared without pretending its patch is zero.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number (0 when not supplied).
        components: Number of components supplied, 2 or 3.
    """

    major: int
    minor: int
    patch: int = 0
    components: int = field(default=FULL_COMPONENTS, compare=False)

    def __post_init__(self: Self) -> None:
        """Reject negative components and impossible component counts."""
        if self.major < 0 or self.minor < 0 or self.patch < 0:
            raise InvalidVersionError(
                f"Version components must be non-negative: "
                f"{self.major}.{self.minor}.{self.patch}"
            )
        if self.components not in (2, FULL_COMPONENTS):
            raise InvalidVersionError(
                f"Version must have 2 or 3 components, got {self.components}"
            )

    @classmethod
    def parse(cls, version_str: str) -> Self:
        """Parse a plain ``major.minor[.patch]`` version string.

        This is the strict parser used for configured minimum versions. Raw
        runtime output goes through :func:`rtpreflight.interpret_version`
        instead, which never raises.

        Args:
            version_str: Version string such as ``"18.09.0"`` or ``"20.10"``.

        Returns:
            Parsed RuntimeVersion instance.

        Raises:
            InvalidVersionError: If the version string format is invalid.
        """
        parts = version_str.strip().split(".")
        if len(parts) not in (2, FULL_COMPONENTS):
            raise InvalidVersionError(f"Invalid version format: {version_str}")

        if not all(part.isascii() and part.isdigit() for part in parts):
            raise InvalidVersionError(f"Invalid version format: {version_str}")

        try:
            numbers = [int(part) for part in parts]
        except ValueError as e:
            raise InvalidVersionError(f"Invalid version format: {version_str}") from e
        if len(numbers) == 2:  # noqa: PLR2004
            return cls(numbers[0], numbers[1], components=2)
        return cls(numbers[0], numbers[1], numbers[2])

    @property
    def has_patch(self: Self) -> bool:
        """Whether the patch component was supplied."""
        return self.components == FULL_COMPONENTS

    def as_tuple(self: Self) -> tuple[int, ...]:
        """Return only the supplied components.

        Returns:
            ``(major, minor)`` or ``(major, minor, patch)``.
        """
        return (self.major, self.minor, self.patch)[: self.components]

    def __str__(self: Self) -> str:
        """Return the zero-padded representation used in diagnostics.

        Returns:
            Version string in format ``"MM.mm.p"``.
        """
        return f"{self.major:02d}.{self.minor:02d}.{self.patch}"

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        if self.has_patch:
            return f"RuntimeVersion({self.major}, {self.minor}, {self.patch})"
        return f"RuntimeVersion({self.major}, {self.minor}, components=2)"
