"""Diagnostic produced by a runtime version check."""

from enum import StrEnum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import RuntimeVersionError


class ReasonCode(StrEnum):
    """Machine-readable reasons a runtime was rejected."""

    WINDOWS_CONTAINERS = "PROVIDER_DOCKER_WINDOWS_CONTAINERS"
    VERSION_LOW = "PROVIDER_DOCKER_VERSION_LOW"


class DiagnosticResult(BaseModel):
    """Outcome of checking a runtime version string.

    An empty result (no reason, no error, no fix) means the runtime is
    acceptable. ``error`` holds the error kind rather than an instance so two
    checks of the same input compare equal.

    Attributes:
        reason: Empty, or a ``ReasonCode`` value.
        error: None, or the ``RuntimeVersionError`` subclass classifying the
            failure.
        fix: Remediation message, only set when the version was accepted but
            could not be verified.
        doc: Documentation link for failing outcomes.
    """

    model_config = ConfigDict(frozen=True)

    reason: str = ""
    error: type[RuntimeVersionError] | None = None
    fix: str = ""
    doc: str = Field(default="", description="Documentation link")

    @model_validator(mode="after")
    def error_requires_reason(self: Self) -> Self:
        if self.error is not None and not self.reason:
            raise ValueError("A diagnostic with an error must carry a reason")
        return self

    @property
    def healthy(self: Self) -> bool:
        """Whether the runtime can be used."""
        return self.error is None

    def raise_for_error(self: Self) -> None:
        """Raise the classified error, if any.

        Raises:
            RuntimeVersionError: The subclass stored in ``error``, with the
                reason as its message.
        """
        if self.error is not None:
            raise self.error(self.reason)

    def to_dict(self: Self) -> dict[str, Any]:
        """Return a JSON-serializable rendering of the diagnostic.

        Returns:
            Dictionary with the error kind rendered as its class name.
        """
        return {
            "reason": self.reason,
            "error": self.error.__name__ if self.error is not None else None,
            "fix": self.fix,
            "doc": self.doc,
            "healthy": self.healthy,
        }
