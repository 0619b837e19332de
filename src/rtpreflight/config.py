"""Configuration for runtime version checks.

Configuration is read once at startup, from ``rtpreflight.toml`` or the
``[tool.rtpreflight]`` table of ``pyproject.toml``, and handed to
:class:`rtpreflight.VersionChecker`. The minimum version can also be
overridden with the ``RTPREFLIGHT_MIN_VERSION`` environment variable.

Example ``rtpreflight.toml``:

    [rtpreflight]
    runtime_name = "Docker"
    minimum_version = "18.09.0"
"""

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigError, InvalidVersionError
from .runtime_version import RuntimeVersion

CONFIG_FILENAME = "rtpreflight.toml"
PYPROJECT_FILENAME = "pyproject.toml"
MIN_VERSION_ENV = "RTPREFLIGHT_MIN_VERSION"

DEFAULT_MINIMUM_VERSION = RuntimeVersion(18, 9, 0)
DEFAULT_DOC_URL = "https://minikube.sigs.k8s.io/docs/drivers/docker/"


class PreflightConfig(BaseModel):
    """Settings for a runtime version check.

    Attributes:
        runtime_name: Display name of the runtime used in remediation messages.
        minimum_version: Oldest runtime version considered supported.
        unsupported_platforms: Platform tags rejected before any version
            interpretation.
        doc_url: Documentation page linked from failing diagnostics.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    runtime_name: str = "Docker"
    minimum_version: RuntimeVersion = DEFAULT_MINIMUM_VERSION
    unsupported_platforms: frozenset[str] = frozenset({"windows"})
    doc_url: str = DEFAULT_DOC_URL

    @field_validator("minimum_version", mode="before")
    @classmethod
    def parse_minimum_version(cls, value: Any) -> Any:
        if isinstance(value, str):
            version = RuntimeVersion.parse(value)
            if not version.has_patch:
                raise InvalidVersionError(
                    f"Minimum version needs major.minor.patch, got {value}"
                )
            return version
        return value

    @field_validator("unsupported_platforms", mode="before")
    @classmethod
    def lowercase_platforms(cls, value: Any) -> Any:
        if isinstance(value, list | tuple | set | frozenset):
            return frozenset(str(platform).lower() for platform in value)
        return value


def find_config_file(start: Path | None = None) -> Path | None:
    """Find a configuration file in the given directory.

    ``rtpreflight.toml`` wins over ``pyproject.toml``; a ``pyproject.toml``
    only counts when it has a ``[tool.rtpreflight]`` table.

    Args:
        start: Directory to search. Defaults to the current directory.

    Returns:
        Path to the configuration file, or None if there is none.
    """
    directory = start or Path.cwd()

    candidate = directory / CONFIG_FILENAME
    if candidate.is_file():
        return candidate

    pyproject = directory / PYPROJECT_FILENAME
    if pyproject.is_file() and "rtpreflight" in _read_toml(pyproject).get(
        "tool", {}
    ):
        return pyproject

    return None


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e


def _extract_section(path: Path, data: dict[str, Any]) -> dict[str, Any]:
    if path.name == PYPROJECT_FILENAME:
        section = data.get("tool", {}).get("rtpreflight", {})
    else:
        section = data.get("rtpreflight", {})

    if not isinstance(section, dict):
        raise ConfigError(f"rtpreflight configuration in {path} must be a table")
    return section


def load_config(path: Path | None = None) -> PreflightConfig:
    """Load the check configuration.

    Args:
        path: Explicit configuration file. When omitted, the current
            directory is searched with :func:`find_config_file`.

    Returns:
        The loaded configuration, or the defaults when no file exists.

    Raises:
        ConfigError: If the file is missing, unreadable or holds invalid
            settings.
    """
    settings: dict[str, Any] = {}

    if path is not None and not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")

    config_path = path or find_config_file()
    if config_path is not None:
        settings.update(_extract_section(config_path, _read_toml(config_path)))

    env_minimum = os.getenv(MIN_VERSION_ENV)
    if env_minimum:
        settings["minimum_version"] = env_minimum

    try:
        return PreflightConfig.model_validate(settings)
    except ValidationError as e:
        source = config_path or "defaults"
        raise ConfigError(f"Invalid configuration ({source}): {e}") from e
