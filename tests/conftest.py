"""Shared fixtures."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch

from rtpreflight import PreflightConfig, RuntimeVersion, VersionChecker
from rtpreflight.config import MIN_VERSION_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: MonkeyPatch) -> None:
    """Keep a developer's minimum version override out of the tests."""
    monkeypatch.delenv(MIN_VERSION_ENV, raising=False)


@pytest.fixture
def minimum() -> RuntimeVersion:
    """The default minimum Docker version."""
    return RuntimeVersion(18, 9, 0)


@pytest.fixture
def checker() -> VersionChecker:
    """A checker with default settings."""
    return VersionChecker(PreflightConfig())


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """An empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
