"""Tests for _interpreter.py."""

import pytest

from rtpreflight import RuntimeVersion, VersionKind, interpret_version
from rtpreflight._interpreter import split_platform


@pytest.mark.parametrize(
    "version_string, expected",
    [
        ("linux-20.10.7", ("linux", "20.10.7")),
        ("linux-18.09.0-20180720214833-f61e0f7", ("linux", "18.09.0-20180720214833-f61e0f7")),
        ("windows-", ("windows", "")),
        ("linux-library-import", ("linux", "library-import")),
        ("20.10.7", ("", "20.10.7")),
    ],
)
def test_split_platform(version_string: str, expected: tuple[str, str]) -> None:
    """Test that only the first dash separates the platform."""
    assert split_platform(version_string) == expected


@pytest.mark.parametrize(
    "version_part, version",
    [
        ("18.09.1", RuntimeVersion(18, 9, 1)),
        ("20.10.17", RuntimeVersion(20, 10, 17)),
        ("100.01.0", RuntimeVersion(100, 1, 0)),
        ("18.09.0-20180720214833-f61e0f7", RuntimeVersion(18, 9, 0)),
        ("18.09.0+build.5", RuntimeVersion(18, 9, 0)),
    ],
)
def test_numeric_with_patch(version_part: str, version: RuntimeVersion) -> None:
    """Test that full numeric versions are parsed, tolerating build suffixes."""
    interpreted = interpret_version(version_part)

    assert interpreted.kind is VersionKind.NUMERIC
    assert interpreted.is_numeric
    assert interpreted.raw == version_part
    assert interpreted.version == version
    assert interpreted.version is not None
    assert interpreted.version.has_patch


@pytest.mark.parametrize("version_part", ["18.09", "20.10-rc1"])
def test_numeric_without_patch(version_part: str) -> None:
    """Test that a missing patch is recorded rather than defaulted."""
    interpreted = interpret_version(version_part)

    assert interpreted.kind is VersionKind.NUMERIC
    assert interpreted.version is not None
    assert interpreted.version.components == 2
    assert not interpreted.version.has_patch


@pytest.mark.parametrize("version_part", ["dev", "library-import"])
def test_trusted_build_tags(version_part: str) -> None:
    """Test that known development build tags are recognized."""
    interpreted = interpret_version(version_part)

    assert interpreted.kind is VersionKind.TRUSTED_TAG
    assert interpreted.version is None
    assert interpreted.raw == version_part


@pytest.mark.parametrize(
    "version_part",
    [
        "foo.bar.baz",
        "18",
        "18.9.0",
        "8.09.0",
        "1a.09.0",
        "18.0b.0",
        "18.09.0.1",
        "v18.09.0",
        "Dev",
        "dev-build",
        "١٧.٠٩.٠",
        pytest.param("1" * 5000 + ".09.0", id="oversized-major"),
        "18.09.0\n",
        "",
    ],
)
def test_unparsable(version_part: str) -> None:
    """Test that anything else is unparsable."""
    interpreted = interpret_version(version_part)

    assert interpreted.kind is VersionKind.UNPARSABLE
    assert interpreted.version is None
    assert interpreted.raw == version_part
