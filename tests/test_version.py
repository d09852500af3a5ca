"""Tests for SemanticVersion."""

import pytest

from modregistry.core.errors import ManifestError
from modregistry.models.version import SemanticVersion


@pytest.mark.parametrize("raw, expected", [
    ("1.0", (1, 0, 0, None)),
    ("1.5.2", (1, 5, 2, None)),
    ("2.0-beta", (2, 0, 0, "beta")),
    ("3.1.4-RC.2", (3, 1, 4, "RC.2")),
    ("  0.9  ", (0, 9, 0, None)),
])
def test_parse(raw, expected):
    version = SemanticVersion.parse(raw)

    assert (version.major, version.minor, version.patch, version.build) == expected


@pytest.mark.parametrize("raw", ["", "1", "1.x", "v1.0", "1.0.0.0", "1.0-", "1.0-beta!"])
def test_parse_invalid(raw):
    with pytest.raises(ManifestError):
        SemanticVersion.parse(raw)


def test_str_omits_zero_patch():
    assert str(SemanticVersion.parse("1.5.0")) == "1.5"
    assert str(SemanticVersion.parse("1.5.3")) == "1.5.3"
    assert str(SemanticVersion.parse("1.5.0-beta")) == "1.5-beta"


def test_ordering():
    ordered = ["0.9", "1.0-alpha", "1.0-alpha.1", "1.0-alpha.beta", "1.0-beta.2", "1.0-beta.11", "1.0", "1.0.1", "1.10"]
    versions = [SemanticVersion.parse(v) for v in ordered]

    assert sorted(reversed(versions)) == versions


def test_is_older_and_newer():
    version = SemanticVersion.parse("1.5")

    assert version.is_older_than("2.0")
    assert version.is_newer_than("1.4.9")
    assert not version.is_older_than("1.5.0")
    assert not version.is_newer_than("1.5.0")


def test_release_newer_than_prerelease():
    assert SemanticVersion.parse("1.0").is_newer_than("1.0-rc.1")


def test_equality_ignores_build_case_and_zero_patch():
    assert SemanticVersion.parse("1.0-Beta") == SemanticVersion.parse("1.0.0-beta")
    assert SemanticVersion.parse("1.0") == SemanticVersion.parse("1.0.0")
    assert hash(SemanticVersion.parse("1.0-Beta")) == hash(SemanticVersion.parse("1.0.0-beta"))


def test_string_coercion_in_models():
    version = SemanticVersion.model_validate("2.3")

    assert version.major == 2
    assert version.minor == 3


def test_equality_only_between_versions():
    """Strings order against versions but never compare equal, keeping hash consistent."""
    version = SemanticVersion.parse("1.0")

    assert version != "1.0"
    assert version <= "1.0"
    assert version >= "1.0.0"
    assert len({version, "1.0"}) == 2
    assert {version: "a"}.get("1.0") is None
