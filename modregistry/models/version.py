"""Semantic version model used by manifests and compatibility rules."""

import re
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from modregistry.core.errors import ManifestError


VERSION_PATTERN = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?(?:-(?P<build>[a-z0-9.-]+))?$",
    re.IGNORECASE,
)


class SemanticVersion(BaseModel):
    """A `major.minor[.patch][-build]` version.

    Instances are immutable and ordered. A release is newer than any
    pre-release build of the same numeric version.
    """
    model_config = ConfigDict(frozen=True)

    major: int = Field(..., ge=0)
    minor: int = Field(default=0, ge=0)
    patch: int = Field(default=0, ge=0)
    build: Optional[str] = Field(default=None, description="Pre-release tag, e.g. 'beta.2'")

    @model_validator(mode="before")
    @classmethod
    def _coerce_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return cls._parts(data)
        return data

    @classmethod
    def parse(cls, version: str) -> "SemanticVersion":
        """Parse a version string like '1.5', '1.5.2' or '2.0-beta'."""
        return cls(**cls._parts(version))

    @staticmethod
    def _parts(version: str) -> dict:
        match = VERSION_PATTERN.match(version.strip()) if version else None
        if match is None:
            raise ManifestError(
                f"Can't parse semantic version '{version}'",
                suggestion="Use the form major.minor[.patch][-build], e.g. 1.2.0",
            )
        return {
            "major": int(match.group("major")),
            "minor": int(match.group("minor")),
            "patch": int(match.group("patch") or 0),
            "build": match.group("build"),
        }

    def compare_to(self, other: Union["SemanticVersion", str]) -> int:
        """Return -1, 0 or 1 as this version is older, equal or newer."""
        other = _as_version(other)

        for mine, theirs in (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        ):
            if mine != theirs:
                return -1 if mine < theirs else 1

        if (self.build or "").lower() == (other.build or "").lower():
            return 0
        # release > pre-release
        if self.build is None:
            return 1
        if other.build is None:
            return -1
        return _compare_builds(self.build, other.build)

    def is_older_than(self, other: Union["SemanticVersion", str]) -> bool:
        return self.compare_to(other) < 0

    def is_newer_than(self, other: Union["SemanticVersion", str]) -> bool:
        return self.compare_to(other) > 0

    def __eq__(self, other: object) -> bool:
        # strings are accepted by the ordering methods only, so hashing stays consistent
        if isinstance(other, SemanticVersion):
            return self.compare_to(other) == 0
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, (self.build or "").lower()))

    def __lt__(self, other: Union["SemanticVersion", str]) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: Union["SemanticVersion", str]) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: Union["SemanticVersion", str]) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: Union["SemanticVersion", str]) -> bool:
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        result = f"{self.major}.{self.minor}"
        if self.patch:
            result += f".{self.patch}"
        if self.build:
            result += f"-{self.build}"
        return result


def _as_version(value: Union[SemanticVersion, str]) -> SemanticVersion:
    if isinstance(value, SemanticVersion):
        return value
    return SemanticVersion.parse(value)


def _compare_builds(left: str, right: str) -> int:
    """Compare pre-release tags segment by segment."""
    left_parts = left.lower().split(".")
    right_parts = right.lower().split(".")

    for mine, theirs in zip(left_parts, right_parts):
        if mine == theirs:
            continue
        if mine.isdigit() and theirs.isdigit():
            return -1 if int(mine) < int(theirs) else 1
        # numeric identifiers sort below alphanumeric ones
        if mine.isdigit():
            return -1
        if theirs.isdigit():
            return 1
        return -1 if mine < theirs else 1

    if len(left_parts) == len(right_parts):
        return 0
    return -1 if len(left_parts) < len(right_parts) else 1
