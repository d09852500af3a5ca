"""Incompatibility rule model."""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .version import SemanticVersion


class IncompatibilityRule(BaseModel):
    """A known-incompatible version range for one mod.

    A mod matches when its key equals ``id`` and its version falls within
    ``lower_version``..``upper_version`` (both inclusive, lower optional),
    unless its version string matches ``force_compatible_version``.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., alias="ID", description="Unique ID, or entry DLL for mods without one")
    name: str = Field(default="", alias="Name", description="Display name used in messages")
    lower_version: Optional[SemanticVersion] = Field(default=None, alias="LowerVersion")
    upper_version: SemanticVersion = Field(..., alias="UpperVersion")
    force_compatible_version: Optional[str] = Field(
        default=None,
        alias="ForceCompatibleVersion",
        description="Regex; a matching version string is exempt from the rule"
    )
    reason_phrase: Optional[str] = Field(default=None, alias="ReasonPhrase")
    update_url: Optional[str] = Field(default=None, alias="UpdateUrl")
    unofficial_update_url: Optional[str] = Field(default=None, alias="UnofficialUpdateUrl")

    @field_validator("force_compatible_version")
    @classmethod
    def _check_pattern(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value.strip():
            try:
                re.compile(value, re.IGNORECASE)
            except re.error as e:
                raise ValueError(f"invalid override pattern {value!r}: {e}") from e
        return value

    @property
    def display_name(self) -> str:
        return self.name or self.id

    def is_force_compatible(self, version: SemanticVersion) -> bool:
        """Whether the override pattern exempts this version string."""
        if not self.force_compatible_version or not self.force_compatible_version.strip():
            return False
        return re.search(self.force_compatible_version, str(version), re.IGNORECASE) is not None
