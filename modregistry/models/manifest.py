"""Manifest and mod instance models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .version import SemanticVersion


class Manifest(BaseModel):
    """Identity record for a mod, as read from its manifest.json.

    Owned by the loader. The registry keeps a reference and never mutates it.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    unique_id: str = Field(default="", alias="UniqueID", description="Unique mod ID, the lookup key")
    name: str = Field(..., alias="Name", description="Display name")
    version: SemanticVersion = Field(..., alias="Version")
    entry_dll: str = Field(
        default="",
        alias="EntryDll",
        description="Entry point identifier, used as the key when unique_id is blank"
    )
    author: str = Field(default="", alias="Author")
    description: str = Field(default="", alias="Description")
    minimum_api_version: Optional[SemanticVersion] = Field(default=None, alias="MinimumApiVersion")

    @property
    def effective_key(self) -> str:
        """The unique ID, or the entry point when the ID is blank."""
        if self.unique_id and self.unique_id.strip():
            return self.unique_id
        return self.entry_dll

    def to_display_string(self) -> str:
        author = f" by {self.author}" if self.author else ""
        return f"{self.name} {self.version}{author}"


def default_module_identity(cls: type) -> str:
    """Module that defines a class.

    A mod defined in a package's ``__init__`` gets the package name, so its
    submodules resolve to it too. Sibling single-module mods stay distinct.
    """
    return cls.__module__


class Mod:
    """A loaded mod.

    Mods subclass this in their entry module. The loader constructs the
    instance, hands it its manifest, and registers it once with the
    ``ModRegistry``.
    """

    def __init__(self, manifest: Manifest, module_identity: Optional[str] = None):
        self.manifest = manifest
        self._module_identity = module_identity

    @property
    def module_identity(self) -> str:
        """Dotted name of the module (or package) containing this mod's code."""
        if self._module_identity:
            return self._module_identity
        return default_module_identity(type(self))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.manifest.unique_id or self.manifest.entry_dll} v{self.manifest.version}>"
