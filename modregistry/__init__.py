"""modregistry: registry of loaded mods for a host's extension runtime."""

from modregistry.extensions.registry import ModRegistry
from modregistry.models import IncompatibilityRule, Manifest, Mod, SemanticVersion

__version__ = "0.1.0"

__all__ = [
    "ModRegistry",
    "IncompatibilityRule",
    "Manifest",
    "Mod",
    "SemanticVersion",
]
