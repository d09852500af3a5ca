"""Data models for the mod registry."""

from .version import SemanticVersion
from .manifest import Manifest, Mod
from .compatibility import IncompatibilityRule

__all__ = [
    "SemanticVersion",
    "Manifest",
    "Mod",
    "IncompatibilityRule",
]
