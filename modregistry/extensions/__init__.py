"""Extensions package - tracking and attribution of loaded mods."""

from .registry import ModRegistry
from .compatibility import describe_incompatibility, find_incompatibility

__all__ = [
    "ModRegistry",
    "describe_incompatibility",
    "find_incompatibility",
]
