"""Custom exceptions for the mod registry.

Lookups never raise: a missing mod is reported as ``None``. These errors
cover the cases where the host hands us something unusable (a bad config
file, an unparseable version) or asks the registry to gate a blocked mod.
"""

from typing import Optional, Any


class RegistryError(Exception):
    """Base exception for all registry errors.

    Provides:
    - User-friendly message
    - Technical details for debugging
    - Suggested fixes when applicable
    """

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        suggestion: Optional[str] = None,
        cause: Optional[Exception] = None
    ):
        self.message = message
        self.details = details
        self.suggestion = suggestion
        self.cause = cause
        super().__init__(message)

    def format_user_friendly(self) -> str:
        """Format error for display to user."""
        parts = [f"❌ {self.message}"]

        if self.details:
            parts.append(f"   Details: {self.details}")

        if self.suggestion:
            parts.append(f"   💡 Try: {self.suggestion}")

        return "\n".join(parts)

    def __str__(self) -> str:
        return self.format_user_friendly()


class ConfigError(RegistryError):
    """The host config (rule set) couldn't be read or validated."""

    def __init__(self, message: str, config_path: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", None)
        if not details and config_path:
            details = f"Config file: {config_path}"
        suggestion = kwargs.pop("suggestion", None)
        if not suggestion and config_path:
            suggestion = "Fix the file or point MODREGISTRY_CONFIG at a valid one"
        super().__init__(message, details=details, suggestion=suggestion, **kwargs)
        self.config_path = config_path


class ManifestError(RegistryError):
    """A manifest field (usually the version) is malformed."""

    def __init__(self, message: str, field: Optional[str] = None, value: Optional[Any] = None, **kwargs):
        details = kwargs.pop("details", None)
        if not details and field:
            details = f"Field: {field}"
            if value is not None:
                details += f", Value: {repr(value)[:50]}"
        super().__init__(message, details=details, **kwargs)
        self.field = field
        self.value = value


class IncompatibleModError(RegistryError):
    """A mod matched an incompatibility rule and should not be loaded."""

    def __init__(
        self,
        message: str,
        unique_id: Optional[str] = None,
        version: Optional[str] = None,
        rule: Optional[Any] = None,
        **kwargs
    ):
        details = kwargs.pop("details", None)
        if not details:
            parts = []
            if unique_id:
                parts.append(f"Mod: {unique_id}")
            if version:
                parts.append(f"Version: {version}")
            if parts:
                details = ", ".join(parts)

        suggestion = kwargs.pop("suggestion", None)
        if not suggestion:
            suggestion = "Update the mod to a newer version"

        super().__init__(message, details=details, suggestion=suggestion, **kwargs)
        self.unique_id = unique_id
        self.version = version
        self.rule = rule


def format_exception_chain(error: Exception, max_depth: int = 5) -> str:
    """Format an exception chain for display.

    Handles nested exceptions and provides clean output.
    """
    lines = []
    current = error
    depth = 0

    while current and depth < max_depth:
        if isinstance(current, RegistryError):
            lines.append(current.format_user_friendly())
        else:
            lines.append(f"❌ {type(current).__name__}: {current}")

        current = getattr(current, "__cause__", None) or getattr(current, "cause", None)
        depth += 1

        if current:
            lines.append("   Caused by:")

    return "\n".join(lines)
