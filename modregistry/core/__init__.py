"""Core package - errors, logging, host config and diagnostics."""

from .errors import ConfigError, IncompatibleModError, ManifestError, RegistryError

__all__ = ["ConfigError", "IncompatibleModError", "ManifestError", "RegistryError"]
