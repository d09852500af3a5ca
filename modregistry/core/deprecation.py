"""Deprecation warnings attributed to the mod that triggered them."""

import logging
import threading
import traceback
from enum import Enum
from typing import Optional

from modregistry.core.logging import get_logger
from modregistry.extensions.registry import ModRegistry

logger = get_logger("deprecation")

UNKNOWN_SOURCE = "<unknown>"


class DeprecationLevel(str, Enum):
    """How urgently a deprecated API should be migrated away from."""
    NOTICE = "notice"                    # no immediate action needed
    INFO = "info"                        # mod authors should update
    PENDING_REMOVAL = "pending_removal"  # will break in an upcoming release


_LOG_LEVELS = {
    DeprecationLevel.NOTICE: logging.DEBUG,
    DeprecationLevel.INFO: logging.INFO,
    DeprecationLevel.PENDING_REMOVAL: logging.WARNING,
}


class DeprecationManager:
    """Logs each deprecated API use once per mod."""

    def __init__(self, registry: ModRegistry, host_name: str = "the host API"):
        self._registry = registry
        self._host_name = host_name
        self._warned: set[str] = set()
        self._lock = threading.Lock()

    def warn(self, noun_phrase: str, version: str, level: DeprecationLevel) -> None:
        """Log a deprecation warning for the mod calling into deprecated code."""
        self.warn_for(self._registry.get_mod_from_stack(), noun_phrase, version, level)

    def warn_for(
        self,
        source: Optional[str],
        noun_phrase: str,
        version: str,
        level: DeprecationLevel
    ) -> None:
        """Log a deprecation warning for an explicit source mod.

        Args:
            source: Friendly mod name, or None if it couldn't be determined
            noun_phrase: What was used, e.g. "the Config.Save method"
            version: Host version which deprecated it
            level: How urgent the migration is
        """
        if not self.mark_warned(source, noun_phrase, version):
            return

        message = (
            f"{source or 'An unknown mod'} used {noun_phrase}, "
            f"which is deprecated since {self._host_name} {version}."
        )
        if source is None:
            message += "\n" + "".join(traceback.format_stack())

        logger.deprecation_warned(_LOG_LEVELS[DeprecationLevel(level)], source or UNKNOWN_SOURCE, message)

    def mark_warned(self, source: Optional[str], noun_phrase: str, version: str) -> bool:
        """Mark a deprecation as warned. Returns False if it already was."""
        key = f"{source or UNKNOWN_SOURCE}::{noun_phrase}::{version}"
        with self._lock:
            if key in self._warned:
                return False
            self._warned.add(key)
            return True

    @staticmethod
    def is_virtual_method_implemented(subtype: type, base_type: type, name: str) -> bool:
        """Whether ``subtype`` overrides ``name`` instead of inheriting it from ``base_type``."""
        for cls in subtype.__mro__:
            if name in vars(cls):
                return cls is not base_type and issubclass(cls, base_type)
        return False
