"""Mod registry - tracks loaded mods and attributes code to them."""

import threading
from typing import Any, Iterable, Iterator, Optional

from modregistry.core.errors import IncompatibleModError, RegistryError
from modregistry.core.logging import get_logger
from modregistry.models.compatibility import IncompatibilityRule
from modregistry.models.manifest import Manifest, Mod

from .compatibility import describe_incompatibility, find_incompatibility
from .identity import bound_target_type, first_match, iter_stack_modules, module_candidates


logger = get_logger("registry")


class ModRegistry:
    """Tracks the loaded mods.

    Responsible for:
    - Keeping mods in load order and looking up their manifests
    - Resolving which mod owns a module, type, callable or the current stack
    - Checking manifests against the known-incompatible rule set

    Mods are registered once during loading and never removed. Lookups
    return ``None`` when nothing matches; they never raise.
    """

    def __init__(self, incompatible_mods: Iterable[IncompatibilityRule] = ()):
        self._mods: list[Mod] = []
        self._names_by_module: dict[str, str] = {}
        self._incompatible_mods: tuple[IncompatibilityRule, ...] = tuple(incompatible_mods)
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, host_config) -> "ModRegistry":
        """Build a registry from a loaded ``HostConfig``."""
        return cls(host_config.incompatible_mods)

    @property
    def incompatible_mods(self) -> tuple[IncompatibilityRule, ...]:
        return self._incompatible_mods

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def register(self, mod: Mod) -> None:
        """Register a mod as loaded and as a source of diagnostics."""
        if mod is None:
            raise RegistryError("Can't register a missing mod instance")

        module = mod.module_identity
        name = mod.manifest.name

        with self._lock:
            previous = self._names_by_module.get(module)
            self._mods.append(mod)
            self._names_by_module[module] = name

        if previous is not None and previous != name:
            logger.warning(
                f"Mods '{previous}' and '{name}' share module '{module}'; "
                f"its code will now be attributed to '{name}'",
                component="registry",
                mod=mod.manifest.unique_id,
                package=module
            )
        logger.mod_registered(name, mod.manifest.unique_id, module)

    def get_all(self) -> Iterable[Manifest]:
        """Get metadata for all loaded mods, in load order.

        The result can be iterated more than once; each pass sees the
        mods registered so far.
        """
        return _ManifestView(self)

    def get(self, unique_id: str) -> Optional[Manifest]:
        """Get metadata for a loaded mod, or None if it isn't loaded."""
        for manifest in self.get_all():
            if manifest.unique_id == unique_id:
                return manifest
        return None

    def is_loaded(self, unique_id: str) -> bool:
        return self.get(unique_id) is not None

    def get_mods(self) -> list[Mod]:
        """Get all loaded mod instances, in load order."""
        with self._lock:
            return list(self._mods)

    def __len__(self) -> int:
        with self._lock:
            return len(self._mods)

    def __contains__(self, unique_id: object) -> bool:
        return isinstance(unique_id, str) and self.is_loaded(unique_id)

    # ------------------------------------------------------------------
    # Identity resolution
    # ------------------------------------------------------------------

    def get_mod_from_module(self, module_name: Optional[str]) -> Optional[str]:
        """Get the name of the mod whose package contains a module.

        Host and framework modules aren't mods, so ``None`` is the usual
        answer for them.
        """
        return _lookup(self._module_names(), module_name)

    def get_mod_from_type(self, cls: Optional[type]) -> Optional[str]:
        """Get the name of the mod which defines a type."""
        if cls is None:
            return None
        return self.get_mod_from_module(getattr(cls, "__module__", None))

    def get_mod_from_callable(self, func: Any) -> Optional[str]:
        """Get the name of the mod whose object a callable is bound to.

        Unbound functions and static methods carry no instance, so they
        can't be attributed this way.
        """
        if func is None:
            return None
        return self.get_mod_from_type(bound_target_type(func))

    def get_mod_from_stack(self) -> Optional[str]:
        """Get the name of the closest mod on the call stack."""
        names = self._module_names()
        if not names:
            return None
        return first_match(iter_stack_modules(), lambda module_name: _lookup(names, module_name))

    def _module_names(self) -> dict[str, str]:
        with self._lock:
            return dict(self._names_by_module)

    # ------------------------------------------------------------------
    # Compatibility
    # ------------------------------------------------------------------

    def get_incompatibility_record(self, manifest: Manifest) -> Optional[IncompatibilityRule]:
        """Get the rule that marks this mod version incompatible, if any."""
        return find_incompatibility(manifest, self._incompatible_mods)

    def ensure_compatible(self, manifest: Manifest) -> None:
        """Raise ``IncompatibleModError`` if the manifest matches a rule."""
        rule = self.get_incompatibility_record(manifest)
        if rule is None:
            return

        message = describe_incompatibility(rule, manifest)
        logger.mod_blocked(manifest.effective_key, str(manifest.version), rule.reason_phrase or "")
        raise IncompatibleModError(
            message,
            unique_id=manifest.effective_key,
            version=str(manifest.version),
            rule=rule
        )


def _lookup(names: dict[str, str], module_name: Optional[str]) -> Optional[str]:
    if not module_name:
        return None
    return first_match(module_candidates(module_name), names.get)


class _ManifestView:
    """Restartable view over a registry's manifests."""

    def __init__(self, registry: ModRegistry):
        self._registry = registry

    def __iter__(self) -> Iterator[Manifest]:
        for mod in self._registry.get_mods():
            yield mod.manifest

    def __len__(self) -> int:
        return len(self._registry)
