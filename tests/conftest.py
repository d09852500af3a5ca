"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

# Add project root to Python path so 'modregistry' is importable without install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import tempfile
import textwrap
import types
from typing import Generator

import pytest

from modregistry.extensions.registry import ModRegistry
from modregistry.models.compatibility import IncompatibilityRule
from modregistry.models.manifest import Manifest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_manifest():
    """Factory for creating manifests."""
    def _make(unique_id: str = "Example.Mod", version: str = "1.0", name: str = None, entry_dll: str = ""):
        return Manifest(
            unique_id=unique_id,
            name=name or unique_id or entry_dll,
            version=version,
            entry_dll=entry_dll
        )
    return _make


@pytest.fixture
def make_rule():
    """Factory for creating incompatibility rules."""
    def _make(id: str = "Example.Mod", upper: str = "2.0", lower: str = None, force: str = None, **kwargs):
        return IncompatibilityRule(
            id=id,
            lower_version=lower,
            upper_version=upper,
            force_compatible_version=force,
            **kwargs
        )
    return _make


@pytest.fixture
def mod_module():
    """Factory for throwaway modules standing in for a mod's package.

    The source is executed with ``__name__`` set to the module name, so
    classes and frames inside it report that module. Modules are removed
    from ``sys.modules`` afterwards.
    """
    created = []

    def _make(name: str, source: str) -> types.ModuleType:
        module = types.ModuleType(name)
        module.__package__ = name.rpartition(".")[0] or name
        sys.modules[name] = module
        created.append(name)
        exec(compile(textwrap.dedent(source), f"<{name}>", "exec"), module.__dict__)
        return module

    yield _make

    for name in created:
        sys.modules.pop(name, None)


@pytest.fixture
def registry() -> ModRegistry:
    return ModRegistry()


MOD_SOURCE = '''
from modregistry.models.manifest import Mod


class ExampleMod(Mod):
    def on_update(self):
        return "updated"

    @classmethod
    def create(cls):
        return cls

    @staticmethod
    def helper():
        return "static"


def call_into(callback):
    """Calls back into host code from inside the mod."""
    return callback()


class Handler:
    def handle(self, callback):
        return call_into(callback)
'''


@pytest.fixture
def mod_source() -> str:
    return MOD_SOURCE
