"""Tests for manifest and rule models."""

import pytest
from pydantic import ValidationError

from modregistry.models.compatibility import IncompatibilityRule
from modregistry.models.manifest import Manifest, Mod


def test_manifest_from_json_keys():
    """Test that manifests accept the host's manifest.json keys."""
    manifest = Manifest.model_validate({
        "Name": "Lookup Anything",
        "Author": "Pathoschild",
        "Version": "1.10.1",
        "Description": "Look up anything",
        "UniqueID": "Pathoschild.LookupAnything",
        "EntryDll": "LookupAnything.dll",
        "MinimumApiVersion": "1.8",
    })

    assert manifest.unique_id == "Pathoschild.LookupAnything"
    assert str(manifest.version) == "1.10.1"
    assert manifest.minimum_api_version.minor == 8
    assert manifest.to_display_string() == "Lookup Anything 1.10.1 by Pathoschild"


def test_manifest_is_immutable(make_manifest):
    manifest = make_manifest("A.Mod")

    with pytest.raises(ValidationError):
        manifest.unique_id = "B.Mod"


def test_effective_key(make_manifest):
    assert make_manifest("A.Mod", entry_dll="A.dll").effective_key == "A.Mod"
    assert make_manifest("", entry_dll="A.dll").effective_key == "A.dll"
    assert make_manifest("  ", entry_dll="A.dll").effective_key == "A.dll"


def test_mod_repr(make_manifest):
    mod = Mod(make_manifest("A.Mod", "1.2"), module_identity="a_mod")

    assert repr(mod) == "<Mod A.Mod v1.2>"
    assert mod.module_identity == "a_mod"


def test_rule_from_json_keys():
    rule = IncompatibilityRule.model_validate({
        "ID": "Entoarox.EntoaroxFramework",
        "Name": "Entoarox Framework",
        "LowerVersion": "1.0",
        "UpperVersion": "1.7.9",
        "ForceCompatibleVersion": "^1.7.9-alpha",
        "ReasonPhrase": "it needs updating",
        "UpdateUrl": "https://example.com/mod",
    })

    assert rule.id == "Entoarox.EntoaroxFramework"
    assert str(rule.upper_version) == "1.7.9"
    assert rule.display_name == "Entoarox Framework"
    assert rule.is_force_compatible(rule.upper_version) is False


def test_rule_requires_upper_version():
    with pytest.raises(ValidationError):
        IncompatibilityRule.model_validate({"ID": "X"})
