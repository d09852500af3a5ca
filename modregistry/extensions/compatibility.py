"""Compatibility evaluation - match manifests against incompatibility rules."""

from typing import Iterable, Optional

from modregistry.models.compatibility import IncompatibilityRule
from modregistry.models.manifest import Manifest


DEFAULT_REASON = "this version is not compatible with the latest version of the host"


def rule_matches(rule: IncompatibilityRule, manifest: Manifest) -> bool:
    """Whether a single rule blocks this manifest.

    All of these must hold:
    - the rule targets the manifest's effective key
    - the version is not older than the lower bound (if any)
    - the version is not newer than the upper bound
    - the version string doesn't match the override pattern (if any)
    """
    version = manifest.version
    return (
        rule.id == manifest.effective_key
        and (rule.lower_version is None or not version.is_older_than(rule.lower_version))
        and not version.is_newer_than(rule.upper_version)
        and not rule.is_force_compatible(version)
    )


def find_incompatibility(
    manifest: Manifest,
    rules: Iterable[IncompatibilityRule]
) -> Optional[IncompatibilityRule]:
    """Return the first rule that blocks the manifest, or None."""
    for rule in rules:
        if rule_matches(rule, manifest):
            return rule
    return None


def describe_incompatibility(rule: IncompatibilityRule, manifest: Manifest) -> str:
    """Build the message shown to the user when a mod is skipped."""
    reason = rule.reason_phrase or DEFAULT_REASON
    message = f"Skipped {rule.display_name} {manifest.version} because {reason}."

    links = []
    if rule.update_url:
        links.append(f"- official mod: {rule.update_url}")
    if rule.unofficial_update_url:
        links.append(f"- unofficial update: {rule.unofficial_update_url}")

    if links:
        message += " Please check for a newer version of the mod here:\n" + "\n".join(links)
    return message
