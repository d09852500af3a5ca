"""modregistry CLI - inspect incompatibility rules from the command line.

Usage:
    modregistry rules                          - List the incompatibility rules
    modregistry check ID VERSION               - Check whether a mod version is blocked
    modregistry check "" 1.2 --entry-dll X.dll - Check a mod without a unique ID
"""

import sys
from pathlib import Path
from typing import Optional

import click

from modregistry import __version__
from modregistry.config import get_config
from modregistry.core.config import ConfigManager
from modregistry.core.errors import RegistryError
from modregistry.core.logging import setup_logging
from modregistry.extensions.compatibility import describe_incompatibility
from modregistry.extensions.registry import ModRegistry
from modregistry.models.manifest import Manifest


def _load_registry(config_path: Optional[str]) -> ModRegistry:
    path = Path(config_path) if config_path else get_config().rules.config_path
    return ModRegistry.from_config(ConfigManager(path).load())


@click.group()
@click.version_option(version=__version__, prog_name="modregistry")
def cli():
    """Mod registry tools.

    Reads the host's incompatibility rules and checks mod versions
    against them.
    """
    log = get_config().log
    setup_logging(
        level=log.level,
        format_type=log.format,
        log_dir=log.log_dir,
        file_enabled=log.file_enabled,
        console_enabled=log.console_enabled
    )


@cli.command()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Host config file")
def rules(config_path: Optional[str]):
    """List the incompatibility rules."""
    try:
        registry = _load_registry(config_path)
    except RegistryError as e:
        click.echo(e.format_user_friendly(), err=True)
        sys.exit(2)

    if not registry.incompatible_mods:
        click.echo("No incompatibility rules.")
        return

    for rule in registry.incompatible_mods:
        lower = str(rule.lower_version) if rule.lower_version else "*"
        line = f"{rule.id}  {lower} .. {rule.upper_version}"
        if rule.force_compatible_version and rule.force_compatible_version.strip():
            line += f"  (except /{rule.force_compatible_version}/)"
        if rule.name:
            line += f"  [{rule.name}]"
        click.echo(line)


@cli.command()
@click.argument("unique_id")
@click.argument("version")
@click.option("--entry-dll", default="", help="Entry point, used when the unique ID is blank")
@click.option("--name", default=None, help="Display name for the mod")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Host config file")
def check(unique_id: str, version: str, entry_dll: str, name: Optional[str], config_path: Optional[str]):
    """Check whether a mod version is blocked.

    Exits with status 1 if the version matches an incompatibility rule.

    Examples:
        modregistry check Example.Mod 1.5
        modregistry check "" 1.0 --entry-dll ExampleMod.dll
    """
    try:
        registry = _load_registry(config_path)
        manifest = Manifest(
            unique_id=unique_id,
            name=name or unique_id or entry_dll,
            version=version,
            entry_dll=entry_dll
        )
    except RegistryError as e:
        click.echo(e.format_user_friendly(), err=True)
        sys.exit(2)

    rule = registry.get_incompatibility_record(manifest)
    if rule is None:
        click.echo(f"{manifest.effective_key} {manifest.version} is compatible.")
        return

    click.echo(describe_incompatibility(rule, manifest))
    sys.exit(1)


def main():
    cli()


if __name__ == "__main__":
    main()
