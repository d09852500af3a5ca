"""Host configuration for the mod registry.

Loads the incompatible-mod rule set from the host's JSON config file.
"""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from modregistry.core.errors import ConfigError, ManifestError
from modregistry.core.logging import get_logger
from modregistry.models.compatibility import IncompatibilityRule

logger = get_logger("config")

DEFAULT_CONFIG_PATH = Path("./modregistry.config.json")


class HostConfig(BaseModel):
    """Host settings the registry reads."""
    model_config = ConfigDict(populate_by_name=True)

    incompatible_mods: list[IncompatibilityRule] = Field(
        default_factory=list,
        alias="IncompatibleMods",
        description="Mod versions which should be disabled due to incompatibility"
    )


class ConfigManager:
    """Reads the host config file."""

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH):
        self.config_path = Path(config_path)
        self._config: Optional[HostConfig] = None

    @property
    def config(self) -> HostConfig:
        """Get the current configuration."""
        if self._config is None:
            self.load()
        return self._config

    def exists(self) -> bool:
        """Check if configuration exists."""
        return self.config_path.exists()

    def load(self) -> HostConfig:
        """Load configuration from disk.

        A missing file is an empty rule set. A file that can't be parsed
        raises ``ConfigError``.
        """
        if not self.exists():
            logger.debug(f"No config at {self.config_path}; no incompatibility rules loaded", component="config")
            self._config = HostConfig()
            return self._config

        try:
            with open(self.config_path, "r", encoding="utf-8-sig") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(
                f"Can't read config: {e}",
                config_path=str(self.config_path),
                cause=e
            ) from e

        # a bare list is the rule set itself
        if isinstance(data, list):
            data = {"IncompatibleMods": data}

        try:
            self._config = HostConfig.model_validate(data)
        except (ValidationError, ManifestError) as e:
            raise ConfigError(
                "Invalid incompatibility rules",
                config_path=str(self.config_path),
                cause=e
            ) from e

        logger.info(
            f"Loaded {len(self._config.incompatible_mods)} incompatibility rules",
            component="config",
            path=str(self.config_path)
        )
        return self._config

    def rules(self) -> list[IncompatibilityRule]:
        return list(self.config.incompatible_mods)
