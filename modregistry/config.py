"""Centralized runtime configuration for the mod registry.

This module provides typed configuration loaded from environment
variables and .env files.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


@dataclass
class RulesConfig:
    """Where the incompatibility rules live."""
    config_path: Path = field(default_factory=lambda: Path("./modregistry.config.json"))

    def __post_init__(self):
        path = os.getenv("MODREGISTRY_CONFIG")
        if path:
            self.config_path = Path(path)


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "text"  # "json" or "text"
    file_enabled: bool = False
    console_enabled: bool = True
    log_dir: Path = field(default_factory=lambda: Path("./logs"))

    def __post_init__(self):
        self.level = os.getenv("MODREGISTRY_LOG_LEVEL", self.level).upper()
        self.format = os.getenv("MODREGISTRY_LOG_FORMAT", self.format).lower()
        self.file_enabled = os.getenv("MODREGISTRY_LOG_FILE", str(self.file_enabled)).lower() == "true"
        self.console_enabled = os.getenv("MODREGISTRY_LOG_CONSOLE", str(self.console_enabled)).lower() == "true"
        log_dir = os.getenv("MODREGISTRY_LOG_DIR")
        if log_dir:
            self.log_dir = Path(log_dir)


@dataclass
class Config:
    """Main configuration container."""
    rules: RulesConfig = field(default_factory=RulesConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def validate(self) -> list[str]:
        """Validate configuration and return list of issues."""
        issues = []

        if self.log.level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            issues.append(f"Unknown log level: {self.log.level}")

        if self.log.format not in ("json", "text"):
            issues.append(f"Unknown log format: {self.log.format}")

        if self.rules.config_path.exists() and not self.rules.config_path.is_file():
            issues.append(f"Config path is not a file: {self.rules.config_path}")

        return issues

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
