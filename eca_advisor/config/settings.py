"""
Configuration Management System
===============================

Provides dataclass-based configuration with YAML file loading support.
Holds the default recommendation preferences and logging settings used by
the command line front-end.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Any, Dict, Union
import yaml
import logging

from eca_advisor.config.categories import Tradeoff
from eca_advisor.utils.exceptions import ConfigurationError
from eca_advisor.utils.logging_config import LoggingConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Preferences:
    """Caller preferences for algorithm selection.

    Attributes:
        tradeoff: Speed, ratio or balanced selection. Strings are
            normalized, unknown values become balanced.
        assume_hardware_aes: Assume AES-NI style acceleration is present.
        force_extension_priority: Accepted for compatibility; the file
            extension already always overrides sniffed content.
    """
    tradeoff: Tradeoff = Tradeoff.BALANCED
    assume_hardware_aes: bool = False
    force_extension_priority: bool = False

    def __post_init__(self):
        object.__setattr__(self, "tradeoff", Tradeoff.parse(self.tradeoff))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Preferences":
        """Create Preferences from dictionary."""
        if not data:
            return cls()
        return cls(
            tradeoff=Tradeoff.parse(data.get("tradeoff")),
            assume_hardware_aes=bool(data.get("assume_hardware_aes", False)),
            force_extension_priority=bool(data.get("force_extension_priority", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "tradeoff": self.tradeoff.value,
            "assume_hardware_aes": self.assume_hardware_aes,
            "force_extension_priority": self.force_extension_priority,
        }


def _logging_from_dict(data: Dict[str, Any]) -> LoggingConfig:
    """Create LoggingConfig from dictionary."""
    if not data:
        return LoggingConfig()

    defaults = LoggingConfig()
    log_dir = data.get("log_dir")

    return LoggingConfig(
        level=str(data.get("level", defaults.level)).upper(),
        log_dir=Path(log_dir).expanduser() if log_dir else defaults.log_dir,
        console_output=bool(data.get("console_output", defaults.console_output)),
        file_output=bool(data.get("file_output", defaults.file_output)),
        json_format=bool(data.get("json_format", defaults.json_format)),
        max_file_size=int(data.get("max_file_size", defaults.max_file_size)),
        backup_count=int(data.get("backup_count", defaults.backup_count)),
    )


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Fetch a configuration section, which must be a mapping if present."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(
            f"Configuration section '{key}' must be a mapping",
            config_key=key,
            expected_type="mapping",
        )
    return value


@dataclass
class Config:
    """Main configuration container.

    Aggregates all configuration sections and provides loading from YAML.
    """
    preferences: Preferences = field(default_factory=Preferences)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Union[str, Path]] = None) -> "Config":
        """Load configuration from YAML file.

        Args:
            config_path: Path to the configuration file. If None, looks for
                        config.yaml in the current directory.

        Returns:
            Config instance with loaded settings.

        Raises:
            ConfigurationError: If the document or a section is not a mapping.
            yaml.YAMLError: If config file is not valid YAML.
        """
        explicit = config_path is not None
        config_path = Path(config_path) if explicit else Path("config.yaml")

        if not config_path.exists():
            if explicit:
                logger.warning(f"Config file not found at {config_path}, using defaults")
            else:
                logger.debug(f"No config file at {config_path}, using defaults")
            return cls()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse config file: {e}")
            raise

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {config_path} must contain a mapping",
                expected_type="mapping",
            )

        logger.info(f"Loaded configuration from {config_path}")
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        return cls(
            preferences=Preferences.from_dict(_section(data, "preferences")),
            logging=_logging_from_dict(_section(data, "logging")),
        )

    def save(self, config_path: Union[str, Path]) -> None:
        """Save configuration to YAML file.

        Args:
            config_path: Path where to save the configuration.
        """
        data = {
            "preferences": self.preferences.to_dict(),
            "logging": {
                "level": self.logging.level,
                "log_dir": str(self.logging.log_dir),
                "console_output": self.logging.console_output,
                "file_output": self.logging.file_output,
                "json_format": self.logging.json_format,
                "max_file_size": self.logging.max_file_size,
                "backup_count": self.logging.backup_count,
            },
        }

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Saved configuration to {config_path}")
