"""
Configuration management for du-simulator.

Loads $DU_SIMULATOR_HOME/config.yaml. Only the logging section is
configurable; the fixture location is fixed by the temp-dir search in
du_simulator.fixture. A missing config file means defaults.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from du_simulator.errors import ConfigError

LOG_FORMATS = ("pretty", "structured")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_simulator_home() -> Path:
    """Return the config home: $DU_SIMULATOR_HOME or ~/.config/du-simulator."""
    home = os.environ.get("DU_SIMULATOR_HOME")
    if home:
        return Path(home).expanduser()
    return Path("~/.config/du-simulator").expanduser()


@dataclass
class SimulatorConfig:
    """
    du-simulator configuration.

    Attributes:
        log_level: Logging level name
        log_format: "pretty" (rich console) or "structured" (JSON)
        log_output: Optional log file path, "{date}" is replaced by today's date
        log_console: Also log to console
    """
    log_level: str = "INFO"
    log_format: str = "pretty"
    log_output: Optional[str] = None
    log_console: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulatorConfig":
        logging_cfg = data.get("logging") or {}
        if not isinstance(logging_cfg, dict):
            raise ConfigError("'logging' must be a mapping")

        level = str(logging_cfg.get("level", "INFO")).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Invalid logging.level: {level}")

        log_format = logging_cfg.get("format", "pretty")
        if log_format not in LOG_FORMATS:
            raise ConfigError(f"Invalid logging.format: {log_format}")

        return cls(
            log_level=level,
            log_format=log_format,
            log_output=logging_cfg.get("output"),
            log_console=bool(logging_cfg.get("console", True)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "logging": {
                "level": self.log_level,
                "format": self.log_format,
                "output": self.log_output,
                "console": self.log_console,
            }
        }

    def get_log_file_path(self) -> Optional[Path]:
        """Get log file path with date interpolation."""
        if not self.log_output:
            return None
        log_output = self.log_output.replace("{date}", datetime.now().strftime("%Y-%m-%d"))
        return Path(log_output).expanduser()


def load_config(config_path: Optional[Path] = None) -> SimulatorConfig:
    """
    Load du-simulator configuration from YAML.

    Args:
        config_path: Path to config file. Defaults to <home>/config.yaml

    Returns:
        SimulatorConfig, defaults when the file does not exist

    Raises:
        ConfigError: If the file is not valid YAML or has invalid values
    """
    if config_path is None:
        config_path = get_simulator_home() / "config.yaml"

    if not config_path.exists():
        return SimulatorConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        return SimulatorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration root must be a mapping: {config_path}")

    return SimulatorConfig.from_dict(data)
