"""Configuration loading and validation."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATHS = ["md5check.yaml", "md5check.yml", ".md5check.yaml"]


@dataclass
class CheckConfig:
    """Options for --check mode."""

    quiet: bool = False  # Don't print OK lines
    strict: bool = False  # Exit non-zero on improperly formatted lines


@dataclass
class OutputConfig:
    """Options for digest output."""

    binary: bool = False  # Default mode character is "*" when true


@dataclass
class LoggingConfig:
    """Logging options."""

    level: str = "WARNING"
    log_file: Path | None = None
    audit_log: Path | None = None  # JSONL record of every operation


@dataclass
class Config:
    """Complete application configuration."""

    check: CheckConfig = field(default_factory=CheckConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to YAML config file. Defaults to md5check.yaml.

    Returns:
        Loaded Config object.
    """
    config = Config()

    # Try default paths if not specified
    if config_path is None:
        for default_path in DEFAULT_CONFIG_PATHS:
            if Path(default_path).exists():
                config_path = Path(default_path)
                break

    if config_path and config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
            config = _parse_config(data)

    return config


def _optional_path(value: Any) -> Path | None:
    return Path(value) if value else None


def _parse_config(data: dict[str, Any]) -> Config:
    """Parse configuration dictionary into Config object.

    Args:
        data: Raw configuration dictionary.

    Returns:
        Config object.
    """
    config = Config()

    if "check" in data:
        check_data = data["check"] or {}
        config.check = CheckConfig(
            quiet=check_data.get("quiet", False),
            strict=check_data.get("strict", False),
        )

    if "output" in data:
        output_data = data["output"] or {}
        config.output = OutputConfig(
            binary=output_data.get("binary", False),
        )

    if "logging" in data:
        logging_data = data["logging"] or {}
        config.logging = LoggingConfig(
            level=logging_data.get("level", "WARNING"),
            log_file=_optional_path(logging_data.get("log_file")),
            audit_log=_optional_path(logging_data.get("audit_log")),
        )

    return config


def validate_config(config: Config) -> list[str]:
    """Validate configuration, return list of issues.

    Args:
        config: Configuration to validate.

    Returns:
        List of validation issue messages.
    """
    issues = []

    level = str(config.logging.level).upper()
    if not isinstance(logging.getLevelName(level), int):
        issues.append(f"Invalid logging level: {config.logging.level}")

    # Check audit log directory is writable
    if config.logging.audit_log:
        try:
            config.logging.audit_log.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            issues.append(f"Cannot create audit log directory: {config.logging.audit_log.parent}")

    return issues
