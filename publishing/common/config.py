"""Configuration management for the publishing workflow.

Handles loading and validation of YAML configuration files.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULT_REQUIRED_REVIEWS = 2
DEFAULT_CONFIG_PATH = "publishing.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRUE_STRINGS = frozenset(["true", "yes", "on", "1"])
FALSE_STRINGS = frozenset(["false", "no", "off", "0"])


@dataclass
class WorkflowConfig:
    """Configuration for the stage pipeline."""

    required_reviews: int = DEFAULT_REQUIRED_REVIEWS


@dataclass
class LoggingConfig:
    """Configuration for log output."""

    level: str = "WARNING"
    log_dir: str = "logs"
    file_logging: bool = False
    console_logging: bool = True


@dataclass
class PublishingConfig:
    """Top-level configuration for the publishing workflow."""

    workflow: WorkflowConfig = field(default_factory=WorkflowConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def parse_workflow_config(workflow_dict: Dict[str, Any]) -> WorkflowConfig:
    """Parse the workflow section.

    Args:
        workflow_dict: Workflow configuration dictionary

    Returns:
        WorkflowConfig instance

    Raises:
        ValueError: If required_reviews is not a positive integer
    """
    required = workflow_dict.get("required_reviews", DEFAULT_REQUIRED_REVIEWS)
    # Values substituted from environment variables arrive as strings
    if isinstance(required, str) and required.strip().isdigit():
        required = int(required)
    if isinstance(required, bool) or not isinstance(required, int) or required < 1:
        raise ValueError(
            f"workflow.required_reviews must be a positive integer, got {required!r}"
        )
    return WorkflowConfig(required_reviews=required)


def parse_logging_config(logging_dict: Dict[str, Any]) -> LoggingConfig:
    """Parse the logging section.

    Args:
        logging_dict: Logging configuration dictionary

    Returns:
        LoggingConfig instance

    Raises:
        ValueError: If level is not a known level name or a flag is not boolean
    """
    level = logging_dict.get("level", "WARNING")
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ValueError(
            f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )
    return LoggingConfig(
        level=level.upper(),
        log_dir=str(logging_dict.get("log_dir", "logs")),
        file_logging=_parse_flag(logging_dict, "file_logging", False),
        console_logging=_parse_flag(logging_dict, "console_logging", True),
    )


def _parse_flag(section: Dict[str, Any], key: str, default: bool) -> bool:
    """Read a boolean option, accepting the usual YAML and env spellings."""
    value = section.get(key, default)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    raise ValueError(f"logging.{key} must be a boolean, got {value!r}")


def _section(config_dict: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_dict[name]
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise TypeError(
            f"Configuration section '{name}' must be a mapping, got {type(section).__name__}"
        )
    return section


def parse_config(config_dict: Dict[str, Any]) -> PublishingConfig:
    """Parse a full configuration dictionary.

    Args:
        config_dict: Full configuration dictionary

    Returns:
        PublishingConfig instance

    Raises:
        TypeError: If a present section is not a mapping
        ValueError: If a section holds an invalid value
    """
    workflow = WorkflowConfig()
    if "workflow" in config_dict:
        workflow = parse_workflow_config(_section(config_dict, "workflow"))

    logging_config = LoggingConfig()
    if "logging" in config_dict:
        logging_config = parse_logging_config(_section(config_dict, "logging"))

    return PublishingConfig(workflow=workflow, logging=logging_config)


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        TypeError: If the document root is not a mapping
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    return _expand_env_vars(config)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration."""
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj


def load_typed_config(config_path: Optional[str] = None) -> PublishingConfig:
    """Load and parse configuration into typed dataclasses.

    When no path is given and the default file is absent, the built-in
    defaults are returned.

    Args:
        config_path: Path to configuration file

    Returns:
        PublishingConfig instance

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        if not Path(DEFAULT_CONFIG_PATH).exists():
            return PublishingConfig()
        config_path = DEFAULT_CONFIG_PATH

    return parse_config(load_config(config_path))
