"""
Configuration Loader - Load and validate configuration from YAML.

Settings are looked up in:
- the path given on the command line
- config.yaml in the working directory
- config.yaml in the project root

Command-line overrides are deep-merged over the file contents.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field, asdict
from copy import deepcopy

from ..game.config import SnakeConfig

logger = logging.getLogger(__name__)


@dataclass
class DisplayConfig:
    """Terminal display settings."""
    use_emoji: bool = True
    refresh_per_second: int = 30
    show_help: bool = True


@dataclass
class RecordsConfig:
    """High-score persistence settings."""
    enabled: bool = True
    path: str = "~/.termsnake/record.json"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: str = "logs/termsnake.log"


@dataclass
class Config:
    """Complete application configuration."""
    game: SnakeConfig = field(default_factory=SnakeConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    records: RecordsConfig = field(default_factory=RecordsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    'game': SnakeConfig,
    'display': DisplayConfig,
    'records': RecordsConfig,
    'logging': LoggingConfig,
}


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    ignored = sorted(set(data) - field_names)
    if ignored:
        logger.warning("Ignoring unknown %s settings: %s", cls.__name__, ", ".join(ignored))

    return cls(**filtered_data)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries, with override values taking precedence.

    Args:
        base: Base dictionary
        override: Dictionary with values to override

    Returns:
        Merged dictionary
    """
    result = deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)

    return result


def _find_config_file() -> Optional[Path]:
    possible_paths = [
        Path.cwd() / "config.yaml",
        Path(__file__).parent.parent.parent / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path
    return None


def _load_yaml_file(path: Path) -> Dict:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    return data if data else {}


def config_from_dict(data: Dict[str, Any]) -> Config:
    """Build a Config from nested plain data."""
    config = Config()

    for section, cls in _SECTIONS.items():
        if section in data:
            setattr(config, section, _dict_to_dataclass(data[section] or {}, cls))

    return config


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to a config.yaml found
            in the working directory or project root)
        overrides: Nested values that take precedence over the file

    Returns:
        Config object with all settings

    Raises:
        FileNotFoundError: If config_path is given but does not exist
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        path = _find_config_file()

    if path is None:
        logger.info("No config file found, using defaults")
        data: Dict[str, Any] = {}
    else:
        logger.info("Loading config from %s", path)
        data = _load_yaml_file(path)

    if overrides:
        data = _deep_merge(data, overrides)

    return config_from_dict(data)


def config_to_dict(config: Config) -> Dict[str, Any]:
    return {
        'game': config.game.to_dict(),
        'display': asdict(config.display),
        'records': asdict(config.records),
        'logging': asdict(config.logging),
    }


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = config_to_dict(config)

    with open(config_path, 'w', encoding='utf-8') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
