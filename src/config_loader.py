"""Load tool configuration from an optional YAML file."""

import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "content_dir": "src/content/blog",
    "extension": ".md",
    "default_author": "Óscar Gallego",
    "report_both_sides": True,
}

_TYPES = {
    "content_dir": str,
    "extension": str,
    "default_author": str,
    "report_both_sides": bool,
}


def get_default_config() -> dict:
    return dict(DEFAULT_CONFIG)


def load_config(config_path: str | None = None) -> dict:
    """Load configuration, falling back to defaults for unset keys.

    Args:
        config_path: Path to a YAML config file. None means defaults only.

    Returns:
        Config dict with every key of DEFAULT_CONFIG set.

    Raises:
        FileNotFoundError: If config_path is given but doesn't exist.
        ValueError: If the file is not valid YAML, is not a mapping, or has
            unknown or ill-typed keys.
    """
    config = get_default_config()
    if config_path is None:
        return config

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with open(path, encoding="utf-8") as f:
        try:
            loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config root must be a mapping: {config_path}")

    for key, value in loaded.items():
        if key not in _TYPES:
            raise ValueError(f"Unknown config key '{key}' in {config_path}")
        if not isinstance(value, _TYPES[key]):
            raise ValueError(
                f"Config key '{key}' must be {_TYPES[key].__name__}, "
                f"got {type(value).__name__}"
            )
        config[key] = value

    logger.info("Loaded configuration from %s", config_path)
    return config
