"""Configuration loader for YAML/JSON config files.

Provides loading and saving of router configuration from YAML or
JSON files, with defaults for any missing field.
"""

import json
import logging
from pathlib import Path
from typing import Union

import yaml

from expert_router.core.config import RouterConfig

logger = logging.getLogger(__name__)


def load_config(path: Union[str, Path]) -> RouterConfig:
    """Load configuration from YAML or JSON file.

    Args:
        path: Path to config file.

    Returns:
        RouterConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If file format is not supported or the content is
            not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()
    with open(path, "r") as f:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    logger.debug("Loaded router config from %s", path)
    return RouterConfig.from_dict(data)


def save_config(config: RouterConfig, path: Union[str, Path]) -> None:
    """Save configuration to YAML or JSON file.

    Args:
        config: RouterConfig to save.
        path: Path to output file.

    Raises:
        ValueError: If file format is not supported.
    """
    path = Path(path)
    data = config.to_dict()
    suffix = path.suffix.lower()

    if suffix not in (".yaml", ".yml", ".json"):
        raise ValueError(f"Unsupported config format: {suffix}")

    with open(path, "w") as f:
        if suffix == ".json":
            # JSON object keys must be strings
            data["gate_weights"] = {str(k): v for k, v in data["gate_weights"].items()}
            json.dump(data, f, indent=2)
        else:
            yaml.dump(data, f, default_flow_style=False)
