"""
Configuration Loading

Reads repulsion tuning parameters from YAML files such as::

    point_padding_x: 0.1
    point_padding_y: 0.1
    force: 1.0e-6
    maxiter: 2000
    check_overlap: 10
    seed: 42
"""

import dataclasses
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .placement.repeller import RepelConfig

logger = logging.getLogger(__name__)

CONFIG_FIELDS = {f.name for f in dataclasses.fields(RepelConfig)}


def config_from_dict(data: Optional[Dict[str, Any]],
                     base: Optional[RepelConfig] = None) -> RepelConfig:
    """
    Build a RepelConfig from a mapping, overriding ``base`` where given.

    Raises:
        ValueError: On unknown keys or invalid values
    """
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")

    unknown = sorted(set(data) - CONFIG_FIELDS)
    if unknown:
        available = ", ".join(sorted(CONFIG_FIELDS))
        raise ValueError(
            f"Unknown configuration key(s): {', '.join(unknown)}. Available: {available}"
        )

    values = dataclasses.asdict(base) if base else {}
    values.update(data)
    return RepelConfig(**values)


def load_config(path: Union[str, Path],
                base: Optional[RepelConfig] = None) -> RepelConfig:
    """Load a RepelConfig from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    config = config_from_dict(data, base)
    logger.debug("Loaded config from %s: %s", path, config)
    return config
