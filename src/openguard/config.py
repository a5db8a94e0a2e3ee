"""Loading GuardConfig from YAML files."""

from pathlib import Path
from typing import Optional

import yaml

from .types import GuardConfig


def load_config(path: Optional[Path] = None) -> GuardConfig:
    """Load guard configuration.

    Args:
        path: YAML file to read; None gives the defaults

    Returns:
        Validated configuration

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If the document is not a mapping
        pydantic.ValidationError: If a field is invalid
    """
    if path is None:
        return GuardConfig()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return GuardConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    return GuardConfig(**data)
