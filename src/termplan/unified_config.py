"""Project configuration file (termplan_config.yaml).

Example::

    scheduler:
      target_credits: 15
      max_credits: 18
      max_hours: 40
      on_unsatisfiable: warn
    output:
      format: text
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError, ValidationError
from .scheduler import BalanceConfig

CONFIG_FILENAME = "termplan_config.yaml"


class OutputFormat(str, Enum):
    """Rendering formats for a semester plan."""

    TEXT = "text"
    MARKDOWN = "markdown"
    CSV = "csv"


class OutputConfig(BaseModel):
    """Defaults for the schedule command's output."""

    format: OutputFormat = OutputFormat.TEXT
    show_unplaced: bool = True  # List stranded courses after the plan


class UnifiedConfig(BaseModel):
    """Everything termplan_config.yaml can hold."""

    scheduler: BalanceConfig = Field(default_factory=BalanceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_unified_config(config_path: Path | str) -> UnifiedConfig:
    """Load configuration from a YAML file.

    An empty file yields the defaults.

    Raises:
        ParseError: If the file is missing or not valid YAML
        ValidationError: If a value has the wrong type or range
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ParseError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse config {config_path}: {e}") from e

    if data is None:
        return UnifiedConfig()
    if not isinstance(data, dict):
        raise ParseError(f"Config {config_path} must contain a dictionary at the root level")

    try:
        return UnifiedConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid config {config_path}: {e}") from e
