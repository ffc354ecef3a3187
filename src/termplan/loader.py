"""Catalogue and config loading with validation."""

from __future__ import annotations

from pathlib import Path

from . import context
from .models import Catalog
from .parser import CatalogParser
from .unified_config import CONFIG_FILENAME, UnifiedConfig, load_unified_config


def discover_config(
    catalog_path: Path | str,
    config_path: Path | None = None,
) -> UnifiedConfig | None:
    """Find and load the project config.

    Search order:
    1. Explicit config_path argument
    2. Global context (set via CLI --config)
    3. Catalogue directory / termplan_config.yaml
    4. Current directory / termplan_config.yaml
    """
    if config_path is not None:
        return load_unified_config(config_path)

    ctx_config = context.get_config_path()
    if ctx_config is not None:
        return load_unified_config(ctx_config)

    for candidate in (Path(catalog_path).parent / CONFIG_FILENAME, Path(CONFIG_FILENAME)):
        if candidate.exists():
            return load_unified_config(candidate)

    return None


def load_catalog(path: Path | str, *, validate: bool = True) -> Catalog:
    """Load a catalogue file.

    Args:
        path: Path to the catalogue YAML file
        validate: Reject prerequisite cycles up front. With False the cycle
            is left for the balancer, which leaves those courses unplaced.

    Returns:
        Catalog with its TaskGraph fully wired
    """
    catalog = CatalogParser().parse_file(path)
    if validate:
        catalog.graph.validate()
    return catalog
