"""Composition root — resolves configuration and builds the catalog.

This is the only place in the codebase that knows where the catalog
lives.  Every other module receives an Inventory.
"""

from __future__ import annotations

import os
from pathlib import Path

from pos.domain.model.inventory import Inventory
from pos.infrastructure.catalog_loader import load_inventory

CATALOG_ENV_VAR = "POS_CATALOG"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def catalog_path(explicit: str | Path | None = None) -> Path:
    """Pick the catalog file: explicit argument, then $POS_CATALOG, then default."""
    if explicit:
        return Path(explicit)
    from_env = os.environ.get(CATALOG_ENV_VAR)
    if from_env:
        return Path(from_env)
    return _DATA_DIR / "catalog.json"


def inventory(explicit: str | Path | None = None) -> Inventory:
    return load_inventory(catalog_path(explicit))
