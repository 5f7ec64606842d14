"""JSON-file-backed catalog loading.

The catalog file lists products and coupons::

    {
      "products": [
        {"name": "Widget", "price": "10.00", "promotion": {"get_one_free": 3}},
        {"name": "Gadget", "price": "4.50", "promotion": {"package": {"3": 20}}}
      ],
      "coupons": [
        {"name": "SAVE10", "coupon": {"percent": 10}}
      ]
    }

Everything is registered through the public Inventory API, so the usual
registration rules apply to file contents too.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pos.domain.exceptions import ConfigurationError
from pos.domain.model.inventory import Inventory

logger = logging.getLogger(__name__)


def load_inventory(file_path: Path) -> Inventory:
    """Build an Inventory from the JSON catalog at *file_path*."""
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Catalog file not found: {file_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Catalog file {file_path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Catalog file {file_path} must contain a JSON object")

    inventory = Inventory()
    for item in _entries(raw, "products"):
        _require(item, ("name", "price"), "product")
        inventory.register(
            item["name"],
            item["price"],
            _normalize_promotion(item.get("promotion")),
        )
    for item in _entries(raw, "coupons"):
        _require(item, ("name", "coupon"), "coupon")
        inventory.register_coupon(item["name"], item["coupon"])

    logger.info(
        "Loaded %d product(s) and %d coupon(s) from %s",
        len(inventory.products),
        len(inventory.coupons),
        file_path,
    )
    return inventory


# --- Parsing helpers ----------------------------------------------------------


def _entries(raw: dict[str, Any], key: str) -> list[Any]:
    entries = raw.get(key, [])
    if not isinstance(entries, list):
        raise ConfigurationError(f"Catalog '{key}' must be a list, got {entries!r}")
    return entries


def _require(item: Any, keys: tuple[str, ...], kind: str) -> None:
    if not isinstance(item, dict):
        raise ConfigurationError(f"Each {kind} entry must be an object, got {item!r}")
    missing = [key for key in keys if key not in item]
    if missing:
        raise ConfigurationError(
            f"{kind.capitalize()} entry {item!r} is missing: {', '.join(missing)}"
        )
    if not isinstance(item["name"], str):
        raise ConfigurationError(
            f"{kind.capitalize()} name must be a string, got {item['name']!r}"
        )


def _normalize_promotion(spec: Any) -> Any:
    """Turn JSON's string keys (``{"package": {"3": 20}}``) back into ints."""
    if not isinstance(spec, dict):
        return spec
    normalized: dict[str, Any] = {}
    for tag, attrs in spec.items():
        if isinstance(attrs, dict):
            attrs = {_to_int(key): value for key, value in attrs.items()}
        normalized[tag] = attrs
    return normalized


def _to_int(key: str) -> int | str:
    try:
        return int(key)
    except ValueError:
        return key
