"""
Configurable value catalogs for contract fields.

Each catalog has a built-in default that can be replaced by a comma-separated
environment variable or by a JSON config file.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = (
    "subscription",
    "insurance",
    "utilities",
    "rent",
    "services",
    "software",
    "maintenance",
    "other",
)

DEFAULT_FREQUENCIES = (
    "monthly",
    "quarterly",
    "yearly",
    "weekly",
    "bi-weekly",
    "one-time",
)

DEFAULT_STATUSES = (
    "active",
    "expired",
    "cancelled",
    "terminated",
    "closed",
)

DEFAULT_CURRENCIES = (
    "USD",
    "EUR",
    "GBP",
    "CAD",
    "AUD",
    "JPY",
    "CHF",
    "SEK",
    "NOK",
    "DKK",
)

# catalog attribute -> (environment variable, config file key, default)
_SOURCES = {
    "categories": ("CONTRACT_CATEGORIES", "CATEGORIES", DEFAULT_CATEGORIES),
    "frequencies": ("CONTRACT_FREQUENCIES", "FREQUENCIES", DEFAULT_FREQUENCIES),
    "statuses": ("CONTRACT_STATUSES", "STATUSES", DEFAULT_STATUSES),
    "currencies": ("CONTRACT_CURRENCIES", "CURRENCIES", DEFAULT_CURRENCIES),
}


@dataclass(frozen=True)
class Catalogs:
    """Allowed values for the enumerated contract fields."""

    categories: Tuple[str, ...] = DEFAULT_CATEGORIES
    frequencies: Tuple[str, ...] = DEFAULT_FREQUENCIES
    statuses: Tuple[str, ...] = DEFAULT_STATUSES
    currencies: Tuple[str, ...] = DEFAULT_CURRENCIES


def _split(raw: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def catalogs_from_env(environ: Optional[Mapping[str, str]] = None) -> Catalogs:
    """
    Build catalogs from environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ``

    Returns:
        Catalogs with defaults for every unset or empty variable
    """
    if environ is None:
        environ = os.environ
    values = {}
    for attr, (env_var, _, default) in _SOURCES.items():
        raw = environ.get(env_var, "")
        values[attr] = _split(raw) or default
    return Catalogs(**values)


def load_catalogs(path: Union[str, Path]) -> Catalogs:
    """
    Load catalogs from a JSON config file.

    Keys (all optional) hold comma-separated strings or lists, e.g.
    ``{"CATEGORIES": "subscription,rent,other", "CURRENCIES": ["USD", "EUR"]}``.
    A missing file falls back to the environment.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Catalog config %s not found, using environment/defaults", path)
        return catalogs_from_env()

    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Catalog config {path} must contain a JSON object")

    base = catalogs_from_env()
    values = {}
    for attr, (_, key, _) in _SOURCES.items():
        raw = data.get(key)
        if isinstance(raw, str):
            parsed = _split(raw)
        elif isinstance(raw, list):
            parsed = tuple(str(item).strip() for item in raw if str(item).strip())
        elif raw is None:
            parsed = ()
        else:
            raise ValueError(f"Catalog config key {key} must be a string or list")
        values[attr] = parsed or getattr(base, attr)
    return Catalogs(**values)


def get_catalogs() -> Catalogs:
    """Catalogs for the current process (config file from CONTRACT_CONFIG, else env)."""
    config_path = os.getenv("CONTRACT_CONFIG")
    if config_path:
        return load_catalogs(config_path)
    return catalogs_from_env()


def display_name(value: str) -> str:
    """Capitalized label for a catalog value."""
    if value == "bi-weekly":
        return "Bi-Weekly"
    if value == "one-time":
        return "One-Time"
    return value[:1].upper() + value[1:]
