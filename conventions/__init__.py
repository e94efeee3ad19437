from .catalogs import (
    DEFAULT_CATEGORIES,
    DEFAULT_CURRENCIES,
    DEFAULT_FREQUENCIES,
    DEFAULT_STATUSES,
    Catalogs,
    catalogs_from_env,
    display_name,
    get_catalogs,
    load_catalogs,
)

__all__ = [
    "Catalogs",
    "catalogs_from_env",
    "load_catalogs",
    "get_catalogs",
    "display_name",
    "DEFAULT_CATEGORIES",
    "DEFAULT_FREQUENCIES",
    "DEFAULT_STATUSES",
    "DEFAULT_CURRENCIES",
]
