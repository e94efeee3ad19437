"""Legacy record detection and migration."""

from .migrator import (
    classify_record,
    get_migration_summary,
    migrate_contract,
    migrate_contracts,
    needs_migration,
)
from .rules import CANONICAL_CATEGORIES, CATEGORY_SYNONYMS

__all__ = [
    "classify_record",
    "needs_migration",
    "migrate_contract",
    "migrate_contracts",
    "get_migration_summary",
    "CANONICAL_CATEGORIES",
    "CATEGORY_SYNONYMS",
]
