"""Field-level normalization rules applied when upgrading legacy records.

Each rule returns the canonical value and appends to ``notes`` whenever it
rewrites something the caller should hear about.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from contractlib.conventions.catalogs import DEFAULT_CATEGORIES
from contractlib.schema.enums import LEGACY_STATUSES, ContractStatus
from contractlib.schema.records import CONTACT_FIELDS, ContactInfo

logger = logging.getLogger(__name__)

# Built-in set, not the configurable catalog.
CANONICAL_CATEGORIES = DEFAULT_CATEGORIES

CATEGORY_SYNONYMS = {
    "subscriptions": "subscription",
    "insurance": "insurance",
    "utility": "utilities",
    "utilities": "utilities",
    "rental": "rent",
    "rent": "rent",
    "service": "services",
    "services": "services",
    "maintenance": "maintenance",
    "other": "other",
}

_CONTACT_KEYS = tuple(CONTACT_FIELDS.values())


def migrate_status(legacy_status: Any, notes: List[str]) -> ContractStatus:
    """Collapse legacy statuses onto the canonical set.

    'pending' and 'draft' become ACTIVE silently here; the caller records that
    transition. Unrecognized values default to ACTIVE with a note.
    """
    if legacy_status in LEGACY_STATUSES:
        return ContractStatus.ACTIVE
    try:
        return ContractStatus(legacy_status)
    except ValueError:
        logger.warning("Unknown status %r, defaulting to 'active'", legacy_status)
        notes.append(f"Unknown status '{legacy_status}', defaulting to 'active'")
        return ContractStatus.ACTIVE


def migrate_category(legacy_category: Any) -> str:
    """Map a category onto the canonical set; unknown values become 'other'."""
    if legacy_category in CANONICAL_CATEGORIES:
        return legacy_category
    if not isinstance(legacy_category, str):
        return "other"
    return CATEGORY_SYNONYMS.get(legacy_category.lower(), "other")


def _has_valid_contact_structure(value: Any) -> bool:
    if not isinstance(value, Mapping):
        return False
    # An empty mapping is the canonical "no contact details" value.
    return not value or any(key in value for key in _CONTACT_KEYS)


def migrate_contact_info(value: Any, notes: List[str]) -> ContactInfo:
    """Normalize a present contactInfo value, keeping only the known fields."""
    if not _has_valid_contact_structure(value):
        logger.warning("Malformed contactInfo %r replaced by an empty structure", value)
        notes.append("Fixed malformed contactInfo structure")
        return ContactInfo()
    return ContactInfo.from_dict(value)


def split_payment_info(value: Any) -> Tuple[Optional[Any], Optional[Any]]:
    """Return (nextPaymentDate, lastPaymentDate) from a legacy paymentInfo value."""
    if not isinstance(value, Mapping):
        return None, None
    return value.get("nextPaymentDate"), value.get("lastPaymentDate")
