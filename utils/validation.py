"""Field validators for contract records."""

from __future__ import annotations

import math
import re
from typing import Any, List, Mapping, Optional, Union

from contractlib.conventions.catalogs import Catalogs, get_catalogs
from contractlib.schema.records import Contract

from .date import InvalidDateError, to_date

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS = ("name", "company", "contractId")


def is_valid_email(email: Any) -> bool:
    if not isinstance(email, str):
        return False
    return bool(email) and _EMAIL_RE.match(email) is not None


def is_valid_amount(amount: Any) -> bool:
    """Finite, non-negative number."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return False
    return math.isfinite(amount) and amount >= 0


def is_valid_date(value: Any) -> bool:
    try:
        to_date(value)
    except InvalidDateError:
        return False
    return True


def validate_contract(
    contract: Union[Contract, Mapping[str, Any]],
    catalogs: Optional[Catalogs] = None,
) -> List[str]:
    """
    Check a canonical record against field rules and the configured catalogs.

    Returns:
        Human-readable problems; empty when the record is valid
    """
    record = contract.to_dict() if isinstance(contract, Contract) else contract
    if catalogs is None:
        catalogs = get_catalogs()
    errors: List[str] = []

    for key in REQUIRED_FIELDS:
        if not record.get(key):
            errors.append(f"Missing required field '{key}'")

    if not is_valid_amount(record.get("amount")):
        errors.append(f"Invalid amount {record.get('amount')!r}")

    start_ok = is_valid_date(record.get("startDate"))
    if not start_ok:
        errors.append(f"Invalid startDate {record.get('startDate')!r}")
    end = record.get("endDate")
    if end:
        if not is_valid_date(end):
            errors.append(f"Invalid endDate {end!r}")
        elif start_ok and to_date(end) < to_date(record["startDate"]):
            errors.append("endDate is before startDate")

    contact = record.get("contactInfo")
    if contact is not None and not isinstance(contact, Mapping):
        errors.append(f"Invalid contactInfo {contact!r}")
    else:
        email = (contact or {}).get("email")
        if email is not None and not is_valid_email(email):
            errors.append(f"Invalid contact email {email!r}")

    for key, allowed in (
        ("category", catalogs.categories),
        ("frequency", catalogs.frequencies),
        ("status", catalogs.statuses),
        ("currency", catalogs.currencies),
    ):
        value = record.get(key)
        if value not in allowed:
            errors.append(f"Unsupported {key} {value!r}")

    return errors
