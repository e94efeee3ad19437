"""Upgrade stored contract records from legacy shapes to the current schema.

A record is *legacy* when it still carries the deprecated ``paymentInfo``
substructure, uses a retired status ('pending' or 'draft'), or lacks the
``contactInfo`` key altogether. Migration is one-way, never mutates its input
and is idempotent: migrating an already-migrated record changes nothing and
produces no notes.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Optional, Union

from contractlib.schedule.calculator import calculate_next_payment_date
from contractlib.schema.enums import LEGACY_STATUSES, RecordKind
from contractlib.schema.records import (
    ContactInfo,
    Contract,
    MigrationResult,
    MigrationSummary,
)
from contractlib.utils.date import to_instant, utc_timestamp

from .rules import (
    migrate_category,
    migrate_contact_info,
    migrate_status,
    split_payment_info,
)

logger = logging.getLogger(__name__)

Record = Union[Mapping[str, Any], Contract]

PAYMENT_INFO_NOTE = "Migrated from paymentInfo object to calculated payDate"
MISSING_CONTACT_NOTE = "Added missing contactInfo structure"


def _as_mapping(record: Record) -> Mapping[str, Any]:
    if isinstance(record, Contract):
        return record.to_dict()
    return record


def classify_record(record: Record) -> RecordKind:
    """Tell legacy-shaped records apart from canonical ones."""
    data = _as_mapping(record)
    if "paymentInfo" in data:
        return RecordKind.LEGACY
    if data.get("status") in LEGACY_STATUSES:
        return RecordKind.LEGACY
    # An empty contactInfo is canonical; only a missing key is legacy.
    if "contactInfo" not in data:
        return RecordKind.LEGACY
    return RecordKind.CANONICAL


def needs_migration(record: Record) -> bool:
    """True when the record is not yet in the current schema."""
    return classify_record(record) is RecordKind.LEGACY


def migrate_contract(
    record: Record, as_of: Optional[Union[date, datetime]] = None
) -> MigrationResult:
    """
    Convert a possibly-legacy record into a canonical Contract.

    Args:
        record: Raw stored record (or an existing Contract)
        as_of: Reference instant for defaulted timestamps and for calculating
            a payment date when the legacy paymentInfo has none; a plain date
            means midnight UTC of that day

    Returns:
        MigrationResult with the canonical contract, whether one of the
        flagged upgrades (paymentInfo, retired status, missing contactInfo)
        fired, and the notes of every rewrite in the order applied.

    Raises:
        InvalidDateError: if a payment date has to be calculated from a
            missing or unparseable start or last-payment date
    """
    as_of = to_instant(as_of)
    data = _as_mapping(record)
    notes: List[str] = []
    was_migrated = False
    now = utc_timestamp(as_of)

    status = migrate_status(data.get("status"), notes)
    if "contactInfo" in data:
        contact_info = migrate_contact_info(data["contactInfo"], notes)
    else:
        contact_info = ContactInfo()

    contract = Contract(
        id=data.get("id") or "",
        contract_id=data.get("contractId"),
        name=data.get("name"),
        company=data.get("company"),
        description=data.get("description"),
        start_date=data.get("startDate"),
        end_date=data.get("endDate"),
        pay_date=data.get("payDate"),
        amount=data.get("amount"),
        currency=data.get("currency"),
        frequency=data.get("frequency"),
        status=status,
        category=migrate_category(data.get("category")),
        contact_info=contact_info,
        notes=data.get("notes"),
        tags=list(data.get("tags") or []),
        attachments=list(data.get("attachments") or []),
        document_link=data.get("documentLink"),
        custom_fields=dict(data.get("customFields") or {}),
        created_at=data.get("createdAt") or now,
        updated_at=data.get("updatedAt") or now,
    )

    if "paymentInfo" in data:
        was_migrated = True
        notes.append(PAYMENT_INFO_NOTE)
        next_payment, last_payment = split_payment_info(data["paymentInfo"])
        if next_payment:
            contract.pay_date = next_payment
        else:
            contract.pay_date = calculate_next_payment_date(
                contract.start_date,
                contract.frequency,
                last_payment,
                as_of=as_of.date() if as_of is not None else None,
            ).isoformat()

    if "contactInfo" not in data:
        was_migrated = True
        notes.append(MISSING_CONTACT_NOTE)

    legacy_status = data.get("status")
    if legacy_status in LEGACY_STATUSES:
        was_migrated = True
        notes.append(f"Migrated status from '{legacy_status}' to 'active'")

    logger.debug(
        "Migrated contract %r (migrated=%s, notes=%d)",
        contract.contract_id, was_migrated, len(notes),
    )
    return MigrationResult(contract=contract, was_migrated=was_migrated, migration_notes=notes)


def migrate_contracts(
    records: Iterable[Record], as_of: Optional[Union[date, datetime]] = None
) -> List[MigrationResult]:
    """Migrate records independently, preserving input order."""
    results = [migrate_contract(record, as_of=as_of) for record in records]
    migrated = sum(1 for result in results if result.was_migrated)
    logger.info("Migrated %d of %d contract record(s)", migrated, len(results))
    return results


def get_migration_summary(results: Iterable[MigrationResult]) -> MigrationSummary:
    """Counts of migrated/unchanged records and the notes of the migrated ones."""
    results = list(results)
    migrated = [result for result in results if result.was_migrated]
    notes = [note for result in migrated for note in result.migration_notes]
    return MigrationSummary(
        total=len(results),
        migrated=len(migrated),
        unchanged=len(results) - len(migrated),
        migration_notes=notes,
    )
