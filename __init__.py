"""Recurring Contract Engine.

This package provides payment-schedule calculations and legacy record
migration for recurring financial contracts (subscriptions, leases,
insurance, ...).

Key modules:
- schedule: Next payment dates and bounded payment lookahead
- migration: Legacy record detection and upgrade to the current schema
- schema: Contract record types and enums
- analytics: Portfolio statistics
- conventions: Configurable field catalogs
"""

from .migration import (
    classify_record,
    get_migration_summary,
    migrate_contract,
    migrate_contracts,
    needs_migration,
)
from .schedule import (
    calculate_next_payment_date,
    calculate_next_three_payments,
    format_payment_date,
    is_payment_due_soon,
    upcoming_payments,
)
from .schema import (
    ContactInfo,
    Contract,
    ContractStatus,
    Frequency,
    MigrationResult,
    MigrationSummary,
    PaymentDate,
)
from .utils.date import InvalidDateError

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Schedule
    "calculate_next_payment_date",
    "calculate_next_three_payments",
    "upcoming_payments",
    "format_payment_date",
    "is_payment_due_soon",
    # Migration
    "classify_record",
    "needs_migration",
    "migrate_contract",
    "migrate_contracts",
    "get_migration_summary",
    # Schema
    "ContactInfo",
    "Contract",
    "ContractStatus",
    "Frequency",
    "MigrationResult",
    "MigrationSummary",
    "PaymentDate",
    "InvalidDateError",
]
