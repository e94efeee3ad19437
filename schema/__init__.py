"""
Record schemas and enums for recurring contracts.
"""

from .enums import LEGACY_STATUSES, ContractStatus, Frequency, RecordKind
from .records import (
    ContactInfo,
    Contract,
    MigrationResult,
    MigrationSummary,
    PaymentDate,
)

__all__ = [
    # Enums
    "Frequency",
    "ContractStatus",
    "RecordKind",
    "LEGACY_STATUSES",
    # Records
    "ContactInfo",
    "Contract",
    "PaymentDate",
    "MigrationResult",
    "MigrationSummary",
]
