"""
Core enumeration types for recurring contracts.
"""

from enum import Enum

from dateutil.relativedelta import relativedelta


class Frequency(Enum):
    """Payment frequencies."""

    ONE_TIME = "one-time"
    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, value) -> "Frequency":
        """Coerce a wire value (e.g. 'bi-weekly') or member to a Frequency."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unsupported payment frequency: {value!r}") from exc

    def step(self) -> relativedelta:
        """Calendar step of one period. One-time payments have no step."""
        return _STEPS[self]


_STEPS = {
    Frequency.ONE_TIME: relativedelta(),
    Frequency.WEEKLY: relativedelta(days=7),
    Frequency.BI_WEEKLY: relativedelta(days=14),
    Frequency.MONTHLY: relativedelta(months=1),
    Frequency.QUARTERLY: relativedelta(months=3),
    Frequency.YEARLY: relativedelta(years=1),
}


class ContractStatus(Enum):
    """Canonical contract statuses."""

    ACTIVE = "active"
    EXPIRED = "expired"
    CANCELLED = "cancelled"
    TERMINATED = "terminated"
    CLOSED = "closed"


# Statuses accepted only on legacy records; they collapse to ACTIVE.
LEGACY_STATUSES = ("pending", "draft")


class RecordKind(Enum):
    """Shape of a stored record."""

    LEGACY = "LEGACY"
    CANONICAL = "CANONICAL"
