"""Contract portfolio analytics."""

from .stats import (
    MONTHLY_FACTORS,
    ContractStats,
    compute_contract_stats,
    contracts_frame,
    monthly_equivalent,
    next_payment_for,
    top_monthly_expenses,
    upcoming_payment_report,
)

__all__ = [
    "MONTHLY_FACTORS",
    "ContractStats",
    "compute_contract_stats",
    "contracts_frame",
    "monthly_equivalent",
    "next_payment_for",
    "top_monthly_expenses",
    "upcoming_payment_report",
]
