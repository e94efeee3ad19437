"""Portfolio statistics over canonical contracts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional, Sequence, Union

import pandas as pd

from contractlib.schedule.calculator import (
    calculate_next_payment_date,
    days_until,
    is_payment_due_soon,
)
from contractlib.schema.enums import ContractStatus, Frequency
from contractlib.schema.records import Contract
from contractlib.utils.date import DateLike, InvalidDateError, resolve_as_of, to_date

logger = logging.getLogger(__name__)

# Monthly-equivalent multipliers per payment frequency.
MONTHLY_FACTORS: Dict[Frequency, float] = {
    Frequency.MONTHLY: 1.0,
    Frequency.QUARTERLY: 1.0 / 3.0,
    Frequency.YEARLY: 1.0 / 12.0,
    Frequency.WEEKLY: 4.33,
    Frequency.BI_WEEKLY: 2.17,
    Frequency.ONE_TIME: 0.0,
}

FRAME_COLUMNS = [
    "contract_id",
    "name",
    "company",
    "status",
    "category",
    "frequency",
    "currency",
    "amount",
    "monthly_amount",
]


@dataclass
class ContractStats:
    """Aggregate figures for a set of contracts.

    Spend figures cover active contracts only and add amounts across
    currencies; ``monthly_expenses_by_currency`` keeps them apart.
    """

    total_contracts: int = 0
    active_contracts: int = 0
    expired_contracts: int = 0
    total_value: float = 0.0
    monthly_expenses: float = 0.0
    yearly_expenses: float = 0.0
    upcoming_payments: int = 0
    monthly_expenses_by_currency: Dict[str, float] = field(default_factory=dict)
    category_breakdown: Dict[str, int] = field(default_factory=dict)
    status_breakdown: Dict[str, int] = field(default_factory=dict)


def monthly_equivalent(amount: float, frequency: Union[Frequency, str]) -> float:
    """Amount normalized to a per-month figure; 0 for one-time or unknown frequencies."""
    try:
        freq = Frequency.parse(frequency)
    except ValueError:
        return 0.0
    return float(amount or 0.0) * MONTHLY_FACTORS[freq]


def contracts_frame(contracts: Sequence[Contract]) -> pd.DataFrame:
    """One row per contract with its monthly-equivalent amount."""
    rows = [
        {
            "contract_id": c.contract_id,
            "name": c.name,
            "company": c.company,
            "status": c.status.value,
            "category": c.category,
            "frequency": c.frequency,
            "currency": c.currency,
            "amount": float(c.amount or 0.0),
            "monthly_amount": monthly_equivalent(c.amount, c.frequency),
        }
        for c in contracts
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def next_payment_for(contract: Contract, as_of: Optional[DateLike] = None) -> Optional[date]:
    """Stored pay date when still ahead, otherwise the calculated next payment."""
    today = resolve_as_of(as_of)
    try:
        if contract.pay_date and to_date(contract.pay_date) >= today:
            return to_date(contract.pay_date)
        return calculate_next_payment_date(contract.start_date, contract.frequency, as_of=today)
    except InvalidDateError:
        logger.warning("Skipping contract %r with unreadable dates", contract.contract_id)
        return None


def _counts(series: pd.Series) -> Dict[str, int]:
    return {str(key): int(value) for key, value in series.value_counts().items()}


def compute_contract_stats(
    contracts: Sequence[Contract],
    as_of: Optional[DateLike] = None,
    threshold_days: int = 7,
) -> ContractStats:
    """
    Aggregate statistics for a contract portfolio.

    Args:
        contracts: Canonical contracts
        as_of: Reference day for the upcoming-payment count
        threshold_days: Window for counting payments as upcoming

    Returns:
        ContractStats
    """
    today = resolve_as_of(as_of)
    frame = contracts_frame(contracts)
    active = frame[frame["status"] == ContractStatus.ACTIVE.value]

    upcoming = 0
    for contract in contracts:
        if contract.status is not ContractStatus.ACTIVE:
            continue
        next_payment = next_payment_for(contract, today)
        if next_payment is not None and is_payment_due_soon(next_payment, threshold_days, today):
            upcoming += 1

    monthly = float(active["monthly_amount"].sum())
    by_currency = active.groupby("currency")["monthly_amount"].sum()

    return ContractStats(
        total_contracts=len(frame),
        active_contracts=len(active),
        expired_contracts=int((frame["status"] == ContractStatus.EXPIRED.value).sum()),
        total_value=float(frame["amount"].sum()),
        monthly_expenses=monthly,
        yearly_expenses=monthly * 12,
        upcoming_payments=upcoming,
        monthly_expenses_by_currency={str(k): float(v) for k, v in by_currency.items()},
        category_breakdown=_counts(frame["category"]),
        status_breakdown=_counts(frame["status"]),
    )


def top_monthly_expenses(contracts: Sequence[Contract], limit: int = 10) -> pd.DataFrame:
    """Active contracts ranked by monthly-equivalent amount, largest first."""
    frame = contracts_frame(contracts)
    active = frame[frame["status"] == ContractStatus.ACTIVE.value]
    ranked = active.sort_values("monthly_amount", ascending=False, kind="stable")
    return ranked[["contract_id", "name", "currency", "monthly_amount"]].head(limit).reset_index(drop=True)


def upcoming_payment_report(
    contracts: Sequence[Contract],
    as_of: Optional[DateLike] = None,
    limit: int = 5,
) -> pd.DataFrame:
    """Soonest next payments of active contracts, excluding ones already past."""
    today = resolve_as_of(as_of)
    rows = []
    for contract in contracts:
        if contract.status is not ContractStatus.ACTIVE:
            continue
        next_payment = next_payment_for(contract, today)
        if next_payment is None:
            continue
        remaining = days_until(next_payment, today)
        if remaining < 0:
            continue
        rows.append(
            {
                "contract_id": contract.contract_id,
                "name": contract.name,
                "date": next_payment,
                "amount": float(contract.amount or 0.0),
                "currency": contract.currency,
                "days_until": remaining,
            }
        )
    report = pd.DataFrame(
        rows, columns=["contract_id", "name", "date", "amount", "currency", "days_until"]
    )
    report = report.sort_values("days_until", kind="stable").head(limit)
    return report.reset_index(drop=True)
