"""Next-payment and lookahead calculations for recurring contracts.

Every function takes the reference day ``as_of`` explicitly; when omitted it
defaults to today's date at the call site.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Union

from contractlib.schema.enums import Frequency
from contractlib.schema.records import Contract, PaymentDate
from contractlib.utils.date import DateLike, resolve_as_of, to_date

from .adjustments import advance_date

logger = logging.getLogger(__name__)

_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _recurring_frequency(frequency: Union[Frequency, str]) -> Optional[Frequency]:
    """Return the frequency if it recurs, None for one-time or unknown values."""
    try:
        freq = Frequency.parse(frequency)
    except ValueError:
        logger.warning("Unknown payment frequency %r; treating as one-time", frequency)
        return None
    if freq is Frequency.ONE_TIME:
        return None
    return freq


def calculate_next_payment_date(
    start_date: DateLike,
    frequency: Union[Frequency, str],
    last_payment_date: Optional[DateLike] = None,
    as_of: Optional[DateLike] = None,
) -> date:
    """
    Next payment date strictly after ``as_of``.

    Advances one period from the anchor (``last_payment_date``, else
    ``start_date``) and keeps rolling forward while the result is on or
    before ``as_of``. One-time contracts pay on the start date.

    Raises:
        InvalidDateError: if a date is missing or cannot be parsed
    """
    start = to_date(start_date)
    freq = _recurring_frequency(frequency)
    if freq is None:
        return start

    today = resolve_as_of(as_of)
    anchor = to_date(last_payment_date) if last_payment_date else start
    next_date = advance_date(anchor, freq)

    rolled = 0
    while next_date <= today:
        next_date = advance_date(next_date, freq)
        rolled += 1
    if rolled:
        logger.debug(
            "Rolled %s payment forward %d period(s) from %s to %s",
            freq.value, rolled, anchor, next_date,
        )
    return next_date


def upcoming_payments(
    contract: Contract, count: int = 3, as_of: Optional[DateLike] = None
) -> List[PaymentDate]:
    """
    Up to ``count`` upcoming payments in ascending order.

    A payment falling exactly on ``end_date`` is included; the lookahead stops
    at the first date after it. Only the first entry is flagged ``is_next``.
    """
    if count < 0:
        raise ValueError("count must be non-negative")

    freq = _recurring_frequency(contract.frequency)
    if freq is None:
        if count == 0:
            return []
        return [
            PaymentDate(
                date=to_date(contract.start_date),
                amount=contract.amount,
                currency=contract.currency,
                is_next=True,
            )
        ]

    end = to_date(contract.end_date) if contract.end_date else None
    current = calculate_next_payment_date(contract.start_date, freq, as_of=as_of)

    payments: List[PaymentDate] = []
    for i in range(count):
        if end is not None and current > end:
            break
        payments.append(
            PaymentDate(
                date=current,
                amount=contract.amount,
                currency=contract.currency,
                is_next=(i == 0),
            )
        )
        current = advance_date(current, freq)
    return payments


def calculate_next_three_payments(
    contract: Contract, as_of: Optional[DateLike] = None
) -> List[PaymentDate]:
    """The next three payments of a contract (fewer when the contract ends)."""
    return upcoming_payments(contract, count=3, as_of=as_of)


def days_until(value: DateLike, as_of: Optional[DateLike] = None) -> int:
    """Signed number of calendar days from ``as_of`` to ``value``."""
    return (to_date(value) - resolve_as_of(as_of)).days


def format_payment_date(value: DateLike, as_of: Optional[DateLike] = None) -> str:
    """'Today', 'Tomorrow', or a short date such as 'Jun 22, 2024'."""
    delta = days_until(value, as_of)
    if delta == 0:
        return "Today"
    if delta == 1:
        return "Tomorrow"
    dt = to_date(value)
    return f"{_MONTH_ABBR[dt.month - 1]} {dt.day}, {dt.year}"


def is_payment_due_soon(
    value: DateLike, threshold_days: int = 7, as_of: Optional[DateLike] = None
) -> bool:
    """True when the payment falls between today and ``threshold_days`` ahead, inclusive."""
    delta = days_until(value, as_of)
    return 0 <= delta <= threshold_days
