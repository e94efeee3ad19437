"""
Period-advance functions for payment schedules.
"""

from datetime import date, datetime
from typing import Union

from contractlib.schema.enums import Frequency


def advance_date(dt: Union[date, datetime], frequency: Frequency, periods: int = 1) -> date:
    """
    Move a date forward by whole payment periods.

    Month-based steps keep the day of month where it exists in the target month
    and clamp to that month's last day otherwise (Jan 31 + 1 month -> Feb 28/29).
    Yearly steps from Feb 29 land on Feb 28 in non-leap years.

    Each period is applied to the result of the previous one, so a clamped
    day carries forward (Jan 31 -> Feb 29 -> Mar 29).
    """
    if isinstance(dt, datetime):
        dt = dt.date()
    if periods < 0:
        raise ValueError("periods must be non-negative")

    step = frequency.step()
    for _ in range(periods):
        dt = dt + step
    return dt
