# Re-export schedule components
from contractlib.schema.enums import Frequency

from .adjustments import advance_date
from .calculator import (
    calculate_next_payment_date,
    calculate_next_three_payments,
    days_until,
    format_payment_date,
    is_payment_due_soon,
    upcoming_payments,
)
