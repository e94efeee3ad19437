"""Payment schedule tests with a fixed reference day (2024-06-15)."""

from datetime import date

import pytest

from contractlib.schedule import (
    advance_date,
    calculate_next_payment_date,
    calculate_next_three_payments,
    days_until,
    format_payment_date,
    is_payment_due_soon,
    upcoming_payments,
)
from contractlib.schema import Contract, ContractStatus, Frequency, PaymentDate
from contractlib.utils.date import InvalidDateError

AS_OF = date(2024, 6, 15)


def make_contract(**overrides) -> Contract:
    fields = dict(
        id="1",
        contract_id="TEST-001",
        name="Test Contract",
        company="Test Company",
        start_date="2024-01-01",
        end_date="2024-12-31",
        amount=100,
        currency="USD",
        frequency="monthly",
        status=ContractStatus.ACTIVE,
        category="services",
    )
    fields.update(overrides)
    return Contract(**fields)


class TestAdvanceDate:
    def test_day_based_steps(self):
        assert advance_date(date(2024, 6, 10), Frequency.WEEKLY) == date(2024, 6, 17)
        assert advance_date(date(2024, 6, 10), Frequency.BI_WEEKLY) == date(2024, 6, 24)
        assert advance_date(date(2024, 12, 28), Frequency.WEEKLY) == date(2025, 1, 4)

    def test_month_end_clamps(self):
        assert advance_date(date(2023, 1, 31), Frequency.MONTHLY) == date(2023, 2, 28)
        assert advance_date(date(2024, 1, 31), Frequency.MONTHLY) == date(2024, 2, 29)
        assert advance_date(date(2023, 11, 30), Frequency.QUARTERLY) == date(2024, 2, 29)

    def test_leap_day_yearly_lands_on_feb_28(self):
        assert advance_date(date(2024, 2, 29), Frequency.YEARLY) == date(2025, 2, 28)

    def test_clamped_day_carries_forward(self):
        assert advance_date(date(2024, 1, 31), Frequency.MONTHLY, periods=2) == date(2024, 3, 29)

    def test_negative_periods_rejected(self):
        with pytest.raises(ValueError):
            advance_date(date(2024, 1, 1), Frequency.MONTHLY, periods=-1)


class TestCalculateNextPaymentDate:
    def test_one_time_returns_start_date(self):
        assert calculate_next_payment_date("2024-01-01", "one-time", as_of=AS_OF) == date(2024, 1, 1)

    @pytest.mark.parametrize(
        "start, frequency, expected",
        [
            ("2024-01-01", "monthly", date(2024, 7, 1)),
            ("2024-01-01", "quarterly", date(2024, 7, 1)),
            ("2024-01-01", "yearly", date(2025, 1, 1)),
            ("2024-06-10", "weekly", date(2024, 6, 17)),
            ("2024-06-10", "bi-weekly", date(2024, 6, 24)),
        ],
    )
    def test_frequencies(self, start, frequency, expected):
        assert calculate_next_payment_date(start, frequency, as_of=AS_OF) == expected

    def test_accepts_enum_frequency(self):
        assert calculate_next_payment_date("2024-06-10", Frequency.WEEKLY, as_of=AS_OF) == date(2024, 6, 17)

    def test_advances_from_last_payment(self):
        result = calculate_next_payment_date("2024-01-01", "monthly", "2024-05-01", as_of=AS_OF)
        assert result == date(2024, 7, 1)

    def test_monthly_clamp_to_end_of_february(self):
        assert calculate_next_payment_date(
            "2023-01-31", "monthly", as_of=date(2023, 1, 15)
        ) == date(2023, 2, 28)
        assert calculate_next_payment_date(
            "2024-01-31", "monthly", as_of=date(2024, 1, 15)
        ) == date(2024, 2, 29)

    def test_payment_on_reference_day_rolls_forward(self):
        assert calculate_next_payment_date("2024-06-08", "weekly", as_of=AS_OF) == date(2024, 6, 22)

    @pytest.mark.parametrize("frequency", ["weekly", "bi-weekly", "monthly", "quarterly", "yearly"])
    def test_stale_anchor_is_forced_into_future(self, frequency):
        result = calculate_next_payment_date("1990-01-31", frequency, as_of=AS_OF)
        assert result > AS_OF
        assert (result - AS_OF).days <= 366

    def test_accepts_date_objects(self):
        assert calculate_next_payment_date(date(2024, 1, 1), "monthly", as_of=AS_OF) == date(2024, 7, 1)

    def test_unknown_frequency_returns_start_date(self):
        assert calculate_next_payment_date("2024-01-01", "fortnightly", as_of=AS_OF) == date(2024, 1, 1)

    def test_invalid_date_raises(self):
        with pytest.raises(InvalidDateError):
            calculate_next_payment_date("not-a-date", "monthly", as_of=AS_OF)
        with pytest.raises(InvalidDateError):
            calculate_next_payment_date("2024-01-01", "monthly", "2024-13-45", as_of=AS_OF)


class TestUpcomingPayments:
    def test_one_time_contract_yields_single_entry(self):
        contract = make_contract(frequency="one-time")
        result = calculate_next_three_payments(contract, as_of=AS_OF)
        assert result == [PaymentDate(date=date(2024, 1, 1), amount=100, currency="USD", is_next=True)]
        assert result[0].to_dict() == {
            "date": "2024-01-01",
            "amount": 100,
            "currency": "USD",
            "isNext": True,
        }

    def test_three_monthly_payments(self):
        result = calculate_next_three_payments(make_contract(), as_of=AS_OF)
        assert [p.date for p in result] == [date(2024, 7, 1), date(2024, 8, 1), date(2024, 9, 1)]
        assert [p.is_next for p in result] == [True, False, False]

    def test_weekly_payments_are_seven_days_apart(self):
        result = calculate_next_three_payments(make_contract(frequency="weekly"), as_of=AS_OF)
        assert len(result) == 3
        assert result[0].date == date(2024, 6, 17)
        assert (result[1].date - result[0].date).days == 7
        assert (result[2].date - result[1].date).days == 7

    def test_end_date_truncates(self):
        result = calculate_next_three_payments(make_contract(end_date="2024-07-31"), as_of=AS_OF)
        assert [p.date for p in result] == [date(2024, 7, 1)]

    def test_payment_on_end_date_is_included(self):
        result = calculate_next_three_payments(make_contract(end_date="2024-08-01"), as_of=AS_OF)
        assert [p.date for p in result] == [date(2024, 7, 1), date(2024, 8, 1)]

    def test_ended_contract_has_no_payments(self):
        assert calculate_next_three_payments(make_contract(end_date="2024-03-01"), as_of=AS_OF) == []

    def test_no_end_date(self):
        result = upcoming_payments(make_contract(end_date=None, frequency="quarterly"), count=4, as_of=AS_OF)
        assert [p.date for p in result] == [
            date(2024, 7, 1),
            date(2024, 10, 1),
            date(2025, 1, 1),
            date(2025, 4, 1),
        ]

    def test_zero_count_returns_nothing(self):
        assert upcoming_payments(make_contract(), count=0, as_of=AS_OF) == []
        assert upcoming_payments(make_contract(frequency="one-time"), count=0, as_of=AS_OF) == []

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            upcoming_payments(make_contract(), count=-1, as_of=AS_OF)

    def test_repeated_calls_are_identical(self):
        contract = make_contract()
        assert calculate_next_three_payments(contract, as_of=AS_OF) == calculate_next_three_payments(
            contract, as_of=AS_OF
        )


class TestDisplayHelpers:
    def test_days_until(self):
        assert days_until("2024-06-20", as_of=AS_OF) == 5
        assert days_until("2024-06-10", as_of=AS_OF) == -5

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-06-15", "Today"),
            ("2024-06-16", "Tomorrow"),
            ("2024-06-22", "Jun 22, 2024"),
            ("2024-06-14", "Jun 14, 2024"),
            ("2024-12-05", "Dec 5, 2024"),
        ],
    )
    def test_format_payment_date(self, value, expected):
        assert format_payment_date(value, as_of=AS_OF) == expected

    @pytest.mark.parametrize(
        "value, threshold, expected",
        [
            ("2024-06-15", 7, True),
            ("2024-06-22", 7, True),
            ("2024-06-23", 7, False),
            ("2024-06-14", 7, False),
            ("2024-07-10", 30, True),
        ],
    )
    def test_is_payment_due_soon(self, value, threshold, expected):
        assert is_payment_due_soon(value, threshold, as_of=AS_OF) is expected
