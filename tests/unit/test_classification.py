"""Unit tests for gross pay calculation by classification."""

from datetime import date

import pytest
from pydantic import ValidationError

from payledger.sdk.domain import (
    Commissioned,
    Hourly,
    PayPeriod,
    Paycheck,
    Salaried,
    SalesReceipt,
    TimeCard,
)


def make_paycheck(start: date, end: date) -> Paycheck:
    return Paycheck(period=PayPeriod(start=start, end=end))


WEEK = (date(2024, 8, 31), date(2024, 9, 6))


class TestSalaried:

    def test_pays_salary_regardless_of_period(self):
        pc = make_paycheck(date(2024, 9, 1), date(2024, 9, 30))
        assert Salaried(salary=1000.0).calculate_pay(pc) == 1000.0


class TestHourly:

    def test_eight_hours_is_straight_time(self):
        hourly = Hourly(hourly_rate=15.0)
        hourly.add_timecard(TimeCard(date=date(2024, 9, 2), hours=8.0))
        assert hourly.calculate_pay(make_paycheck(*WEEK)) == 8 * 15.0

    def test_hours_past_eight_are_overtime(self):
        hourly = Hourly(hourly_rate=15.0)
        hourly.add_timecard(TimeCard(date=date(2024, 9, 2), hours=10.0))
        assert hourly.calculate_pay(make_paycheck(*WEEK)) == 8 * 15.0 + 2 * 15.0 * 1.5

    def test_overtime_is_per_timecard(self):
        """Two 6-hour days earn no overtime even though they total 12 hours."""
        hourly = Hourly(hourly_rate=10.0)
        hourly.add_timecard(TimeCard(date=date(2024, 9, 2), hours=6.0))
        hourly.add_timecard(TimeCard(date=date(2024, 9, 3), hours=6.0))
        assert hourly.calculate_pay(make_paycheck(*WEEK)) == 120.0

    def test_timecards_outside_period_ignored(self):
        hourly = Hourly(hourly_rate=10.0)
        hourly.add_timecard(TimeCard(date=date(2024, 8, 30), hours=8.0))  # day before
        hourly.add_timecard(TimeCard(date=date(2024, 9, 6), hours=4.0))   # last day
        hourly.add_timecard(TimeCard(date=date(2024, 9, 7), hours=8.0))   # day after
        assert hourly.calculate_pay(make_paycheck(*WEEK)) == 40.0

    def test_no_timecards_pays_zero(self):
        assert Hourly(hourly_rate=10.0).calculate_pay(make_paycheck(*WEEK)) == 0.0

    def test_timecards_kept_in_insertion_order(self):
        hourly = Hourly(hourly_rate=10.0)
        later = TimeCard(date=date(2024, 9, 5), hours=1.0)
        earlier = TimeCard(date=date(2024, 9, 2), hours=2.0)
        hourly.add_timecard(later)
        hourly.add_timecard(earlier)
        hourly.add_timecard(later)
        assert hourly.timecards == [later, earlier, later]

    def test_negative_hours_rejected(self):
        with pytest.raises(ValidationError):
            TimeCard(date=date(2024, 9, 2), hours=-1.0)


class TestCommissioned:

    def test_salary_plus_commission_on_in_period_sales(self):
        comm = Commissioned(salary=420.0, commission_rate=0.25)
        comm.add_sales_receipt(SalesReceipt(date=date(2024, 9, 3), amount=12300.0))
        comm.add_sales_receipt(SalesReceipt(date=date(2024, 8, 1), amount=5000.0))
        pc = make_paycheck(date(2024, 8, 24), date(2024, 9, 6))
        assert comm.calculate_pay(pc) == 3495.0

    def test_no_sales_pays_base_salary(self):
        comm = Commissioned(salary=420.0, commission_rate=0.25)
        assert comm.calculate_pay(make_paycheck(*WEEK)) == 420.0


class TestDiscriminator:

    def test_dump_carries_kind(self):
        assert Salaried(salary=1.0).model_dump()["kind"] == "salaried"
        assert Hourly(hourly_rate=1.0).model_dump()["kind"] == "hourly"
        assert Commissioned(salary=1.0, commission_rate=0.1).model_dump()["kind"] == "commissioned"

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            Salaried(salary=1.0, hourly_rate=2.0)
