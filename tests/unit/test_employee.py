"""Unit tests for the Employee entity."""

from datetime import date

import pytest
from pydantic import ValidationError

from payledger.sdk.domain import (
    Biweekly,
    Commissioned,
    Employee,
    Hold,
    Hourly,
    Monthly,
    PayPeriod,
    Paycheck,
    Salaried,
    TimeCard,
    Unaffiliated,
    UnionAffiliation,
    Weekly,
)


def make_employee(**overrides) -> Employee:
    fields = {
        "emp_id": 1,
        "name": "Bob",
        "address": "Home",
        "classification": Salaried(salary=1000.0),
        "schedule": Monthly(),
    }
    fields.update(overrides)
    return Employee(**fields)


class TestEmployeeDefaults:

    def test_new_employee_is_held_and_unaffiliated(self):
        emp = make_employee()
        assert emp.method == Hold()
        assert emp.affiliation == Unaffiliated()


class TestClassificationPairing:

    def test_mismatched_schedule_rejected_at_construction(self):
        with pytest.raises(ValidationError):
            make_employee(classification=Hourly(hourly_rate=10.0), schedule=Monthly())

    def test_set_pay_classification_replaces_both(self):
        emp = make_employee()
        emp.set_pay_classification(Hourly(hourly_rate=12.0), Weekly())
        assert emp.classification == Hourly(hourly_rate=12.0)
        assert emp.schedule == Weekly()

    def test_set_pay_classification_rejects_mismatch(self):
        emp = make_employee()
        with pytest.raises(ValueError):
            emp.set_pay_classification(Commissioned(salary=1.0, commission_rate=0.1), Weekly())
        assert emp.classification == Salaried(salary=1000.0)
        assert emp.schedule == Monthly()

    @pytest.mark.parametrize("field", ["classification", "schedule"])
    def test_cannot_assign_one_side_alone(self, field):
        emp = make_employee()
        with pytest.raises(AttributeError):
            setattr(emp, field, Biweekly())

    def test_switching_classification_drops_old_records(self):
        hourly = Hourly(hourly_rate=10.0)
        hourly.add_timecard(TimeCard(date=date(2024, 9, 2), hours=8.0))
        emp = make_employee(classification=hourly, schedule=Weekly())
        emp.set_pay_classification(Hourly(hourly_rate=20.0), Weekly())
        assert emp.classification.timecards == []


class TestPayday:

    def test_payday_settles_and_pays(self):
        emp = make_employee(affiliation=UnionAffiliation(member_id=5, dues=10.0))
        pc = Paycheck(period=PayPeriod(start=date(2024, 9, 1), end=date(2024, 9, 30)))
        paid = []
        emp.payday(pc, paid.append)
        assert pc.gross_pay == 1000.0
        assert pc.deductions == 40.0
        assert pc.net_pay == 960.0
        assert [d.amount for d in paid] == [960.0]

    def test_pay_period_comes_from_schedule(self):
        emp = make_employee()
        assert emp.is_pay_date(date(2024, 9, 30))
        assert emp.get_pay_period(date(2024, 9, 30)).start == date(2024, 9, 1)


class TestCopy:

    def test_deep_copy_is_independent(self):
        emp = make_employee(classification=Hourly(hourly_rate=10.0), schedule=Weekly())
        copy = emp.model_copy(deep=True)
        copy.classification.add_timecard(TimeCard(date=date(2024, 9, 2), hours=1.0))
        assert emp.classification.timecards == []
