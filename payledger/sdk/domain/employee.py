"""Employee entity.

An employee always holds exactly one classification, schedule, method and
affiliation. Classification and schedule travel together: each
classification has one matching schedule and they can only be replaced as
a pair through set_pay_classification().
"""

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .affiliation import Affiliation, Unaffiliated
from .classification import PaymentClassification
from .method import DisbursementCallback, Hold, PaymentMethod
from .paycheck import Paycheck, PayPeriod
from .schedule import PaymentSchedule


# classification kind -> schedule kind
PAIRED_SCHEDULES = {
    "salaried": "monthly",
    "hourly": "weekly",
    "commissioned": "biweekly",
}

_PAIRED_FIELDS = frozenset({"classification", "schedule"})


def check_pairing(classification: Any, schedule: Any) -> None:
    """Raise ValueError unless the schedule is the one paired with the classification."""
    expected = PAIRED_SCHEDULES[classification.kind]
    if schedule.kind != expected:
        raise ValueError(
            f"{classification.kind} classification must be paid {expected}, not {schedule.kind}"
        )


class Employee(BaseModel):
    model_config = ConfigDict(extra="forbid")

    emp_id: int = Field(..., ge=0, description="Unique employee id")
    name: str
    address: str
    classification: PaymentClassification
    schedule: PaymentSchedule
    method: PaymentMethod = Field(default_factory=Hold)
    affiliation: Affiliation = Field(default_factory=Unaffiliated)

    @model_validator(mode="after")
    def check_schedule_matches(self) -> "Employee":
        check_pairing(self.classification, self.schedule)
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _PAIRED_FIELDS:
            raise AttributeError(
                f"'{name}' cannot be set alone; use set_pay_classification()"
            )
        super().__setattr__(name, value)

    def set_pay_classification(self, classification: PaymentClassification, schedule: PaymentSchedule) -> None:
        """Replace classification and schedule together.

        The old classification, with its timecards or sales receipts, is
        discarded.
        """
        check_pairing(classification, schedule)
        super().__setattr__("classification", classification)
        super().__setattr__("schedule", schedule)

    def is_pay_date(self, day: dt.date) -> bool:
        return self.schedule.is_pay_date(day)

    def get_pay_period(self, payday: dt.date) -> PayPeriod:
        return self.schedule.period_for(payday)

    def payday(self, paycheck: Paycheck, on_disburse: Optional[DisbursementCallback] = None) -> None:
        """Settle the paycheck for this employee and pay it out."""
        gross_pay = self.classification.calculate_pay(paycheck)
        deductions = self.affiliation.deductions_for(paycheck)
        paycheck.settle(gross_pay, deductions)
        self.method.pay(paycheck, on_disburse)
