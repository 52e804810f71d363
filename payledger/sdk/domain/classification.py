"""Payment classifications - how gross pay is computed.

Three variants, discriminated by `kind`:
- Salaried: fixed salary per pay period
- Hourly: timecards inside the period, with overtime past 8 hours a card
- Commissioned: base salary plus commission on sales inside the period

Timecards and sales receipts live on the variant that uses them. Replacing
an employee's classification discards the records held by the old one.
"""

import datetime as dt
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .paycheck import Paycheck


# Straight-time hours per timecard before overtime applies
STRAIGHT_TIME_HOURS = 8.0
OVERTIME_MULTIPLIER = 1.5


class TimeCard(BaseModel):
    """Hours worked on one date."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    date: dt.date
    hours: float = Field(..., ge=0, description="Hours worked")


class SalesReceipt(BaseModel):
    """One sale made by a commissioned employee."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    date: dt.date
    amount: float = Field(..., ge=0, description="Sale amount")


class Salaried(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["salaried"] = "salaried"
    salary: float = Field(..., ge=0, description="Salary paid each period")

    def calculate_pay(self, paycheck: Paycheck) -> float:
        return self.salary


class Hourly(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["hourly"] = "hourly"
    hourly_rate: float = Field(..., ge=0)
    timecards: List[TimeCard] = Field(default_factory=list)

    def add_timecard(self, timecard: TimeCard) -> None:
        self.timecards.append(timecard)

    def calculate_pay(self, paycheck: Paycheck) -> float:
        """Sum pay for the timecards dated inside the paycheck's period."""
        period = paycheck.period
        return sum(
            (self._pay_for_timecard(tc) for tc in self.timecards if period.contains(tc.date)),
            0.0,
        )

    def _pay_for_timecard(self, timecard: TimeCard) -> float:
        overtime = max(timecard.hours - STRAIGHT_TIME_HOURS, 0.0)
        straight_time = timecard.hours - overtime
        return straight_time * self.hourly_rate + overtime * self.hourly_rate * OVERTIME_MULTIPLIER


class Commissioned(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["commissioned"] = "commissioned"
    salary: float = Field(..., ge=0, description="Base salary paid each period")
    commission_rate: float = Field(..., ge=0, description="Fraction of each sale paid as commission")
    sales_receipts: List[SalesReceipt] = Field(default_factory=list)

    def add_sales_receipt(self, receipt: SalesReceipt) -> None:
        self.sales_receipts.append(receipt)

    def calculate_pay(self, paycheck: Paycheck) -> float:
        period = paycheck.period
        commission = sum(
            (sr.amount * self.commission_rate for sr in self.sales_receipts if period.contains(sr.date)),
            0.0,
        )
        return self.salary + commission


PaymentClassification = Annotated[
    Union[Salaried, Hourly, Commissioned],
    Field(discriminator="kind"),
]
