"""Pay periods and paychecks.

A PayPeriod is an inclusive date range. A Paycheck is created empty for a
period on payday, settled once with gross pay and deductions, and then
appended to the employee's paycheck history.
"""

import datetime as dt
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field, model_validator


FRIDAY = 4  # date.weekday() value


class PayPeriod(BaseModel):
    """Inclusive date range covered by one paycheck."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    start: dt.date = Field(..., description="First day of the period (inclusive)")
    end: dt.date = Field(..., description="Last day of the period (inclusive)")

    @model_validator(mode="after")
    def check_order(self) -> "PayPeriod":
        if self.start > self.end:
            raise ValueError(f"period start {self.start} is after end {self.end}")
        return self

    def contains(self, day: dt.date) -> bool:
        return self.start <= day <= self.end

    def days(self) -> Iterator[dt.date]:
        """Iterate over every date in the period, start to end."""
        for offset in range((self.end - self.start).days + 1):
            yield self.start + dt.timedelta(days=offset)

    def count_weekday(self, weekday: int) -> int:
        """Number of dates in the period falling on `weekday` (Monday == 0)."""
        return sum(1 for day in self.days() if day.weekday() == weekday)

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


class Paycheck(BaseModel):
    """Result of one payday for one employee."""

    model_config = ConfigDict(extra="forbid")

    period: PayPeriod
    gross_pay: float = 0.0
    deductions: float = 0.0
    net_pay: float = 0.0

    def settle(self, gross_pay: float, deductions: float) -> None:
        """Set gross pay and deductions; net pay is always their difference."""
        self.gross_pay = gross_pay
        self.deductions = deductions
        self.net_pay = gross_pay - deductions
