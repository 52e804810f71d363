"""Payment schedules - when an employee is paid and for which period.

- Monthly: last calendar day of each month; period starts on the 1st
- Weekly: every Friday; period is the trailing 7 days
- Biweekly: Fridays of even ISO weeks; period is the trailing 14 days
"""

import datetime as dt
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .paycheck import FRIDAY, PayPeriod


def _days_before(day: dt.date, days: int) -> dt.date:
    """`day` minus `days`, stopping at date.min."""
    return day - dt.timedelta(days=min(days, (day - dt.date.min).days))


class Monthly(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["monthly"] = "monthly"

    def is_pay_date(self, day: dt.date) -> bool:
        """True when the next calendar day falls in a different month."""
        if day == dt.date.max:
            return True
        return (day + dt.timedelta(days=1)).month != day.month

    def period_for(self, payday: dt.date) -> PayPeriod:
        return PayPeriod(start=payday.replace(day=1), end=payday)


class Weekly(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["weekly"] = "weekly"

    def is_pay_date(self, day: dt.date) -> bool:
        return day.weekday() == FRIDAY

    def period_for(self, payday: dt.date) -> PayPeriod:
        return PayPeriod(start=_days_before(payday, 6), end=payday)


class Biweekly(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["biweekly"] = "biweekly"

    def is_pay_date(self, day: dt.date) -> bool:
        return day.weekday() == FRIDAY and day.isocalendar()[1] % 2 == 0

    def period_for(self, payday: dt.date) -> PayPeriod:
        return PayPeriod(start=_days_before(payday, 13), end=payday)


PaymentSchedule = Annotated[
    Union[Monthly, Weekly, Biweekly],
    Field(discriminator="kind"),
]
