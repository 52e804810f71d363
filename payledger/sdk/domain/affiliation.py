"""Affiliations - union membership and the deductions it carries.

A union member pays dues once for every Friday in the pay period, plus any
service charges dated inside the period. Unaffiliated employees have no
deductions and no member id.
"""

import datetime as dt
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .paycheck import FRIDAY, Paycheck


class ServiceCharge(BaseModel):
    """A charge levied by the union against one member."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    date: dt.date
    amount: float = Field(..., ge=0)


class Unaffiliated(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["unaffiliated"] = "unaffiliated"

    def deductions_for(self, paycheck: Paycheck) -> float:
        return 0.0


class UnionAffiliation(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["union"] = "union"
    member_id: int = Field(..., ge=0, description="Union member id (key of the union index)")
    dues: float = Field(..., ge=0, description="Dues charged per Friday")
    service_charges: List[ServiceCharge] = Field(default_factory=list)

    def add_service_charge(self, charge: ServiceCharge) -> None:
        self.service_charges.append(charge)

    def deductions_for(self, paycheck: Paycheck) -> float:
        period = paycheck.period
        dues = self.dues * period.count_weekday(FRIDAY)
        charges = sum((sc.amount for sc in self.service_charges if period.contains(sc.date)), 0.0)
        return dues + charges


Affiliation = Annotated[
    Union[Unaffiliated, UnionAffiliation],
    Field(discriminator="kind"),
]
