"""Payment methods - how a settled paycheck reaches the employee.

Paying is a side effect: the method describes the disbursement as a
Disbursement record, logs it, and passes it to an optional callback so
callers can collect what was paid out.
"""

import logging
from typing import Annotated, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .paycheck import Paycheck, PayPeriod

logger = logging.getLogger(__name__)


class Disbursement(BaseModel):
    """One payout made on payday."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    method: Literal["hold", "mail", "direct"]
    destination: str = Field(..., description="Where the money went (paymaster, address, or bank/account)")
    amount: float = Field(..., description="Net pay disbursed")
    period: PayPeriod


DisbursementCallback = Callable[[Disbursement], None]


class Hold(BaseModel):
    """Check is held by the paymaster for pickup."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["hold"] = "hold"

    def pay(self, paycheck: Paycheck, on_disburse: Optional[DisbursementCallback] = None) -> None:
        _disburse(
            Disbursement(method="hold", destination="paymaster", amount=paycheck.net_pay, period=paycheck.period),
            on_disburse,
        )


class Mail(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["mail"] = "mail"
    address: str

    def pay(self, paycheck: Paycheck, on_disburse: Optional[DisbursementCallback] = None) -> None:
        _disburse(
            Disbursement(method="mail", destination=self.address, amount=paycheck.net_pay, period=paycheck.period),
            on_disburse,
        )


class Direct(BaseModel):
    """Direct deposit into a bank account."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["direct"] = "direct"
    bank: str
    account: str

    def pay(self, paycheck: Paycheck, on_disburse: Optional[DisbursementCallback] = None) -> None:
        _disburse(
            Disbursement(
                method="direct",
                destination=f"{self.account} at {self.bank}",
                amount=paycheck.net_pay,
                period=paycheck.period,
            ),
            on_disburse,
        )


def _disburse(disbursement: Disbursement, on_disburse: Optional[DisbursementCallback]) -> None:
    logger.info(
        f"{disbursement.method}: {disbursement.amount:.2f} to {disbursement.destination} "
        f"for {disbursement.period}"
    )
    if on_disburse is not None:
        on_disburse(disbursement)


PaymentMethod = Annotated[
    Union[Hold, Mail, Direct],
    Field(discriminator="kind"),
]
