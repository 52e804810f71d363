"""Payday - settle and record paychecks for everyone due on a date.

For each employee whose schedule makes `pay_date` a pay date:
1. Build an empty paycheck for the schedule's period ending on pay_date
2. gross = classification pay, deductions = affiliation deductions,
   net = gross - deductions
3. Pay it out through the employee's payment method
4. Append it to the employee's paycheck history

The first storage failure aborts the run; employees after it in the
store's iteration order are not paid by that run.
"""

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from ..dao import DaoError, PayrollDao
from ..domain import DisbursementCallback, Paycheck
from .errors import GetAllFailed, UpdateEmployeeFailed

logger = logging.getLogger(__name__)


@dataclass
class PaydayTx:
    dao: PayrollDao
    pay_date: dt.date
    on_disburse: Optional[DisbursementCallback] = None

    def execute(self) -> Dict[int, Paycheck]:
        """Run payday.

        Returns:
            Paychecks issued by this run, keyed by emp_id

        Raises:
            GetAllFailed: employees could not be listed
            UpdateEmployeeFailed: a paycheck could not be recorded
        """
        try:
            employees = self.dao.fetch_all()
        except DaoError as e:
            raise GetAllFailed(e) from e

        paid: Dict[int, Paycheck] = {}
        for employee in employees:
            if not employee.is_pay_date(self.pay_date):
                continue

            paycheck = Paycheck(period=employee.get_pay_period(self.pay_date))
            employee.payday(paycheck, self.on_disburse)
            try:
                self.dao.record_paycheck(employee.emp_id, paycheck)
            except DaoError as e:
                raise UpdateEmployeeFailed(e) from e
            paid[employee.emp_id] = paycheck
            logger.debug(
                f"paid emp_id={employee.emp_id} gross={paycheck.gross_pay:.2f} "
                f"deductions={paycheck.deductions:.2f} net={paycheck.net_pay:.2f}"
            )

        logger.info(f"Payday {self.pay_date.isoformat()}: {len(paid)} of {len(employees)} employee(s) paid")
        return paid
