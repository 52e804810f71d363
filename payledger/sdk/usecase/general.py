"""Employee lifecycle and record-posting transactions."""

import datetime as dt
import logging
from dataclasses import dataclass

from ..dao import DaoError, PayrollDao
from ..domain import (
    Biweekly,
    Commissioned,
    Employee,
    Hourly,
    Monthly,
    Salaried,
    SalesReceipt,
    TimeCard,
    Weekly,
)
from .errors import UnexpectedPaymentClassification, UnregisterEmployeeFailed
from .templates import add_employee, build, change_employee, fetch_employee, update_employee

logger = logging.getLogger(__name__)


@dataclass
class AddSalaryEmployeeTx:
    """Add an employee paid a fixed salary at the end of each month."""

    dao: PayrollDao
    emp_id: int
    name: str
    address: str
    salary: float

    def execute(self) -> int:
        return add_employee(
            self.dao, self.emp_id, self.name, self.address,
            build(Salaried, salary=self.salary), Monthly(),
        )


@dataclass
class AddHourlyEmployeeTx:
    """Add an employee paid weekly from timecards."""

    dao: PayrollDao
    emp_id: int
    name: str
    address: str
    hourly_rate: float

    def execute(self) -> int:
        return add_employee(
            self.dao, self.emp_id, self.name, self.address,
            build(Hourly, hourly_rate=self.hourly_rate), Weekly(),
        )


@dataclass
class AddCommissionedEmployeeTx:
    """Add an employee paid salary plus commission every other Friday."""

    dao: PayrollDao
    emp_id: int
    name: str
    address: str
    salary: float
    commission_rate: float

    def execute(self) -> int:
        return add_employee(
            self.dao, self.emp_id, self.name, self.address,
            build(Commissioned, salary=self.salary, commission_rate=self.commission_rate),
            Biweekly(),
        )


@dataclass
class DeleteEmployeeTx:
    """Remove an employee.

    The union index is left alone: a deleted member's entry stays behind.
    """

    dao: PayrollDao
    emp_id: int

    def execute(self) -> None:
        try:
            self.dao.delete(self.emp_id)
        except DaoError as e:
            raise UnregisterEmployeeFailed(e) from e
        logger.debug(f"deleted emp_id={self.emp_id}")


@dataclass
class ChangeEmployeeNameTx:
    dao: PayrollDao
    emp_id: int
    name: str

    def execute(self) -> None:
        def mutate(_dao: PayrollDao, employee: Employee) -> None:
            employee.name = self.name

        change_employee(self.dao, self.emp_id, mutate)


@dataclass
class ChangeEmployeeAddressTx:
    dao: PayrollDao
    emp_id: int
    address: str

    def execute(self) -> None:
        def mutate(_dao: PayrollDao, employee: Employee) -> None:
            employee.address = self.address

        change_employee(self.dao, self.emp_id, mutate)


@dataclass
class TimeCardTx:
    """Post a timecard to an hourly employee."""

    dao: PayrollDao
    emp_id: int
    date: dt.date
    hours: float

    def execute(self) -> None:
        timecard = build(TimeCard, date=self.date, hours=self.hours)
        employee = fetch_employee(self.dao, self.emp_id)
        classification = employee.classification
        if not isinstance(classification, Hourly):
            raise UnexpectedPaymentClassification(
                f"emp_id={self.emp_id} is {classification.kind}; timecards need hourly"
            )
        classification.add_timecard(timecard)
        update_employee(self.dao, employee)
        logger.debug(f"timecard emp_id={self.emp_id} {self.date} {self.hours}h")


@dataclass
class SalesReceiptTx:
    """Post a sales receipt to a commissioned employee."""

    dao: PayrollDao
    emp_id: int
    date: dt.date
    amount: float

    def execute(self) -> None:
        receipt = build(SalesReceipt, date=self.date, amount=self.amount)
        employee = fetch_employee(self.dao, self.emp_id)
        classification = employee.classification
        if not isinstance(classification, Commissioned):
            raise UnexpectedPaymentClassification(
                f"emp_id={self.emp_id} is {classification.kind}; sales receipts need commissioned"
            )
        classification.add_sales_receipt(receipt)
        update_employee(self.dao, employee)
        logger.debug(f"sales receipt emp_id={self.emp_id} {self.date} {self.amount}")
