"""Transactions that switch an employee's pay classification.

Each one installs a fresh classification with its paired schedule; records
held by the previous classification are dropped.
"""

from dataclasses import dataclass

from ..dao import PayrollDao
from ..domain import Biweekly, Commissioned, Hourly, Monthly, Salaried, Weekly
from .templates import build, change_classification


@dataclass
class ChangeEmployeeSalariedTx:
    dao: PayrollDao
    emp_id: int
    salary: float

    def execute(self) -> None:
        change_classification(self.dao, self.emp_id, build(Salaried, salary=self.salary), Monthly())


@dataclass
class ChangeEmployeeHourlyTx:
    dao: PayrollDao
    emp_id: int
    hourly_rate: float

    def execute(self) -> None:
        change_classification(
            self.dao, self.emp_id, build(Hourly, hourly_rate=self.hourly_rate), Weekly()
        )


@dataclass
class ChangeEmployeeCommissionedTx:
    dao: PayrollDao
    emp_id: int
    salary: float
    commission_rate: float

    def execute(self) -> None:
        change_classification(
            self.dao,
            self.emp_id,
            build(Commissioned, salary=self.salary, commission_rate=self.commission_rate),
            Biweekly(),
        )
