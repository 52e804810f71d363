"""Transactions that switch how an employee is paid."""

from dataclasses import dataclass

from ..dao import PayrollDao
from ..domain import Direct, Hold, Mail
from .templates import build, change_method


@dataclass
class ChangeEmployeeHoldTx:
    dao: PayrollDao
    emp_id: int

    def execute(self) -> None:
        change_method(self.dao, self.emp_id, Hold())


@dataclass
class ChangeEmployeeMailTx:
    dao: PayrollDao
    emp_id: int
    address: str

    def execute(self) -> None:
        change_method(self.dao, self.emp_id, build(Mail, address=self.address))


@dataclass
class ChangeEmployeeDirectTx:
    dao: PayrollDao
    emp_id: int
    bank: str
    account: str

    def execute(self) -> None:
        change_method(self.dao, self.emp_id, build(Direct, bank=self.bank, account=self.account))
