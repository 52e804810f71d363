"""Builds transactions bound to one PayrollDao."""

import datetime as dt
from typing import Optional

from .dao import PayrollDao
from .domain import DisbursementCallback
from .usecase import (
    AddCommissionedEmployeeTx,
    AddHourlyEmployeeTx,
    AddSalaryEmployeeTx,
    ChangeEmployeeAddressTx,
    ChangeEmployeeCommissionedTx,
    ChangeEmployeeDirectTx,
    ChangeEmployeeHoldTx,
    ChangeEmployeeHourlyTx,
    ChangeEmployeeMailTx,
    ChangeEmployeeNameTx,
    ChangeEmployeeSalariedTx,
    ChangeUnaffiliatedTx,
    ChangeUnionMemberTx,
    DeleteEmployeeTx,
    PaydayTx,
    SalesReceiptTx,
    ServiceChargeTx,
    TimeCardTx,
)


class TransactionFactory:
    """One builder per transaction, all sharing the same store.

    `on_disburse` is handed to every PaydayTx the factory builds.
    """

    def __init__(self, dao: PayrollDao, on_disburse: Optional[DisbursementCallback] = None):
        self.dao = dao
        self.on_disburse = on_disburse

    def add_salary_employee(self, emp_id: int, name: str, address: str, salary: float):
        return AddSalaryEmployeeTx(self.dao, emp_id, name, address, salary)

    def add_hourly_employee(self, emp_id: int, name: str, address: str, hourly_rate: float):
        return AddHourlyEmployeeTx(self.dao, emp_id, name, address, hourly_rate)

    def add_commissioned_employee(
        self, emp_id: int, name: str, address: str, salary: float, commission_rate: float
    ):
        return AddCommissionedEmployeeTx(self.dao, emp_id, name, address, salary, commission_rate)

    def delete_employee(self, emp_id: int):
        return DeleteEmployeeTx(self.dao, emp_id)

    def timecard(self, emp_id: int, date: dt.date, hours: float):
        return TimeCardTx(self.dao, emp_id, date, hours)

    def sales_receipt(self, emp_id: int, date: dt.date, amount: float):
        return SalesReceiptTx(self.dao, emp_id, date, amount)

    def service_charge(self, member_id: int, date: dt.date, amount: float):
        return ServiceChargeTx(self.dao, member_id, date, amount)

    def change_name(self, emp_id: int, name: str):
        return ChangeEmployeeNameTx(self.dao, emp_id, name)

    def change_address(self, emp_id: int, address: str):
        return ChangeEmployeeAddressTx(self.dao, emp_id, address)

    def change_salaried(self, emp_id: int, salary: float):
        return ChangeEmployeeSalariedTx(self.dao, emp_id, salary)

    def change_hourly(self, emp_id: int, hourly_rate: float):
        return ChangeEmployeeHourlyTx(self.dao, emp_id, hourly_rate)

    def change_commissioned(self, emp_id: int, salary: float, commission_rate: float):
        return ChangeEmployeeCommissionedTx(self.dao, emp_id, salary, commission_rate)

    def change_hold(self, emp_id: int):
        return ChangeEmployeeHoldTx(self.dao, emp_id)

    def change_mail(self, emp_id: int, address: str):
        return ChangeEmployeeMailTx(self.dao, emp_id, address)

    def change_direct(self, emp_id: int, bank: str, account: str):
        return ChangeEmployeeDirectTx(self.dao, emp_id, bank, account)

    def change_union_member(self, emp_id: int, member_id: int, dues: float):
        return ChangeUnionMemberTx(self.dao, emp_id, member_id, dues)

    def change_unaffiliated(self, emp_id: int):
        return ChangeUnaffiliatedTx(self.dao, emp_id)

    def payday(self, pay_date: dt.date):
        return PaydayTx(self.dao, pay_date, self.on_disburse)
