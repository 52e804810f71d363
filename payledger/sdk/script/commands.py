"""Parsed script commands.

One frozen dataclass per command form. `build()` turns a command into the
matching transaction using a TransactionFactory.
"""

import datetime as dt
from dataclasses import dataclass


@dataclass(frozen=True)
class AddSalaryEmp:
    emp_id: int
    name: str
    address: str
    salary: float

    def build(self, factory):
        return factory.add_salary_employee(self.emp_id, self.name, self.address, self.salary)


@dataclass(frozen=True)
class AddHourlyEmp:
    emp_id: int
    name: str
    address: str
    hourly_rate: float

    def build(self, factory):
        return factory.add_hourly_employee(self.emp_id, self.name, self.address, self.hourly_rate)


@dataclass(frozen=True)
class AddCommissionedEmp:
    emp_id: int
    name: str
    address: str
    salary: float
    commission_rate: float

    def build(self, factory):
        return factory.add_commissioned_employee(
            self.emp_id, self.name, self.address, self.salary, self.commission_rate
        )


@dataclass(frozen=True)
class DelEmp:
    emp_id: int

    def build(self, factory):
        return factory.delete_employee(self.emp_id)


@dataclass(frozen=True)
class TimeCard:
    emp_id: int
    date: dt.date
    hours: float

    def build(self, factory):
        return factory.timecard(self.emp_id, self.date, self.hours)


@dataclass(frozen=True)
class SalesReceipt:
    emp_id: int
    date: dt.date
    amount: float

    def build(self, factory):
        return factory.sales_receipt(self.emp_id, self.date, self.amount)


@dataclass(frozen=True)
class ServiceCharge:
    member_id: int
    date: dt.date
    amount: float

    def build(self, factory):
        return factory.service_charge(self.member_id, self.date, self.amount)


@dataclass(frozen=True)
class ChgName:
    emp_id: int
    name: str

    def build(self, factory):
        return factory.change_name(self.emp_id, self.name)


@dataclass(frozen=True)
class ChgAddress:
    emp_id: int
    address: str

    def build(self, factory):
        return factory.change_address(self.emp_id, self.address)


@dataclass(frozen=True)
class ChgHourly:
    emp_id: int
    hourly_rate: float

    def build(self, factory):
        return factory.change_hourly(self.emp_id, self.hourly_rate)


@dataclass(frozen=True)
class ChgSalaried:
    emp_id: int
    salary: float

    def build(self, factory):
        return factory.change_salaried(self.emp_id, self.salary)


@dataclass(frozen=True)
class ChgCommissioned:
    emp_id: int
    salary: float
    commission_rate: float

    def build(self, factory):
        return factory.change_commissioned(self.emp_id, self.salary, self.commission_rate)


@dataclass(frozen=True)
class ChgHold:
    emp_id: int

    def build(self, factory):
        return factory.change_hold(self.emp_id)


@dataclass(frozen=True)
class ChgDirect:
    emp_id: int
    bank: str
    account: str

    def build(self, factory):
        return factory.change_direct(self.emp_id, self.bank, self.account)


@dataclass(frozen=True)
class ChgMail:
    emp_id: int
    address: str

    def build(self, factory):
        return factory.change_mail(self.emp_id, self.address)


@dataclass(frozen=True)
class ChgMember:
    emp_id: int
    member_id: int
    dues: float

    def build(self, factory):
        return factory.change_union_member(self.emp_id, self.member_id, self.dues)


@dataclass(frozen=True)
class ChgNoMember:
    emp_id: int

    def build(self, factory):
        return factory.change_unaffiliated(self.emp_id)


@dataclass(frozen=True)
class Payday:
    pay_date: dt.date

    def build(self, factory):
        return factory.payday(self.pay_date)
