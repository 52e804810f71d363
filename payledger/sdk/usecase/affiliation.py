"""Union membership transactions.

Joining or leaving the union touches two places: the union index in the
store (member_id -> emp_id) and the employee's affiliation. The index is
updated first, inside the change_affiliation mutation; if the employee
update that follows fails, the index change stays in place.
"""

import datetime as dt
import logging
from dataclasses import dataclass

from ..dao import DaoError, PayrollDao
from ..domain import Employee, ServiceCharge, Unaffiliated, UnionAffiliation
from .errors import AddUnionMemberFailed, NotFound, RemoveUnionMemberFailed, UnexpectedAffiliation
from .templates import build, change_affiliation, fetch_employee, update_employee

logger = logging.getLogger(__name__)


@dataclass
class ChangeUnionMemberTx:
    """Enroll an employee in the union with the given member id and dues."""

    dao: PayrollDao
    emp_id: int
    member_id: int
    dues: float

    def execute(self) -> None:
        def record_membership(dao: PayrollDao, employee: Employee) -> None:
            try:
                dao.add_union_member(self.member_id, employee.emp_id)
            except DaoError as e:
                raise AddUnionMemberFailed(e) from e

        change_affiliation(
            self.dao,
            self.emp_id,
            record_membership,
            build(UnionAffiliation, member_id=self.member_id, dues=self.dues),
        )
        logger.debug(f"emp_id={self.emp_id} joined union as member_id={self.member_id}")


@dataclass
class ChangeUnaffiliatedTx:
    """Take an employee out of the union."""

    dao: PayrollDao
    emp_id: int

    def execute(self) -> None:
        def record_membership(dao: PayrollDao, employee: Employee) -> None:
            affiliation = employee.affiliation
            if not isinstance(affiliation, UnionAffiliation):
                raise UnexpectedAffiliation(
                    f"emp_id={employee.emp_id} is {affiliation.kind}, not a union member"
                )
            try:
                dao.remove_union_member(affiliation.member_id)
            except DaoError as e:
                raise RemoveUnionMemberFailed(e) from e

        change_affiliation(self.dao, self.emp_id, record_membership, Unaffiliated())
        logger.debug(f"emp_id={self.emp_id} left the union")


@dataclass
class ServiceChargeTx:
    """Charge a union member, addressed by member id."""

    dao: PayrollDao
    member_id: int
    date: dt.date
    amount: float

    def execute(self) -> None:
        charge = build(ServiceCharge, date=self.date, amount=self.amount)
        try:
            emp_id = self.dao.find_union_member(self.member_id)
        except DaoError as e:
            raise NotFound(e) from e

        employee = fetch_employee(self.dao, emp_id)
        affiliation = employee.affiliation
        if not isinstance(affiliation, UnionAffiliation):
            raise UnexpectedAffiliation(
                f"emp_id={emp_id} is {affiliation.kind}; member_id={self.member_id} has no union affiliation"
            )
        affiliation.add_service_charge(charge)
        update_employee(self.dao, employee)
        logger.debug(f"service charge member_id={self.member_id} {self.date} {self.amount}")
