"""In-memory PayrollDao backed by plain dicts."""

import logging
from typing import Dict, List

from ..domain import Employee, Paycheck
from .base import PayrollDao
from .errors import DeleteError, FetchError, InsertError, UpdateError

logger = logging.getLogger(__name__)


class MockDb(PayrollDao):
    """Dict-backed store. Records are deep-copied in and out."""

    def __init__(self):
        self._employees: Dict[int, Employee] = {}
        self._union_members: Dict[int, int] = {}
        self._paychecks: Dict[int, List[Paycheck]] = {}

    def insert(self, employee: Employee) -> int:
        emp_id = employee.emp_id
        if emp_id in self._employees:
            raise InsertError(f"emp_id={emp_id} already exists")
        self._employees[emp_id] = employee.model_copy(deep=True)
        logger.debug(f"insert emp_id={emp_id}")
        return emp_id

    def delete(self, emp_id: int) -> None:
        if self._employees.pop(emp_id, None) is None:
            raise DeleteError(f"emp_id={emp_id} not found")
        logger.debug(f"delete emp_id={emp_id}")

    def fetch(self, emp_id: int) -> Employee:
        employee = self._employees.get(emp_id)
        if employee is None:
            raise FetchError(f"emp_id={emp_id} not found")
        return employee.model_copy(deep=True)

    def update(self, employee: Employee) -> None:
        emp_id = employee.emp_id
        if emp_id not in self._employees:
            raise UpdateError(f"emp_id={emp_id} not found")
        self._employees[emp_id] = employee.model_copy(deep=True)
        logger.debug(f"update emp_id={emp_id}")

    def fetch_all(self) -> List[Employee]:
        return [emp.model_copy(deep=True) for emp in self._employees.values()]

    def add_union_member(self, member_id: int, emp_id: int) -> None:
        if member_id in self._union_members:
            raise InsertError(f"member_id={member_id} already exists")
        if emp_id in self._union_members.values():
            raise InsertError(f"emp_id={emp_id} already exists")
        self._union_members[member_id] = emp_id
        logger.debug(f"add union member member_id={member_id} emp_id={emp_id}")

    def remove_union_member(self, member_id: int) -> None:
        if self._union_members.pop(member_id, None) is None:
            raise DeleteError(f"member_id={member_id} not found")
        logger.debug(f"remove union member member_id={member_id}")

    def find_union_member(self, member_id: int) -> int:
        try:
            return self._union_members[member_id]
        except KeyError:
            raise FetchError(f"member_id={member_id} not found") from None

    def record_paycheck(self, emp_id: int, paycheck: Paycheck) -> None:
        self._paychecks.setdefault(emp_id, []).append(paycheck.model_copy(deep=True))
        logger.debug(f"record paycheck emp_id={emp_id} period={paycheck.period}")

    def fetch_paychecks(self, emp_id: int) -> List[Paycheck]:
        return [pc.model_copy(deep=True) for pc in self._paychecks.get(emp_id, [])]

    def union_members(self) -> Dict[int, int]:
        """Snapshot of the union index, member_id -> emp_id."""
        return dict(self._union_members)

    def paycheck_history(self) -> Dict[int, List[Paycheck]]:
        """Copy of every recorded paycheck, emp_id -> paychecks in order.

        Includes employees deleted after they were paid.
        """
        return {emp_id: self.fetch_paychecks(emp_id) for emp_id in self._paychecks}
