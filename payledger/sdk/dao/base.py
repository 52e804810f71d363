"""Storage port consumed by the transaction layer.

Implementations own three collections:
- employees keyed by emp_id
- the union index, member_id <-> emp_id (one-to-one)
- paycheck history per emp_id (append-only)

Callers get back copies: mutating a fetched Employee has no effect on the
store until it is passed to update().
"""

from abc import ABC, abstractmethod
from typing import List

from ..domain import Employee, Paycheck


class PayrollDao(ABC):

    @abstractmethod
    def insert(self, employee: Employee) -> int:
        """Store a new employee and return its emp_id.

        Raises:
            InsertError: emp_id is already present
        """

    @abstractmethod
    def delete(self, emp_id: int) -> None:
        """Remove an employee.

        Raises:
            DeleteError: emp_id is absent
        """

    @abstractmethod
    def fetch(self, emp_id: int) -> Employee:
        """Raises FetchError if emp_id is absent."""

    @abstractmethod
    def update(self, employee: Employee) -> None:
        """Replace the stored record with the same emp_id.

        Raises:
            UpdateError: emp_id is absent
        """

    @abstractmethod
    def fetch_all(self) -> List[Employee]:
        """All employees, in the store's iteration order."""

    @abstractmethod
    def add_union_member(self, member_id: int, emp_id: int) -> None:
        """Map member_id to emp_id in the union index.

        Raises:
            InsertError: member_id is taken, or emp_id is already mapped
        """

    @abstractmethod
    def remove_union_member(self, member_id: int) -> None:
        """Raises DeleteError if member_id is absent."""

    @abstractmethod
    def find_union_member(self, member_id: int) -> int:
        """Return the emp_id mapped to member_id.

        Raises:
            FetchError: member_id is absent
        """

    @abstractmethod
    def record_paycheck(self, emp_id: int, paycheck: Paycheck) -> None:
        """Append a paycheck to emp_id's history, creating it if needed."""

    @abstractmethod
    def fetch_paychecks(self, emp_id: int) -> List[Paycheck]:
        """Paycheck history for emp_id, oldest first. Empty if none."""
