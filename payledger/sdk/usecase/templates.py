"""Transaction templates shared by the concrete transactions.

- build: construct a domain model from transaction arguments
- add_employee: build an employee with default method and affiliation, insert
- change_employee: fetch -> mutate -> update
- change_classification / change_method / change_affiliation: change_employee
  specialised to one facet of the employee

The mutation passed to change_employee receives the dao as well as the
employee, so it may run its own storage operations (e.g. touching the
union index). Those side effects are not rolled back if the mutation then
fails; the employee itself is only written back when the mutation succeeds.
"""

import logging
from typing import Callable, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..dao import DaoError, PayrollDao
from ..domain import (
    Affiliation,
    Employee,
    PaymentClassification,
    PaymentMethod,
    PaymentSchedule,
)
from .errors import InvalidTransaction, NotFound, RegisterEmployeeFailed, UpdateEmployeeFailed

logger = logging.getLogger(__name__)

Mutation = Callable[[PayrollDao, Employee], None]
ModelT = TypeVar("ModelT", bound=BaseModel)


def build(model: Type[ModelT], **values) -> ModelT:
    """Construct `model` from transaction arguments.

    Raises:
        InvalidTransaction: a value failed the model's validation
    """
    try:
        return model(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'value'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidTransaction(f"{model.__name__}: {problems}") from e


def add_employee(
    dao: PayrollDao,
    emp_id: int,
    name: str,
    address: str,
    classification: PaymentClassification,
    schedule: PaymentSchedule,
) -> int:
    """Register a new employee paid by Hold and not in the union.

    Returns:
        The emp_id of the inserted employee

    Raises:
        InvalidTransaction: emp_id, name or address is not acceptable
        RegisterEmployeeFailed: the store refused the insert
    """
    employee = build(
        Employee,
        emp_id=emp_id,
        name=name,
        address=address,
        classification=classification,
        schedule=schedule,
    )
    try:
        emp_id = dao.insert(employee)
    except DaoError as e:
        raise RegisterEmployeeFailed(e) from e
    logger.debug(f"added emp_id={emp_id} ({classification.kind}, {schedule.kind})")
    return emp_id


def fetch_employee(dao: PayrollDao, emp_id: int) -> Employee:
    """Raises NotFound if the store has no such employee."""
    try:
        return dao.fetch(emp_id)
    except DaoError as e:
        raise NotFound(e) from e


def update_employee(dao: PayrollDao, employee: Employee) -> None:
    """Raises UpdateEmployeeFailed if the store refuses the update."""
    try:
        dao.update(employee)
    except DaoError as e:
        raise UpdateEmployeeFailed(e) from e


def change_employee(dao: PayrollDao, emp_id: int, mutate: Mutation) -> None:
    """Fetch an employee, apply `mutate`, and write the result back.

    Any exception from `mutate` propagates and the update is skipped.

    Raises:
        NotFound: emp_id is not in the store
        UpdateEmployeeFailed: the store refused the update
    """
    employee = fetch_employee(dao, emp_id)
    mutate(dao, employee)
    update_employee(dao, employee)


def change_classification(
    dao: PayrollDao,
    emp_id: int,
    classification: PaymentClassification,
    schedule: PaymentSchedule,
) -> None:
    """Replace classification and its paired schedule together."""

    def mutate(_dao: PayrollDao, employee: Employee) -> None:
        employee.set_pay_classification(classification, schedule)

    change_employee(dao, emp_id, mutate)


def change_method(dao: PayrollDao, emp_id: int, method: PaymentMethod) -> None:
    def mutate(_dao: PayrollDao, employee: Employee) -> None:
        employee.method = method

    change_employee(dao, emp_id, mutate)


def change_affiliation(
    dao: PayrollDao,
    emp_id: int,
    record_membership: Mutation,
    affiliation: Affiliation,
) -> None:
    """Run `record_membership`, then replace the employee's affiliation.

    `record_membership` sees the employee's current affiliation and may
    update the union index through the dao.
    """

    def mutate(dao: PayrollDao, employee: Employee) -> None:
        record_membership(dao, employee)
        employee.affiliation = affiliation

    change_employee(dao, emp_id, mutate)
