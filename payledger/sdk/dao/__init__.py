"""dao - Storage port for employees, the union index, and paychecks.

Usage:
    from payledger.sdk.dao import MockDb, FetchError

    db = MockDb()
    db.insert(employee)
    db.fetch(employee.emp_id)
"""

from .errors import DaoError, DeleteError, FetchError, InsertError, UpdateError
from .base import PayrollDao
from .mock_db import MockDb

__all__ = [
    # Errors
    "DaoError",
    "InsertError",
    "DeleteError",
    "FetchError",
    "UpdateError",
    # Port
    "PayrollDao",
    "MockDb",
]
