"""Use-case errors surfaced by transactions.

Errors that wrap a storage failure keep it as `cause` (and as the
exception's __cause__). The Unexpected* errors carry a message describing
which variant was found where another was required. InvalidTransaction
reports arguments the domain models reject, before the store is touched.
"""

from typing import Optional

from ..dao import DaoError


class UsecaseError(Exception):
    """Base class for transaction failures."""

    kind = "usecase error"

    def __init__(self, detail):
        super().__init__(detail)
        self.detail = detail

    @property
    def cause(self) -> Optional[DaoError]:
        return self.detail if isinstance(self.detail, DaoError) else None

    def __str__(self) -> str:
        return f"{self.kind}: {self.detail}"


class RegisterEmployeeFailed(UsecaseError):
    kind = "register employee failed"


class UnregisterEmployeeFailed(UsecaseError):
    kind = "unregister employee failed"


class NotFound(UsecaseError):
    kind = "employee not found"


class GetAllFailed(UsecaseError):
    kind = "can't get all employees"


class UpdateEmployeeFailed(UsecaseError):
    kind = "update employee failed"


class AddUnionMemberFailed(UsecaseError):
    kind = "add union member failed"


class RemoveUnionMemberFailed(UsecaseError):
    kind = "remove union member failed"


class UnexpectedPaymentClassification(UsecaseError):
    kind = "unexpected payment classification"


class UnexpectedAffiliation(UsecaseError):
    kind = "unexpected affiliation"


class InvalidTransaction(UsecaseError):
    kind = "invalid transaction"
