"""usecase - Transactions against a PayrollDao.

Every transaction is a dataclass holding the dao and its arguments, with an
execute() method that returns the result or raises a UsecaseError.

Usage:
    from payledger.sdk.dao import MockDb
    from payledger.sdk.usecase import AddHourlyEmployeeTx, TimeCardTx, PaydayTx

    db = MockDb()
    AddHourlyEmployeeTx(db, 1, "Bob", "Home", 15.0).execute()
    TimeCardTx(db, 1, date(2024, 9, 6), 10.0).execute()
    paychecks = PaydayTx(db, date(2024, 9, 6)).execute()
"""

from .errors import (
    AddUnionMemberFailed,
    GetAllFailed,
    InvalidTransaction,
    NotFound,
    RegisterEmployeeFailed,
    RemoveUnionMemberFailed,
    UnexpectedAffiliation,
    UnexpectedPaymentClassification,
    UnregisterEmployeeFailed,
    UpdateEmployeeFailed,
    UsecaseError,
)
from .templates import (
    add_employee,
    build,
    change_affiliation,
    change_classification,
    change_employee,
    change_method,
    fetch_employee,
    update_employee,
)
from .general import (
    AddCommissionedEmployeeTx,
    AddHourlyEmployeeTx,
    AddSalaryEmployeeTx,
    ChangeEmployeeAddressTx,
    ChangeEmployeeNameTx,
    DeleteEmployeeTx,
    SalesReceiptTx,
    TimeCardTx,
)
from .classification import (
    ChangeEmployeeCommissionedTx,
    ChangeEmployeeHourlyTx,
    ChangeEmployeeSalariedTx,
)
from .method import ChangeEmployeeDirectTx, ChangeEmployeeHoldTx, ChangeEmployeeMailTx
from .affiliation import ChangeUnaffiliatedTx, ChangeUnionMemberTx, ServiceChargeTx
from .payday import PaydayTx

__all__ = [
    # Errors
    "UsecaseError",
    "RegisterEmployeeFailed",
    "UnregisterEmployeeFailed",
    "NotFound",
    "GetAllFailed",
    "InvalidTransaction",
    "UpdateEmployeeFailed",
    "AddUnionMemberFailed",
    "RemoveUnionMemberFailed",
    "UnexpectedPaymentClassification",
    "UnexpectedAffiliation",
    # Templates
    "add_employee",
    "build",
    "change_employee",
    "change_classification",
    "change_method",
    "change_affiliation",
    "fetch_employee",
    "update_employee",
    # General
    "AddSalaryEmployeeTx",
    "AddHourlyEmployeeTx",
    "AddCommissionedEmployeeTx",
    "DeleteEmployeeTx",
    "ChangeEmployeeNameTx",
    "ChangeEmployeeAddressTx",
    "TimeCardTx",
    "SalesReceiptTx",
    # Classification
    "ChangeEmployeeSalariedTx",
    "ChangeEmployeeHourlyTx",
    "ChangeEmployeeCommissionedTx",
    # Method
    "ChangeEmployeeHoldTx",
    "ChangeEmployeeMailTx",
    "ChangeEmployeeDirectTx",
    # Affiliation
    "ChangeUnionMemberTx",
    "ChangeUnaffiliatedTx",
    "ServiceChargeTx",
    # Payday
    "PaydayTx",
]
