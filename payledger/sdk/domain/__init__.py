"""domain - Employees, paychecks, and the four pay capability families.

Each capability is a closed set of pydantic models discriminated by `kind`:
- PaymentClassification: Salaried | Hourly | Commissioned
- PaymentSchedule: Monthly | Weekly | Biweekly
- PaymentMethod: Hold | Mail | Direct
- Affiliation: Unaffiliated | UnionAffiliation

Code that needs a specific variant checks with isinstance() before using
variant-only operations (add_timecard, member_id, ...).
"""

from .paycheck import FRIDAY, PayPeriod, Paycheck
from .classification import (
    OVERTIME_MULTIPLIER,
    STRAIGHT_TIME_HOURS,
    Commissioned,
    Hourly,
    PaymentClassification,
    Salaried,
    SalesReceipt,
    TimeCard,
)
from .schedule import Biweekly, Monthly, PaymentSchedule, Weekly
from .method import Direct, Disbursement, DisbursementCallback, Hold, Mail, PaymentMethod
from .affiliation import Affiliation, ServiceCharge, Unaffiliated, UnionAffiliation
from .employee import PAIRED_SCHEDULES, Employee, check_pairing

__all__ = [
    # Paychecks
    "FRIDAY",
    "PayPeriod",
    "Paycheck",
    # Classification
    "PaymentClassification",
    "Salaried",
    "Hourly",
    "Commissioned",
    "TimeCard",
    "SalesReceipt",
    "STRAIGHT_TIME_HOURS",
    "OVERTIME_MULTIPLIER",
    # Schedule
    "PaymentSchedule",
    "Monthly",
    "Weekly",
    "Biweekly",
    # Method
    "PaymentMethod",
    "Hold",
    "Mail",
    "Direct",
    "Disbursement",
    "DisbursementCallback",
    # Affiliation
    "Affiliation",
    "Unaffiliated",
    "UnionAffiliation",
    "ServiceCharge",
    # Employee
    "Employee",
    "PAIRED_SCHEDULES",
    "check_pairing",
]
