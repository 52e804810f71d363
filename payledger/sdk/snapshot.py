"""Plain-data view of a ledger, for JSON/YAML output and rendering."""

from typing import Any, Dict, List, Optional

from .dao import MockDb
from .domain import Disbursement


def ledger_snapshot(
    db: MockDb,
    report=None,
    disbursements: Optional[List[Disbursement]] = None,
) -> Dict[str, Any]:
    """Dump employees, union index, paychecks and run outcome as plain data.

    Args:
        db: Store to read
        report: Optional RunReport from the run that filled the store
        disbursements: Optional disbursements collected during paydays

    Returns:
        Dict with JSON-safe values (dates as ISO strings)
    """
    employees = sorted(db.fetch_all(), key=lambda e: e.emp_id)
    snapshot: Dict[str, Any] = {
        "employees": [emp.model_dump(mode="json") for emp in employees],
        "union_members": {str(mid): emp_id for mid, emp_id in sorted(db.union_members().items())},
        "paychecks": {
            str(emp_id): [pc.model_dump(mode="json") for pc in paychecks]
            for emp_id, paychecks in sorted(db.paycheck_history().items())
            if paychecks
        },
    }
    if disbursements is not None:
        snapshot["disbursements"] = [d.model_dump(mode="json") for d in disbursements]
    if report is not None:
        snapshot["run"] = {
            "executed": report.executed,
            "failed": report.failed,
            "errors": [
                {"transaction": position, "error": type(err).__name__, "message": str(err)}
                for position, err in report.errors
            ],
        }
    return snapshot
