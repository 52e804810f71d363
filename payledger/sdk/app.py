"""Application driver - runs every transaction from a source.

Individual transaction failures are logged and skipped; the run always
goes on to the next transaction. RunReport records what was skipped so
callers can still inspect it.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

from .dao import MockDb, PayrollDao
from .domain import Disbursement
from .script import TextParserTransactionSource
from .usecase import UsecaseError

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.INFO),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)


class Transaction(Protocol):
    def execute(self): ...


class TransactionSource(Protocol):
    def get_transaction(self) -> Optional[Transaction]: ...


@dataclass
class RunReport:
    """Outcome of running a transaction source."""

    executed: int = 0
    failed: int = 0
    errors: List[Tuple[int, UsecaseError]] = field(default_factory=list)  # (position, error)

    @property
    def succeeded(self) -> int:
        return self.executed - self.failed


def run_transactions(source: TransactionSource) -> RunReport:
    """Execute each transaction from `source` until it is exhausted."""
    report = RunReport()
    while (tx := source.get_transaction()) is not None:
        report.executed += 1
        try:
            tx.execute()
        except UsecaseError as e:
            report.failed += 1
            report.errors.append((report.executed, e))
            logger.warning(f"Transaction {report.executed} ({type(tx).__name__}) failed: {e}")
    logger.info(f"Ran {report.executed} transaction(s), {report.failed} failed")
    return report


class PayrollApp:
    """A store plus a script source. Collects disbursements made on paydays."""

    def __init__(self, script_text: str, dao: Optional[PayrollDao] = None, strict: bool = True):
        self.dao = dao if dao is not None else MockDb()
        self.disbursements: List[Disbursement] = []
        self.source = TextParserTransactionSource(
            self.dao, script_text, strict=strict, on_disburse=self.disbursements.append
        )
        self.commands = self.source.commands

    def run(self) -> RunReport:
        return run_transactions(self.source)
