"""Transaction source fed by script text."""

from collections import deque
from typing import Optional

from ..dao import PayrollDao
from ..domain import DisbursementCallback
from ..factory import TransactionFactory
from .parser import parse_script


def to_transaction(command, factory: TransactionFactory):
    """Build the transaction for a parsed command."""
    return command.build(factory)


class TextParserTransactionSource:
    """Parses a script up front and hands out its transactions in order.

    Finite and not restartable: once get_transaction() returns None the
    source stays empty.
    """

    def __init__(
        self,
        dao: PayrollDao,
        text: str,
        strict: bool = True,
        on_disburse: Optional[DisbursementCallback] = None,
    ):
        factory = TransactionFactory(dao, on_disburse)
        self.commands = parse_script(text, strict=strict)
        self._txs = deque(to_transaction(c, factory) for c in self.commands)

    def get_transaction(self):
        if not self._txs:
            return None
        return self._txs.popleft()

    def __len__(self) -> int:
        return len(self._txs)
