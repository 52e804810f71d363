"""Recursive-descent parser for payroll scripts.

One command per line. Blank lines are ignored and `#` starts a comment that
runs to the end of the line (outside double-quoted strings).

    AddEmp <id> "<name>" "<address>" S <salary>
    AddEmp <id> "<name>" "<address>" H <hourly-rate>
    AddEmp <id> "<name>" "<address>" C <salary> <commission-rate>
    DelEmp <id>
    TimeCard <id> <date> <hours>
    SalesReceipt <id> <date> <amount>
    ServiceCharge <member-id> <date> <amount>
    ChgEmp <id> Name "<name>"
    ChgEmp <id> Address "<address>"
    ChgEmp <id> Hourly <hourly-rate>
    ChgEmp <id> Salaried <salary>
    ChgEmp <id> Commissioned <salary> <commission-rate>
    ChgEmp <id> Hold
    ChgEmp <id> Direct "<bank>" "<account>"
    ChgEmp <id> Mail "<address>"
    ChgEmp <id> Member <member-id> Dues <dues>
    ChgEmp <id> NoMember
    Payday <date>

Dates are YYYY-MM-DD. Ids are unsigned integers; amounts are unsigned
decimals.
"""

import datetime as dt
import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from . import commands as cmd

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(
    r'"(?P<string>[^"]*)"'
    r'|(?P<word>[^\s"#]+)'
    r'|(?P<comment>#.*)'
    r'|(?P<unterminated>")'
)
_UINT_RE = re.compile(r"\d+")
_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class ScriptSyntaxError(Exception):
    """Raised when a script line cannot be parsed."""

    def __init__(self, line_no: int, message: str):
        super().__init__(f"line {line_no}: {message}")
        self.line_no = line_no
        self.message = message


@dataclass(frozen=True)
class Token:
    kind: str  # "word" or "string"
    text: str


def tokenize_line(line: str, line_no: int) -> List[Token]:
    """Split one line into word and string tokens, dropping any comment."""
    tokens = []
    for match in _TOKEN_RE.finditer(line):
        kind = match.lastgroup
        if kind == "comment":
            break
        if kind == "unterminated":
            raise ScriptSyntaxError(line_no, "unterminated string")
        tokens.append(Token(kind, match.group(kind)))
    return tokens


class _LineParser:
    """Parses the tokens of a single line into one command."""

    def __init__(self, tokens: List[Token], line_no: int):
        self.tokens = tokens
        self.pos = 0
        self.line_no = line_no

    def error(self, message: str) -> ScriptSyntaxError:
        return ScriptSyntaxError(self.line_no, message)

    def next_token(self, expected: str) -> Token:
        if self.pos >= len(self.tokens):
            raise self.error(f"expected {expected}, got end of line")
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def word(self, expected: str) -> str:
        token = self.next_token(expected)
        if token.kind != "word":
            raise self.error(f'expected {expected}, got "{token.text}"')
        return token.text

    def keyword(self, keyword: str) -> None:
        text = self.word(keyword)
        if text != keyword:
            raise self.error(f"expected {keyword}, got {text}")

    def string(self, expected: str) -> str:
        token = self.next_token(expected)
        if token.kind != "string":
            raise self.error(f"expected quoted {expected}, got {token.text}")
        return token.text

    def uint(self, expected: str) -> int:
        text = self.word(expected)
        if not _UINT_RE.fullmatch(text):
            raise self.error(f"expected {expected} (unsigned integer), got {text}")
        return int(text)

    def number(self, expected: str) -> float:
        text = self.word(expected)
        if not _NUMBER_RE.fullmatch(text):
            raise self.error(f"expected {expected} (number), got {text}")
        return float(text)

    def date(self, expected: str = "date") -> dt.date:
        text = self.word(expected)
        if not _DATE_RE.fullmatch(text):
            raise self.error(f"expected {expected} (YYYY-MM-DD), got {text}")
        try:
            return dt.date.fromisoformat(text)
        except ValueError as e:
            raise self.error(f"invalid date {text}: {e}") from e

    def end(self) -> None:
        if self.pos < len(self.tokens):
            raise self.error(f"unexpected trailing input: {self.tokens[self.pos].text}")

    # --- commands ---------------------------------------------------------

    def command(self):
        verb = self.word("command")
        handler = self._COMMANDS.get(verb)
        if handler is None:
            raise self.error(f"unknown command {verb}")
        result = handler(self)
        self.end()
        return result

    def add_emp(self):
        emp_id = self.uint("employee id")
        name = self.string("name")
        address = self.string("address")
        code = self.word("pay code S, H or C")
        if code == "S":
            return cmd.AddSalaryEmp(emp_id, name, address, self.number("salary"))
        if code == "H":
            return cmd.AddHourlyEmp(emp_id, name, address, self.number("hourly rate"))
        if code == "C":
            salary = self.number("salary")
            return cmd.AddCommissionedEmp(emp_id, name, address, salary, self.number("commission rate"))
        raise self.error(f"expected pay code S, H or C, got {code}")

    def del_emp(self):
        return cmd.DelEmp(self.uint("employee id"))

    def time_card(self):
        emp_id = self.uint("employee id")
        date = self.date()
        return cmd.TimeCard(emp_id, date, self.number("hours"))

    def sales_receipt(self):
        emp_id = self.uint("employee id")
        date = self.date()
        return cmd.SalesReceipt(emp_id, date, self.number("amount"))

    def service_charge(self):
        member_id = self.uint("member id")
        date = self.date()
        return cmd.ServiceCharge(member_id, date, self.number("amount"))

    def chg_emp(self):
        emp_id = self.uint("employee id")
        change = self.word("change type")
        if change == "Name":
            return cmd.ChgName(emp_id, self.string("name"))
        if change == "Address":
            return cmd.ChgAddress(emp_id, self.string("address"))
        if change == "Hourly":
            return cmd.ChgHourly(emp_id, self.number("hourly rate"))
        if change == "Salaried":
            return cmd.ChgSalaried(emp_id, self.number("salary"))
        if change == "Commissioned":
            salary = self.number("salary")
            return cmd.ChgCommissioned(emp_id, salary, self.number("commission rate"))
        if change == "Hold":
            return cmd.ChgHold(emp_id)
        if change == "Direct":
            bank = self.string("bank")
            return cmd.ChgDirect(emp_id, bank, self.string("account"))
        if change == "Mail":
            return cmd.ChgMail(emp_id, self.string("address"))
        if change == "Member":
            member_id = self.uint("member id")
            self.keyword("Dues")
            return cmd.ChgMember(emp_id, member_id, self.number("dues"))
        if change == "NoMember":
            return cmd.ChgNoMember(emp_id)
        raise self.error(f"unknown change type {change}")

    def payday(self):
        return cmd.Payday(self.date("pay date"))

    _COMMANDS = {
        "AddEmp": add_emp,
        "DelEmp": del_emp,
        "TimeCard": time_card,
        "SalesReceipt": sales_receipt,
        "ServiceCharge": service_charge,
        "ChgEmp": chg_emp,
        "Payday": payday,
    }


def parse_line(line: str, line_no: int = 1) -> Optional[object]:
    """Parse one line. Returns None for blank and comment-only lines."""
    tokens = tokenize_line(line, line_no)
    if not tokens:
        return None
    return _LineParser(tokens, line_no).command()


def parse_script(text: str, strict: bool = True) -> list:
    """Parse a whole script into commands, in order.

    Args:
        text: Script source
        strict: If True, a bad line raises ScriptSyntaxError. If False,
            parsing stops at the first bad line and the commands before it
            are returned.

    Raises:
        ScriptSyntaxError: strict is True and a line cannot be parsed
    """
    parsed = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        try:
            command = parse_line(line, line_no)
        except ScriptSyntaxError as e:
            if strict:
                raise
            logger.warning(f"Stopped parsing at {e}; {len(parsed)} command(s) kept")
            break
        if command is not None:
            parsed.append(command)
    return parsed
