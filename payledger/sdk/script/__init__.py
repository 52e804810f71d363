"""script - Text command language for driving the payroll.

Usage:
    from payledger.sdk.script import parse_script, TextParserTransactionSource

    commands = parse_script('AddEmp 1 "Bob" "Home" S 1000.0')
    source = TextParserTransactionSource(db, script_text)
"""

from .commands import (
    AddCommissionedEmp,
    AddHourlyEmp,
    AddSalaryEmp,
    ChgAddress,
    ChgCommissioned,
    ChgDirect,
    ChgHold,
    ChgHourly,
    ChgMail,
    ChgMember,
    ChgName,
    ChgNoMember,
    ChgSalaried,
    DelEmp,
    Payday,
    SalesReceipt,
    ServiceCharge,
    TimeCard,
)
from .parser import ScriptSyntaxError, Token, parse_line, parse_script, tokenize_line
from .source import TextParserTransactionSource, to_transaction

__all__ = [
    # Commands
    "AddSalaryEmp",
    "AddHourlyEmp",
    "AddCommissionedEmp",
    "DelEmp",
    "TimeCard",
    "SalesReceipt",
    "ServiceCharge",
    "ChgName",
    "ChgAddress",
    "ChgHourly",
    "ChgSalaried",
    "ChgCommissioned",
    "ChgHold",
    "ChgDirect",
    "ChgMail",
    "ChgMember",
    "ChgNoMember",
    "Payday",
    # Parsing
    "ScriptSyntaxError",
    "Token",
    "tokenize_line",
    "parse_line",
    "parse_script",
    # Source
    "TextParserTransactionSource",
    "to_transaction",
]
