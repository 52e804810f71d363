"""Unit tests for the payroll script parser."""

from datetime import date

import pytest

from payledger.sdk.script import (
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
    ScriptSyntaxError,
    ServiceCharge,
    TimeCard,
    parse_line,
    parse_script,
    tokenize_line,
)


class TestCommands:

    @pytest.mark.parametrize("line, expected", [
        ('AddEmp 1 "Bob" "Home" S 1000.0', AddSalaryEmp(1, "Bob", "Home", 1000.0)),
        ('AddEmp 1 "Bob" "Home" H 1000.0', AddHourlyEmp(1, "Bob", "Home", 1000.0)),
        ('AddEmp 1 "Bob" "Home" C 1000.0 0.1', AddCommissionedEmp(1, "Bob", "Home", 1000.0, 0.1)),
        ("DelEmp 1", DelEmp(1)),
        ("TimeCard 1 2021-01-01 8.0", TimeCard(1, date(2021, 1, 1), 8.0)),
        ("SalesReceipt 1 2021-01-01 1000.0", SalesReceipt(1, date(2021, 1, 1), 1000.0)),
        ("ServiceCharge 7734 2021-01-01 12.95", ServiceCharge(7734, date(2021, 1, 1), 12.95)),
        ('ChgEmp 1 Name "Robert"', ChgName(1, "Robert")),
        ('ChgEmp 1 Address "Work"', ChgAddress(1, "Work")),
        ("ChgEmp 1 Hourly 27.52", ChgHourly(1, 27.52)),
        ("ChgEmp 1 Salaried 1000", ChgSalaried(1, 1000.0)),
        ("ChgEmp 1 Commissioned 1000.0 0.1", ChgCommissioned(1, 1000.0, 0.1)),
        ("ChgEmp 1 Hold", ChgHold(1)),
        ('ChgEmp 1 Direct "Bank" "Account"', ChgDirect(1, "Bank", "Account")),
        ('ChgEmp 1 Mail "PO Box 7"', ChgMail(1, "PO Box 7")),
        ("ChgEmp 42 Member 7234 Dues 9.45", ChgMember(42, 7234, 9.45)),
        ("ChgEmp 42 NoMember", ChgNoMember(42)),
        ("Payday 2021-01-01", Payday(date(2021, 1, 1))),
    ])
    def test_each_command_form(self, line, expected):
        assert parse_line(line) == expected

    def test_extra_whitespace_tolerated(self):
        assert parse_line('  \tAddEmp   1  "Bob"\t"Home"  S  1000.0  ') == AddSalaryEmp(1, "Bob", "Home", 1000.0)

    def test_quoted_strings_keep_spaces_and_hashes(self):
        assert parse_line('ChgEmp 1 Address "12 Elm St #4"') == ChgAddress(1, "12 Elm St #4")

    def test_empty_string_allowed(self):
        assert parse_line('ChgEmp 1 Name ""') == ChgName(1, "")


class TestCommentsAndBlankLines:

    def test_blank_and_comment_lines_skipped(self):
        assert parse_line("") is None
        assert parse_line("   \t") is None
        assert parse_line("# comment") is None

    def test_trailing_comment(self):
        assert parse_line("DelEmp 3  # gone") == DelEmp(3)

    def test_script_with_comments(self):
        text = (
            "# payroll for September\n"
            "#\n"
            'AddEmp 1 "Bob" "Home" S 1000.0\n'
            "\n"
            "   # indented comment\n"
            "Payday 2024-09-30\n"
        )
        assert parse_script(text) == [
            AddSalaryEmp(1, "Bob", "Home", 1000.0),
            Payday(date(2024, 9, 30)),
        ]

    def test_empty_script(self):
        assert parse_script("") == []


class TestErrors:

    @pytest.mark.parametrize("line, fragment", [
        ("Hire 1", "unknown command Hire"),
        ('AddEmp 1 "Bob" "Home" X 1000.0', "pay code"),
        ('AddEmp 1 Bob "Home" S 1000.0', "quoted name"),
        ('AddEmp 1 "Bob" "Home" S', "end of line"),
        ("DelEmp one", "unsigned integer"),
        ("DelEmp -1", "unsigned integer"),
        ("DelEmp 1 2", "trailing input"),
        ("TimeCard 1 2021-13-01 8.0", "invalid date"),
        ("TimeCard 1 01/01/2021 8.0", "YYYY-MM-DD"),
        ("TimeCard 1 2021-01-01 -8", "number"),
        ("ChgEmp 1 Retire", "unknown change type"),
        ("ChgEmp 1 Member 7 Fee 9.0", "expected Dues"),
        ('ChgEmp 1 Name "Bob', "unterminated string"),
    ])
    def test_bad_lines(self, line, fragment):
        with pytest.raises(ScriptSyntaxError, match=fragment):
            parse_line(line)

    def test_error_reports_line_number(self):
        text = 'AddEmp 1 "Bob" "Home" S 1000.0\n\nPayday tomorrow\n'
        with pytest.raises(ScriptSyntaxError) as exc_info:
            parse_script(text)
        assert exc_info.value.line_no == 3
        assert str(exc_info.value).startswith("line 3:")

    def test_lenient_stops_at_first_bad_line(self):
        text = "DelEmp 1\nBogus\nDelEmp 2\n"
        assert parse_script(text, strict=False) == [DelEmp(1)]


class TestTokenizer:

    def test_words_and_strings(self):
        tokens = tokenize_line('AddEmp 1 "Bob Smith" # trailing', 1)
        assert [(t.kind, t.text) for t in tokens] == [
            ("word", "AddEmp"),
            ("word", "1"),
            ("string", "Bob Smith"),
        ]
