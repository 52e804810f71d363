"""Payroll ledger driven by transactions and a small script language."""

__version__ = "0.1.0"
