"""payledger SDK - Payroll domain, storage port, transactions and scripts."""

from .config import (
    Settings,
    SettingsError,
    get_config_dir,
    get_setting,
    get_settings,
    get_settings_path,
    load_settings,
    save_settings,
    set_setting,
    unset_setting,
)

from .dao import (
    DaoError,
    DeleteError,
    FetchError,
    InsertError,
    MockDb,
    PayrollDao,
    UpdateError,
)

from .usecase import UsecaseError

from .factory import TransactionFactory

from .script import (
    ScriptSyntaxError,
    TextParserTransactionSource,
    parse_script,
    to_transaction,
)

from .app import (
    PayrollApp,
    RunReport,
    Transaction,
    TransactionSource,
    run_transactions,
)

from .snapshot import ledger_snapshot

from . import domain, usecase

__all__ = [
    # Config
    "Settings",
    "SettingsError",
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    # Storage
    "DaoError",
    "InsertError",
    "DeleteError",
    "FetchError",
    "UpdateError",
    "PayrollDao",
    "MockDb",
    # Transactions
    "UsecaseError",
    "TransactionFactory",
    # Scripts
    "ScriptSyntaxError",
    "TextParserTransactionSource",
    "parse_script",
    "to_transaction",
    # Driver
    "Transaction",
    "TransactionSource",
    "RunReport",
    "run_transactions",
    "PayrollApp",
    "ledger_snapshot",
    # Submodules
    "domain",
    "usecase",
]
