"""Storage-level errors raised by PayrollDao implementations."""


class DaoError(Exception):
    """Base class for storage failures. Carries a descriptive message."""

    kind = "dao error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class InsertError(DaoError):
    """Raised when a key being inserted already exists."""

    kind = "insert error"


class DeleteError(DaoError):
    """Raised when a key being deleted is absent."""

    kind = "delete error"


class FetchError(DaoError):
    """Raised when a key being looked up is absent."""

    kind = "fetch error"


class UpdateError(DaoError):
    """Raised when a record being updated is absent."""

    kind = "update error"
