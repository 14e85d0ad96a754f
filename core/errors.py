"""
Error taxonomy

Shared by the service (mapped to HTTP status codes) and the client
(mapped back from HTTP status codes).

- ValidationError: invalid user input (400)
- NotFoundError: delete target absent (404)
- StorageError: backing store unreachable or write failed (500)
- ConnectivityError: the service cannot be reached at all (client only)
"""


class LedgerError(Exception):
    """Base class for all ledger errors"""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(LedgerError):
    """Missing or invalid user input

    Raised before any side effect.

    Args:
        fields: names of the missing/invalid fields
        message: human readable message
    """

    status_code = 400

    def __init__(self, fields: list[str], message: str | None = None):
        self.fields = list(fields)
        if message is None:
            message = f"All fields are required and must be valid: {', '.join(self.fields)}"
        super().__init__(message)


class NotFoundError(LedgerError):
    """No expense with the given id"""

    status_code = 404

    def __init__(self, expense_id: str, message: str | None = None):
        self.expense_id = expense_id
        super().__init__(message or f"Expense not found: {expense_id}")


class StorageError(LedgerError):
    """Backing store unreachable or write failed"""

    status_code = 500


class ConnectivityError(LedgerError):
    """Network-level failure (timeout, connection refused)

    Not an error response: the request never got one.
    """

    status_code = 503
