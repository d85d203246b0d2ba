"""
Error types for the data access layer.

These are never raised across the repository or hook boundary; they
travel as the ``error`` value of a result envelope.
"""

from typing import Any, Optional


class RecordStoreError(Exception):
    """Base exception for recordstore"""
    pass


class ConfigurationError(RecordStoreError):
    """Raised when settings are missing or the client cannot be built"""
    pass


class ClientNotInitializedError(ConfigurationError):
    """Raised when the shared client is requested before init_client()"""

    def __init__(self, message: str = "Backend client not initialized; call init_client() first"):
        super().__init__(message)


class SingleRowError(RecordStoreError):
    """A single-row operation did not match exactly one row"""

    def __init__(self, table: str, record_id: Any, message: Optional[str] = None):
        self.table = table
        self.record_id = record_id
        super().__init__(message or self.default_message())

    def default_message(self) -> str:
        return f"Expected exactly one row in {self.table} with id {self.record_id!r}"


class RecordNotFoundError(SingleRowError):
    """No row in the table matched the given id"""

    def default_message(self) -> str:
        return f"No row in {self.table} with id {self.record_id!r}"


class MultipleRecordsError(SingleRowError):
    """More than one row matched an id expected to be unique"""

    def default_message(self) -> str:
        return f"Multiple rows in {self.table} with id {self.record_id!r}"
