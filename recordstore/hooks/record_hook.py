"""
Table-bound facade over the record repository.

Binds a table name once so callers don't repeat it, and logs every
failed call on its own logger before handing the envelope back.
"""

from typing import Any, Optional

from recordstore.core.database import get_repository
from recordstore.core.logging_config import get_logger, log_with_context
from recordstore.models.envelope import DeleteEnvelope, Record, RecordEnvelope
from recordstore.repositories.interfaces import IRecordRepository

logger = get_logger(__name__)


class RecordHook:
    """
    Per-table CRUD operations.

    Each method delegates to the repository with the bound table and
    returns the repository's envelope unchanged.

    Attributes:
        table: Name of the bound remote table
        repository: Repository the calls are delegated to

    Example:
        >>> items = use_records("items")
        >>> result = await items.create({"name": "widget"})
        >>> result["data"]
        {"id": "5f0c...", "name": "widget"}
    """

    def __init__(self, table: str, repository: IRecordRepository):
        self.table = table
        self.repository = repository

    async def fetch_all(self) -> RecordEnvelope:
        """Fetch every row of the bound table."""
        result = await self.repository.get_all(self.table)
        self._check(result, "Failed to fetch records", "fetch_all")
        return result

    async def fetch_by_id(self, record_id: Any) -> RecordEnvelope:
        """Fetch one row by id."""
        result = await self.repository.get_by_id(self.table, record_id)
        self._check(result, "Failed to fetch record", "fetch_by_id", record_id)
        return result

    async def create(self, record: Record) -> RecordEnvelope:
        """Insert a row and return it as stored."""
        result = await self.repository.create(self.table, record)
        self._check(result, "Failed to create record", "create")
        return result

    async def update(self, record_id: Any, updates: Record) -> RecordEnvelope:
        """Apply a partial update and return the updated row."""
        result = await self.repository.update(self.table, record_id, updates)
        self._check(result, "Failed to update record", "update", record_id)
        return result

    async def remove(self, record_id: Any) -> DeleteEnvelope:
        """Delete one row by id."""
        result = await self.repository.delete(self.table, record_id)
        self._check(result, "Failed to delete record", "remove", record_id)
        return result

    def _check(
        self,
        result: Any,
        message: str,
        operation: str,
        record_id: Any = None
    ) -> None:
        error = result["error"]
        if error is None:
            return

        log_with_context(
            logger,
            "error",
            f"{message}: {error}",
            table=self.table,
            operation=operation,
            record_id=record_id,
            layer="hook",
            error_type=type(error).__name__,
        )


def use_records(
    table: str,
    repository: Optional[IRecordRepository] = None
) -> RecordHook:
    """
    Build a RecordHook for a table.

    Args:
        table: Name of the remote table
        repository: Repository to delegate to; defaults to one over the
            shared client from init_client()

    Returns:
        RecordHook bound to table

    Raises:
        ClientNotInitializedError: If no repository is given and the
            shared client has not been initialized
    """
    if repository is None:
        repository = get_repository()

    return RecordHook(table, repository)
