"""
Record repository for CRUD operations against arbitrary tables.

Translates the five CRUD operations into calls on the Supabase client's
fluent query builder and folds every failure into a result envelope.
"""

import re
from typing import Any, Optional

from postgrest.exceptions import APIError

from recordstore.core.exceptions import (
    MultipleRecordsError,
    RecordNotFoundError,
    RecordStoreError,
)
from recordstore.core.logging_config import get_logger, log_with_context
from recordstore.models.envelope import (
    DeleteEnvelope,
    Record,
    RecordEnvelope,
    delete_result,
    failure,
    success,
)
from recordstore.repositories.interfaces import IRecordRepository, TableClient

logger = get_logger(__name__)

PRIMARY_KEY = "id"

# PostgREST: "JSON object requested, multiple (or no) rows returned"
SINGLE_ROW_ERROR_CODE = "PGRST116"
_ROW_COUNT_RE = re.compile(r"(\d+) rows")


def translate_single_row_error(
    exc: Exception,
    table: str,
    record_id: Any
) -> Exception:
    """
    Map a PostgREST single-row violation to a local error type.

    Args:
        exc: Exception raised by the client
        table: Table the request targeted
        record_id: Primary key the request filtered on

    Returns:
        RecordNotFoundError or MultipleRecordsError (chained to exc) for
        PGRST116, otherwise exc unchanged
    """
    if not isinstance(exc, APIError) or exc.code != SINGLE_ROW_ERROR_CODE:
        return exc

    match = _ROW_COUNT_RE.search(str(exc.details or ""))
    if match and int(match.group(1)) > 1:
        translated: Exception = MultipleRecordsError(table, record_id)
    else:
        translated = RecordNotFoundError(table, record_id)

    translated.__cause__ = exc
    return translated


def ensure_single_row(rows: Optional[list], table: str, record_id: Any) -> Record:
    """Return the only row of a write response, or raise if there isn't exactly one."""
    if not rows:
        raise RecordNotFoundError(table, record_id)
    if len(rows) > 1:
        raise MultipleRecordsError(table, record_id)
    return rows[0]


class RecordRepository(IRecordRepository):
    """
    Repository for row-level data access on any table.

    Every operation takes the table name as its first argument, issues a
    single request and returns an envelope. Failures are logged here once
    and never raised.

    Attributes:
        client: Backend client handle (supabase.AsyncClient or a test double)
    """

    def __init__(self, client: TableClient):
        """
        Initialize repository with a backend client.

        Args:
            client: Client exposing ``table(name)``; treated as read-only
        """
        self.client = client

    async def get_all(self, table: str) -> RecordEnvelope:
        """See IRecordRepository.get_all."""
        try:
            response = await self.client.table(table).select("*").execute()
            return success(response.data)
        except Exception as e:
            self._log_failure(f"Error fetching all from {table}", table, "get_all", e)
            return failure(e)

    async def get_by_id(self, table: str, record_id: Any) -> RecordEnvelope:
        """See IRecordRepository.get_by_id."""
        try:
            response = await (
                self.client.table(table)
                .select("*")
                .eq(PRIMARY_KEY, record_id)
                .single()
                .execute()
            )
            return success(response.data)
        except Exception as e:
            error = translate_single_row_error(e, table, record_id)
            self._log_failure(
                f"Error fetching {table} by id", table, "get_by_id", error, record_id
            )
            return failure(error)

    async def create(self, table: str, record: Record) -> RecordEnvelope:
        """See IRecordRepository.create."""
        try:
            response = await self.client.table(table).insert(record).execute()
            if not response.data:
                raise RecordStoreError(f"Insert into {table} returned no row")
            return success(response.data[0])
        except Exception as e:
            self._log_failure(f"Error creating {table}", table, "create", e)
            return failure(e)

    async def update(
        self,
        table: str,
        record_id: Any,
        updates: Record
    ) -> RecordEnvelope:
        """See IRecordRepository.update."""
        try:
            response = await (
                self.client.table(table)
                .update(updates)
                .eq(PRIMARY_KEY, record_id)
                .execute()
            )
            return success(ensure_single_row(response.data, table, record_id))
        except Exception as e:
            self._log_failure(
                f"Error updating {table}", table, "update", e, record_id
            )
            return failure(e)

    async def delete(self, table: str, record_id: Any) -> DeleteEnvelope:
        """See IRecordRepository.delete."""
        try:
            await (
                self.client.table(table)
                .delete()
                .eq(PRIMARY_KEY, record_id)
                .execute()
            )
            return delete_result()
        except Exception as e:
            self._log_failure(
                f"Error deleting {table}", table, "delete", e, record_id
            )
            return delete_result(e)

    @staticmethod
    def _log_failure(
        message: str,
        table: str,
        operation: str,
        error: Exception,
        record_id: Any = None
    ) -> None:
        log_with_context(
            logger,
            "error",
            f"{message}: {error}",
            table=table,
            operation=operation,
            record_id=record_id,
            layer="repository",
            error_type=type(error).__name__,
        )
