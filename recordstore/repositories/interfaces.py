"""
Record Repository Interface (IRecordRepository)

Abstract base class defining the CRUD contract against named tables,
plus the structural type of the backend client the repository consumes.

Implementation guide:
- All methods must be async
- The table name is supplied per call and never validated locally
- Every backend failure is caught and returned in the envelope's error field
- Nothing is ever raised across this boundary
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol

from recordstore.models.envelope import DeleteEnvelope, Record, RecordEnvelope


class TableClient(Protocol):
    """
    Structural type of the backend client.

    Matches supabase.AsyncClient: ``table(name)`` returns a fluent
    request builder whose terminal ``execute()`` is awaitable, returns
    an object with a ``data`` attribute, and raises on backend errors.
    """

    def table(self, table_name: str) -> Any:
        ...


class IRecordRepository(ABC):
    """
    Abstract interface for table-parameterized CRUD operations.

    The repository manages:
    1. Listing every row of a table
    2. Fetching a single row by primary key
    3. Inserting a row and returning it as stored
    4. Applying a partial update to a single row
    5. Deleting a single row

    Rows are identified by the primary key column ``id``.
    """

    @abstractmethod
    async def get_all(self, table: str) -> RecordEnvelope:
        """
        Fetch every row of a table, unfiltered.

        Args:
            table: Name of the remote table

        Returns:
            {"data": [row, ...], "error": None} on success,
            {"data": None, "error": exc} on failure
        """
        pass

    @abstractmethod
    async def get_by_id(self, table: str, record_id: Any) -> RecordEnvelope:
        """
        Fetch the single row whose ``id`` equals record_id.

        Args:
            table: Name of the remote table
            record_id: Primary key value

        Returns:
            {"data": row, "error": None} when exactly one row matches,
            {"data": None, "error": exc} otherwise

        Note:
            Zero matches yield RecordNotFoundError, several yield
            MultipleRecordsError; other backend errors pass through as-is.
        """
        pass

    @abstractmethod
    async def create(self, table: str, record: Record) -> RecordEnvelope:
        """
        Insert a row.

        Args:
            table: Name of the remote table
            record: Field values to insert

        Returns:
            {"data": row, "error": None} where row is the inserted row as
            stored, including backend-assigned fields (generated id,
            timestamps); {"data": None, "error": exc} on failure
        """
        pass

    @abstractmethod
    async def update(
        self,
        table: str,
        record_id: Any,
        updates: Record
    ) -> RecordEnvelope:
        """
        Apply a partial update to the row whose ``id`` equals record_id.

        Args:
            table: Name of the remote table
            record_id: Primary key value
            updates: Fields to change; other fields are left untouched

        Returns:
            {"data": row, "error": None} with the updated row,
            {"data": None, "error": exc} on failure or when the update
            did not touch exactly one row
        """
        pass

    @abstractmethod
    async def delete(self, table: str, record_id: Any) -> DeleteEnvelope:
        """
        Delete the row whose ``id`` equals record_id.

        Args:
            table: Name of the remote table
            record_id: Primary key value

        Returns:
            {"error": None} on success, {"error": exc} on failure.
            Never carries a data key.
        """
        pass
