"""
recordstore: generic CRUD access to Supabase tables.

Usage:
    from recordstore import init_client, use_records

    await init_client()
    items = use_records("items")

    result = await items.create({"name": "widget"})
    if result["error"] is None:
        row = result["data"]
"""

from recordstore.core.database import close_client, get_client, init_client
from recordstore.core.exceptions import (
    ClientNotInitializedError,
    ConfigurationError,
    MultipleRecordsError,
    RecordNotFoundError,
    RecordStoreError,
)
from recordstore.hooks import RecordHook, use_records
from recordstore.models import DeleteEnvelope, Record, RecordEnvelope
from recordstore.repositories import IRecordRepository, RecordRepository

__version__ = "0.1.0"

__all__ = [
    "ClientNotInitializedError",
    "ConfigurationError",
    "DeleteEnvelope",
    "IRecordRepository",
    "MultipleRecordsError",
    "Record",
    "RecordEnvelope",
    "RecordHook",
    "RecordNotFoundError",
    "RecordRepository",
    "RecordStoreError",
    "close_client",
    "get_client",
    "init_client",
    "use_records",
]
