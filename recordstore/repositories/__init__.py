"""
Repository layer for data access.

Provides data access abstractions following the Repository pattern,
isolating backend access from callers.
"""

from recordstore.repositories.interfaces import IRecordRepository, TableClient
from recordstore.repositories.record import RecordRepository

__all__ = [
    'IRecordRepository',
    'RecordRepository',
    'TableClient',
]
