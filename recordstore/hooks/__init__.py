"""Table-bound record hooks"""

from recordstore.hooks.record_hook import RecordHook, use_records

__all__ = [
    'RecordHook',
    'use_records',
]
