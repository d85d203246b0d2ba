"""Result envelope types"""

from recordstore.models.envelope import (
    DeleteEnvelope,
    Record,
    RecordEnvelope,
    delete_result,
    failure,
    success,
)

__all__ = [
    "DeleteEnvelope",
    "Record",
    "RecordEnvelope",
    "delete_result",
    "failure",
    "success",
]
