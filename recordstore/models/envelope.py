"""
Result envelopes returned by every data access operation.

Success carries the rows in ``data`` and ``error`` is None; failure
carries the exception in ``error`` and ``data`` is None. Deletes return
only the ``error`` key.
"""

from typing import Any, Dict, List, Optional, TypedDict, Union


Record = Dict[str, Any]


class RecordEnvelope(TypedDict):
    data: Optional[Union[Record, List[Record]]]
    error: Optional[Exception]


class DeleteEnvelope(TypedDict):
    error: Optional[Exception]


def success(data: Union[Record, List[Record]]) -> RecordEnvelope:
    return {"data": data, "error": None}


def failure(error: Exception) -> RecordEnvelope:
    return {"data": None, "error": error}


def delete_result(error: Optional[Exception] = None) -> DeleteEnvelope:
    return {"error": error}
