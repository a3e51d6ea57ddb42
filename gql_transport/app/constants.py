"""Transport-level constants shared across modules."""
from __future__ import annotations

from enum import Enum

HTTP_METHOD_POST = "POST"
CONTENT_TYPE_HEADER = "Content-Type"
CONTENT_TYPE_JSON = "application/json"
DEFAULT_TEXT_ENCODING = "utf-8"


class DispatchState(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
