"""Serialization port: turns request bodies into bytes and response bytes into values."""
from __future__ import annotations

from typing import Any, Protocol


class SerializationFormat(Protocol):
    def serialize(self, value: Any) -> bytes:
        """Serialize a JSON-compatible value. Expected never to fail for valid input."""
        ...

    def deserialize(self, data: bytes) -> Any:
        """Parse bytes into a structured value; raise ValueError on malformed input."""
        ...
