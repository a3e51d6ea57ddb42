"""SerializationFormat implementation on the standard json module."""
from __future__ import annotations

import json
from typing import Any


class JSONSerializationFormat:
    def serialize(self, value: Any) -> bytes:
        # NaN and Infinity are not JSON.
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8")

    def deserialize(self, data: bytes) -> Any:
        return json.loads(data)
