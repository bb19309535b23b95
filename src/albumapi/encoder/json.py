#!/usr/bin/env python3
"""
JSON Encoder

Compact JSON response bodies. Empty results encode as ``[]`` and a single
result is sent unwrapped.
"""

from __future__ import annotations

import io
import json
from datetime import date, datetime
from typing import Any, Tuple

from pydantic import BaseModel

from .base import BufferedEncoder
from ..exceptions import SerializationError


def _default(value: Any) -> Any:
    """Fallback conversion for values the json module can't handle natively."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JSONEncoder(BufferedEncoder):
    """
    JSON encoder for response values.

    Cardinality decides the shape of the body:
        encode()          -> []
        encode(a)         -> a
        encode(a, b, ...) -> [a, b, ...]
    """

    format = "json"

    def content_type(self) -> str:
        """Return the JSON content type."""
        return "application/json"

    def _encode_into(self, buf: io.StringIO, values: Tuple[Any, ...]) -> None:
        if len(values) == 1:
            data: Any = values[0]
        else:
            data = list(values)

        try:
            text = json.dumps(
                data,
                default=_default,
                separators=(',', ':'),
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(f"json: {e}", self.format) from e

        self._write(buf, text)
