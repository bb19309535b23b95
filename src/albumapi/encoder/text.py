#!/usr/bin/env python3
"""
Text Encoder

Plain text response bodies, one line per value.
"""

from __future__ import annotations

import io
from typing import Any, Tuple

from .base import BufferedEncoder
from ..exceptions import SerializationError


class TextEncoder(BufferedEncoder):
    """Writes str(value) followed by a newline for each value, in order."""

    format = "text"

    def content_type(self) -> str:
        """Return the plain text content type."""
        return "text/plain"

    def _encode_into(self, buf: io.StringIO, values: Tuple[Any, ...]) -> None:
        for value in values:
            try:
                line = str(value)
            except Exception as e:
                raise SerializationError(
                    f"text: cannot format {type(value).__name__}: {e}", self.format
                ) from e
            self._write(buf, line + "\n")
