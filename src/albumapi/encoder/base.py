#!/usr/bin/env python3
"""
Encoder Interface

Protocol for encoding response values to a string body, plus the shared
buffered base the concrete encoders build on.
"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, Tuple

from ..exceptions import EncodingError, WriteError


logger = logging.getLogger(__name__)


class Encoder(Protocol):
    """
    Protocol for encoders that convert response values to a string body.

    Encoders are stateless: the same values always yield the same body, and
    one instance may be shared by any number of concurrent requests.
    """

    def encode(self, *values: Any) -> str:
        """
        Encode values to a response body.

        Args:
            *values: Values to encode, in order

        Returns:
            Serialized body

        Raises:
            SerializationError: A value cannot be represented in this format
            WriteError: An intermediate buffer write failed
        """
        ...

    def try_encode(self, *values: Any) -> Tuple[str, Optional[EncodingError]]:
        """
        Encode values, returning the error instead of raising it.

        Returns:
            (body, None) on success, ("", error) on failure
        """
        ...

    def content_type(self) -> str:
        """
        Return the MIME content type for this encoding.

        Returns:
            Content type string (e.g., "application/json")
        """
        ...


class BufferedEncoder(ABC):
    """
    Base for encoders that assemble the body in an in-memory buffer.

    Subclasses implement _encode_into(); writes go through _write() so any
    buffer failure surfaces as a WriteError.
    """

    format: str = ""

    def encode(self, *values: Any) -> str:
        buf = self._new_buffer()
        try:
            self._encode_into(buf, values)
        except EncodingError as e:
            logger.debug(f"{self.format} encoding of {len(values)} value(s) failed: {e}")
            raise
        return buf.getvalue()

    def try_encode(self, *values: Any) -> Tuple[str, Optional[EncodingError]]:
        try:
            return self.encode(*values), None
        except EncodingError as e:
            return "", e

    def _new_buffer(self) -> io.StringIO:
        return io.StringIO()

    @abstractmethod
    def content_type(self) -> str:
        ...

    @abstractmethod
    def _encode_into(self, buf: io.StringIO, values: Tuple[Any, ...]) -> None:
        """Write the encoded values into buf."""

    def _write(self, buf: io.StringIO, data: str) -> None:
        try:
            buf.write(data)
        except (OSError, ValueError) as e:
            raise WriteError(f"{self.format}: buffer write failed: {e}", self.format) from e

    def __call__(self, *values: Any) -> str:
        return self.encode(*values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
