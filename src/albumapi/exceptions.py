#!/usr/bin/env python3
"""
albumapi exceptions.

All albumapi exceptions inherit from AlbumAPIError for easy catching.
"""

from __future__ import annotations

from typing import Optional


class AlbumAPIError(Exception):
    """Base exception for all albumapi errors."""


class EncodingError(AlbumAPIError):
    """
    An encoder could not produce a response body.

    Attributes:
        format: Name of the encoder format that failed ("json", "xml", "text")
    """

    def __init__(self, message: str, format: Optional[str] = None):
        super().__init__(message)
        self.format = format


class SerializationError(EncodingError):
    """A value could not be converted to the target format."""


class WriteError(EncodingError):
    """An intermediate buffer write failed."""


class ServerFault(AlbumAPIError):
    """
    Unrecoverable fault raised by must().

    Caught once by the request boundary and mapped to a generic 500 response.
    The wrapped error is for the server log only.

    Attributes:
        error: The error that caused the fault
    """

    def __init__(self, error: BaseException):
        super().__init__(f"server fault: {error}")
        self.error = error
