#!/usr/bin/env python3
"""
albumapi - Response Body Encoders

Serializes album API responses as JSON, XML or plain text.

Usage:
    from albumapi import Album, get_encoder, must, recover

    @recover
    def get_album(format: str) -> tuple[int, str]:
        album = Album(id=1, band="Slint", title="Spiderland", year=1991)
        return 200, must(*get_encoder(format).try_encode(album))

Formats:
    json - compact JSON; no values -> [], one value -> unwrapped, more -> array
    xml  - XML declaration plus values wrapped in <albums>...</albums>
    text - one str(value) per line

Errors:
    SerializationError - a value cannot be represented in the format
    WriteError - an intermediate buffer write failed
    ServerFault - raised by must(), turned into a 500 by recover()
"""

from .core import (
    configure,
    get_config,
    reset_config,
    get_encoder,
    must,
    recover,
    ResponseConfig,
)

from .exceptions import (
    AlbumAPIError,
    EncodingError,
    SerializationError,
    WriteError,
    ServerFault,
)

from .models import Album

from .encoder import (
    Encoder,
    JSONEncoder,
    XMLEncoder,
    TextEncoder,
    json_encoder,
    xml_encoder,
    text_encoder,
    ENCODERS,
)


try:
    from albumapi._version import version as __version__
except ImportError:
    __version__ = "0.0.0+dev"


__all__ = [
    # Core API
    'configure',
    'get_config',
    'reset_config',
    'get_encoder',
    'must',
    'recover',
    'ResponseConfig',

    # Exceptions
    'AlbumAPIError',
    'EncodingError',
    'SerializationError',
    'WriteError',
    'ServerFault',

    # Models
    'Album',

    # Encoders
    'Encoder',
    'JSONEncoder',
    'XMLEncoder',
    'TextEncoder',
    'json_encoder',
    'xml_encoder',
    'text_encoder',
    'ENCODERS',
]
