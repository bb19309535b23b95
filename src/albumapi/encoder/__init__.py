#!/usr/bin/env python3
"""
albumapi Encoders

Encoders for serializing API response values to JSON, XML and plain text.
Each format has one shared, stateless instance.
"""

from __future__ import annotations

from typing import Dict

from .base import Encoder, BufferedEncoder
from .json import JSONEncoder
from .text import TextEncoder
from .xml import XMLEncoder, XML_HEADER, ROOT_TAG


json_encoder = JSONEncoder()
xml_encoder = XMLEncoder()
text_encoder = TextEncoder()

ENCODERS: Dict[str, Encoder] = {
    "json": json_encoder,
    "xml": xml_encoder,
    "text": text_encoder,
}

__all__ = [
    'Encoder',
    'BufferedEncoder',
    'JSONEncoder',
    'XMLEncoder',
    'TextEncoder',
    'XML_HEADER',
    'ROOT_TAG',
    'json_encoder',
    'xml_encoder',
    'text_encoder',
    'ENCODERS',
]
