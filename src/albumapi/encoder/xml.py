#!/usr/bin/env python3
"""
XML Encoder

XML response bodies wrapped in a fixed ``<albums>`` root element.

Example output for encode(Album(id=1, band="Slint", title="Spiderland", year=1991)):

    <?xml version="1.0" encoding="UTF-8"?>
    <albums><album id="1"><band>Slint</band><title>Spiderland</title><year>1991</year></album></albums>
"""

from __future__ import annotations

import io
import re
import xml.etree.ElementTree as ET
from datetime import date, datetime
from typing import Any, Iterator, Optional, Tuple

from pydantic import BaseModel

from .base import BufferedEncoder
from ..exceptions import SerializationError


XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
ROOT_TAG = "albums"

# Element names used for bare scalar values; subclasses before their bases
_SCALAR_TAGS = (
    (bool, "bool"),
    (int, "int"),
    (float, "float"),
    (str, "str"),
    (datetime, "datetime"),
    (date, "date"),
)
_SCALAR_TYPES = tuple(kind for kind, _ in _SCALAR_TAGS)

# Anything outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]"
)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, _SCALAR_TYPES)


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    return _INVALID_XML_CHARS.sub("\ufffd", str(value))


def _model_element(model: BaseModel, tag: Optional[str] = None) -> ET.Element:
    """
    Build the element for a pydantic model.

    The element is named by the model's ``xml_tag`` class attribute (or the
    lowercased class name, or the enclosing field name for nested models).
    Fields listed in ``xml_attributes`` become attributes; the rest become
    child elements. None fields are omitted.
    """
    cls = type(model)
    if tag is None:
        tag = getattr(cls, "xml_tag", None) or cls.__name__.lower()
    attributes = getattr(cls, "xml_attributes", frozenset())

    element = ET.Element(tag)
    for name in cls.model_fields:
        value = getattr(model, name)
        if value is None:
            continue

        if name in attributes:
            if not _is_scalar(value):
                raise SerializationError(
                    f"xml: field {cls.__name__}.{name} of type "
                    f"{type(value).__name__} cannot be an attribute",
                    "xml",
                )
            element.set(name, _scalar_text(value))
            continue

        items = value if isinstance(value, (list, tuple)) else (value,)
        for item in items:
            if item is None:
                continue
            if isinstance(item, BaseModel):
                element.append(_model_element(item, tag=name))
            elif _is_scalar(item):
                ET.SubElement(element, name).text = _scalar_text(item)
            else:
                raise SerializationError(
                    f"xml: unsupported type {type(item).__name__} "
                    f"in field {cls.__name__}.{name}",
                    "xml",
                )
    return element


def _marshal(value: Any) -> Iterator[ET.Element]:
    """Yield the elements for a value; sequences are flattened in order."""
    if value is None:
        return
    if isinstance(value, (list, tuple)):
        for item in value:
            yield from _marshal(item)
        return
    if hasattr(value, "to_xml_element"):
        element = value.to_xml_element()
        if not isinstance(element, ET.Element):
            raise SerializationError(
                f"xml: {type(value).__name__}.to_xml_element() returned "
                f"{type(element).__name__}, not an Element",
                "xml",
            )
        yield element
        return
    if isinstance(value, BaseModel):
        yield _model_element(value)
        return
    for kind, tag in _SCALAR_TAGS:
        if isinstance(value, kind):
            element = ET.Element(tag)
            element.text = _scalar_text(value)
            yield element
            return
    raise SerializationError(f"xml: unsupported type {type(value).__name__}", "xml")


class XMLEncoder(BufferedEncoder):
    """
    XML encoder for response values.

    The full sequence of values is always marshalled inside ``<albums>``,
    whatever its length; no values gives an empty root element.
    """

    format = "xml"

    def content_type(self) -> str:
        """Return the XML content type."""
        return "application/xml"

    def _encode_into(self, buf: io.StringIO, values: Tuple[Any, ...]) -> None:
        # Marshal everything before the first write so failures leave no partial body
        try:
            body = "".join(
                ET.tostring(element, encoding="unicode", short_empty_elements=False)
                for element in _marshal(values)
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(f"xml: {e}", self.format) from e

        self._write(buf, XML_HEADER)
        self._write(buf, f"<{ROOT_TAG}>")
        self._write(buf, body)
        self._write(buf, f"</{ROOT_TAG}>")
