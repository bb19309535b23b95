#!/usr/bin/env python3
"""
albumapi Data Models

Domain records served by the API.
"""

from __future__ import annotations

from typing import ClassVar, FrozenSet

from pydantic import BaseModel


class Album(BaseModel):
    """
    A music album.

    Serializes to JSON as its field dump, to XML as
    ``<album id="1"><band/><title/><year/></album>`` and to text as
    ``"Band - Title (Year)"``.

    Attributes:
        id: Album identifier
        band: Performing band
        title: Album title
        year: Release year
    """

    xml_tag: ClassVar[str] = "album"
    xml_attributes: ClassVar[FrozenSet[str]] = frozenset({"id"})

    id: int
    band: str
    title: str
    year: int

    def __str__(self) -> str:
        return f"{self.band} - {self.title} ({self.year})"
