"""
Authentication property bag codec.

The bag is written onto the caller's writer (no length framing around it), so the
reader must consume exactly what was written:

    int32 version | int32 count | count x (string key, string value)
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from tripit.messages.binary import BinaryReader, BinaryWriter, MalformedTokenError

logger = logging.getLogger(__name__)

PROPERTIES_FORMAT_VERSION = 1


def check_properties(properties: Optional[Mapping[str, str]]) -> List[Tuple[str, str]]:
    """Return the bag's entries, or raise ValueError if any key or value is not text."""
    items = list((properties or {}).items())
    for key, value in items:
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError("property keys and values must be strings")
    return items


def write_properties(writer: BinaryWriter, properties: Optional[Mapping[str, str]]) -> None:
    if writer is None:
        raise ValueError("writer is required")
    items = check_properties(properties)
    writer.write_int32(PROPERTIES_FORMAT_VERSION)
    writer.write_int32(len(items))
    for key, value in items:
        writer.write_string(key)
        writer.write_string(value)


def read_properties(reader: BinaryReader) -> Optional[Dict[str, str]]:
    """
    Read a property bag from the shared reader.

    Returns None for an unknown version or an impossible entry count; raises
    `MalformedTokenError` if the data ends early.
    """
    if reader is None:
        raise ValueError("reader is required")
    version = reader.read_int32()
    if version != PROPERTIES_FORMAT_VERSION:
        logger.debug("Property bag version mismatch (got %d)", version)
        return None
    count = reader.read_int32()
    # write_properties never emits a negative count.
    if count < 0:
        logger.debug("Property bag has negative entry count (%d)", count)
        return None
    out: Dict[str, str] = {}
    for _ in range(count):
        key = reader.read_string()
        out[key] = reader.read_string()
    return out


class PropertiesSerializer:
    """Standalone byte-level wrapper around `write_properties` / `read_properties`."""

    def serialize(self, properties: Mapping[str, str]) -> bytes:
        if properties is None:
            raise ValueError("properties is required")
        with BinaryWriter() as writer:
            write_properties(writer, properties)
            return writer.getvalue()

    def deserialize(self, data: bytes) -> Optional[Dict[str, str]]:
        if data is None:
            raise ValueError("data is required")
        with BinaryReader(data) as reader:
            try:
                return read_properties(reader)
            except MalformedTokenError as e:
                logger.debug("Property bag decode failed: %s", e)
                return None
