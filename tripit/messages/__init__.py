"""Request-token messages and their binary serializers."""

from tripit.messages.binary import BinaryReader, BinaryWriter, MalformedTokenError
from tripit.messages.models import DecodeResult, DecodeStatus, RequestToken
from tripit.messages.properties import PropertiesSerializer, read_properties, write_properties
from tripit.messages.serializer import (
    FORMAT_VERSION,
    RequestTokenSerializer,
    read_request_token,
    write_request_token,
)

__all__ = [
    "FORMAT_VERSION",
    "BinaryReader",
    "BinaryWriter",
    "DecodeResult",
    "DecodeStatus",
    "MalformedTokenError",
    "PropertiesSerializer",
    "RequestToken",
    "RequestTokenSerializer",
    "read_properties",
    "read_request_token",
    "write_properties",
    "write_request_token",
]
