"""
Versioned binary serializer for TripIt request tokens.

The encoded token travels inside the provider's state cookie between the redirect
to TripIt and the callback. Layout (see `tripit.messages.binary` for primitives):

    int32 FORMAT_VERSION
    string token
    string token_secret
    bool   callback_confirmed
    ...    property bag (tripit.messages.properties, same stream)

Decoding never raises on bad data: an unknown version or a truncated/corrupt
payload yields None from `deserialize`, and a `DecodeResult` with the failure kind
from `try_deserialize`.
"""

from __future__ import annotations

import logging
from typing import Optional

from tripit.messages.binary import BinaryReader, BinaryWriter, MalformedTokenError
from tripit.messages.models import DecodeResult, DecodeStatus, RequestToken
from tripit.messages.properties import check_properties, read_properties, write_properties

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class _UnsupportedVersion(Exception):
    def __init__(self, version: int) -> None:
        super().__init__(f"unsupported format version {version}")
        self.version = version


def write_request_token(writer: BinaryWriter, token: RequestToken) -> None:
    """Append `token` to a caller-owned writer."""
    if writer is None:
        raise ValueError("writer is required")
    if token is None:
        raise ValueError("token is required")
    if not isinstance(token.token, str) or not isinstance(token.token_secret, str):
        raise ValueError("token and token_secret must be strings")
    check_properties(token.properties)

    writer.write_int32(FORMAT_VERSION)
    writer.write_string(token.token)
    writer.write_string(token.token_secret)
    writer.write_bool(bool(token.callback_confirmed))
    write_properties(writer, token.properties)


def read_request_token(reader: BinaryReader) -> Optional[RequestToken]:
    """
    Read a token from a caller-owned reader.

    Returns None on a version mismatch or a corrupt property bag. Raises
    `MalformedTokenError` if the data ends early.
    """
    if reader is None:
        raise ValueError("reader is required")
    try:
        return _read(reader)
    except _UnsupportedVersion:
        return None


def _read(reader: BinaryReader) -> Optional[RequestToken]:
    version = reader.read_int32()
    if version != FORMAT_VERSION:
        raise _UnsupportedVersion(version)

    token = reader.read_string()
    token_secret = reader.read_string()
    callback_confirmed = reader.read_bool()
    properties = read_properties(reader)
    if properties is None:
        return None

    return RequestToken(
        token=token,
        token_secret=token_secret,
        callback_confirmed=callback_confirmed,
        properties=properties,
    )


class RequestTokenSerializer:
    """Serializes request tokens so other components (cookies, tickets) can carry them."""

    def serialize(self, token: RequestToken) -> bytes:
        if token is None:
            raise ValueError("token is required")
        with BinaryWriter() as writer:
            write_request_token(writer, token)
            return writer.getvalue()

    def try_deserialize(self, data: bytes) -> DecodeResult:
        if data is None:
            raise ValueError("data is required")
        with BinaryReader(data) as reader:
            try:
                token = _read(reader)
            except _UnsupportedVersion as e:
                logger.debug("Request token not decoded: %s", e)
                return DecodeResult(DecodeStatus.UNSUPPORTED_VERSION, reason=str(e))
            except MalformedTokenError as e:
                logger.debug("Request token not decoded: %s", e)
                return DecodeResult(DecodeStatus.MALFORMED, reason=str(e))
        if token is None:
            logger.debug("Request token not decoded: unreadable property bag")
            return DecodeResult(DecodeStatus.MALFORMED, reason="unreadable property bag")
        return DecodeResult(DecodeStatus.OK, token=token)

    def deserialize(self, data: bytes) -> Optional[RequestToken]:
        return self.try_deserialize(data).token
