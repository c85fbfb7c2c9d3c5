"""
Little-endian binary primitives shared by the message serializers.

Layout matches .NET `BinaryWriter`/`BinaryReader` so state written by the
other provider implementations stays readable:
- int32: 4 bytes, little-endian, signed
- bool: 1 byte (reader treats any non-zero byte as True)
- string: 7-bit variable-length UTF-8 byte count, then the UTF-8 bytes
"""

from __future__ import annotations

import io
import struct

_INT32 = struct.Struct("<i")
_INT32_MAX = 0x7FFFFFFF
# A 7-bit encoded int32 never needs more than 5 bytes.
_MAX_7BIT_SHIFT = 35


class MalformedTokenError(ValueError):
    """Raised when a byte sequence ends early or carries an impossible value."""


class BinaryWriter:
    """Append-only writer over an in-memory buffer."""

    def __init__(self) -> None:
        self._buf = io.BytesIO()

    def __enter__(self) -> "BinaryWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._buf.close()

    def write_int32(self, value: int) -> None:
        try:
            self._buf.write(_INT32.pack(value))
        except struct.error as e:
            raise ValueError(f"int32 out of range: {value!r}") from e

    def write_bool(self, value: bool) -> None:
        self._buf.write(b"\x01" if value else b"\x00")

    def write_string(self, value: str) -> None:
        if not isinstance(value, str):
            raise ValueError(f"expected a string, got {type(value).__name__}")
        raw = value.encode("utf-8")
        self._write_7bit_int(len(raw))
        self._buf.write(raw)

    def _write_7bit_int(self, value: int) -> None:
        out = bytearray()
        while value >= 0x80:
            out.append((value | 0x80) & 0xFF)
            value >>= 7
        out.append(value)
        self._buf.write(bytes(out))

    def getvalue(self) -> bytes:
        return self._buf.getvalue()


class BinaryReader:
    """Forward-only reader; every overrun raises `MalformedTokenError`."""

    def __init__(self, data: bytes) -> None:
        self._buf = io.BytesIO(data)
        self._size = len(data)

    def __enter__(self) -> "BinaryReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._buf.close()

    def remaining(self) -> int:
        return self._size - self._buf.tell()

    def _read_exact(self, n: int) -> bytes:
        chunk = self._buf.read(n)
        if len(chunk) != n:
            raise MalformedTokenError(f"unexpected end of data (wanted {n} bytes, got {len(chunk)})")
        return chunk

    def read_int32(self) -> int:
        return _INT32.unpack(self._read_exact(4))[0]

    def read_bool(self) -> bool:
        return self._read_exact(1) != b"\x00"

    def read_string(self) -> str:
        length = self._read_7bit_int()
        raw = self._read_exact(length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedTokenError("string is not valid UTF-8") from e

    def _read_7bit_int(self) -> int:
        result = 0
        shift = 0
        while True:
            if shift >= _MAX_7BIT_SHIFT:
                raise MalformedTokenError("7-bit encoded length is too long")
            b = self._read_exact(1)[0]
            result |= (b & 0x7F) << shift
            shift += 7
            if not b & 0x80:
                break
        if result > _INT32_MAX:
            raise MalformedTokenError(f"string length out of range: {result}")
        return result
