from __future__ import annotations

import base64


def b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def b64url_decode(value: str) -> bytes:
    """
    Inverse of `b64url` (restores padding). Raises ValueError on bad input.
    """
    s = (value or "").strip()
    pad = -len(s) % 4
    try:
        return base64.urlsafe_b64decode(s + "=" * pad)
    except ValueError as e:
        raise ValueError("invalid base64url value") from e
