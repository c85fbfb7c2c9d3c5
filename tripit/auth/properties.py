"""
Well-known authentication properties carried in the request token's property bag.

Keys and value formats follow the OWIN authentication-properties convention so
state round-trips with other provider implementations:
- timestamps are RFC 1123 strings in UTC ("Sun, 18 Oct 2026 19:48:00 GMT")
- ".refresh" is "True" / "False"; ".persistent" is marked by presence alone
"""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Dict, Mapping, Optional

from dateutil import parser as date_parser

REDIRECT_URI_KEY = ".redirect"
ISSUED_UTC_KEY = ".issued"
EXPIRES_UTC_KEY = ".expires"
IS_PERSISTENT_KEY = ".persistent"
ALLOW_REFRESH_KEY = ".refresh"


def _format_utc(dt: datetime) -> str:
    if dt.tzinfo is None:
        # Treat naive values as UTC to keep behavior deterministic.
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt.astimezone(timezone.utc).replace(microsecond=0), usegmt=True)


def _parse_utc(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        dt = date_parser.parse(value)
    except (ValueError, OverflowError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _format_bool(value: bool) -> str:
    return "True" if value else "False"


def _parse_bool(value: Optional[str]) -> Optional[bool]:
    v = (value or "").strip().lower()
    if v == "true":
        return True
    if v == "false":
        return False
    return None


def get_redirect_uri(properties: Mapping[str, str]) -> Optional[str]:
    return properties.get(REDIRECT_URI_KEY) or None


def get_issued_utc(properties: Mapping[str, str]) -> Optional[datetime]:
    return _parse_utc(properties.get(ISSUED_UTC_KEY))


def get_expires_utc(properties: Mapping[str, str]) -> Optional[datetime]:
    return _parse_utc(properties.get(EXPIRES_UTC_KEY))


def is_persistent(properties: Mapping[str, str]) -> bool:
    # Presence of the key is what marks a persistent session.
    return IS_PERSISTENT_KEY in properties


def get_allow_refresh(properties: Mapping[str, str]) -> Optional[bool]:
    return _parse_bool(properties.get(ALLOW_REFRESH_KEY))


def with_auth_properties(
    properties: Optional[Mapping[str, str]] = None,
    *,
    redirect_uri: Optional[str] = None,
    issued_utc: Optional[datetime] = None,
    expires_utc: Optional[datetime] = None,
    persistent: Optional[bool] = None,
    allow_refresh: Optional[bool] = None,
) -> Dict[str, str]:
    """
    Return a new property dict with the given well-known values set.

    Arguments left as None keep whatever `properties` already holds; the input
    mapping is never modified.
    """
    out: Dict[str, str] = dict(properties or {})
    if redirect_uri is not None:
        out[REDIRECT_URI_KEY] = redirect_uri
    if issued_utc is not None:
        out[ISSUED_UTC_KEY] = _format_utc(issued_utc)
    if expires_utc is not None:
        out[EXPIRES_UTC_KEY] = _format_utc(expires_utc)
    if persistent is True:
        out[IS_PERSISTENT_KEY] = ""
    elif persistent is False:
        out.pop(IS_PERSISTENT_KEY, None)
    if allow_refresh is not None:
        out[ALLOW_REFRESH_KEY] = _format_bool(allow_refresh)
    return out
