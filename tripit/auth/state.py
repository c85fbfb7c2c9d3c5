"""
Request-token state cookie.

The encoded request token is signed and timestamped, not encrypted: the token
secret is readable by anyone holding the cookie, so keep the TTL short.
"""

from __future__ import annotations

import logging
from typing import Optional

from itsdangerous import BadPayload, BadSignature, SignatureExpired, URLSafeTimedSerializer

from tripit.auth.config import StateConfig
from tripit.auth.util import b64url, b64url_decode
from tripit.messages.models import RequestToken
from tripit.messages.serializer import RequestTokenSerializer

logger = logging.getLogger(__name__)

STATE_SALT = "tripit-request-token-v1"

_token_serializer = RequestTokenSerializer()


def state_cookie_name(cfg: StateConfig) -> str:
    # `__Host-` requires Secure + Path=/ + no Domain; browsers may reject it on HTTP.
    return "__Host-tripit_state" if cfg.cookie_secure else "tripit_state"


def _serializer(cfg: StateConfig) -> Optional[URLSafeTimedSerializer]:
    if not cfg.state_secret:
        logger.debug("TRIPIT_STATE_SECRET is not set; request-token state cannot be protected")
        return None
    return URLSafeTimedSerializer(secret_key=cfg.state_secret, salt=STATE_SALT)


def protect_request_token(cfg: StateConfig, token: RequestToken) -> Optional[str]:
    if token is None:
        raise ValueError("token is required")
    s = _serializer(cfg)
    if s is None:
        return None
    return s.dumps(b64url(_token_serializer.serialize(token)))


def unprotect_request_token(cfg: StateConfig, value: str | None) -> Optional[RequestToken]:
    if not value:
        return None
    s = _serializer(cfg)
    if s is None:
        return None
    try:
        raw = s.loads(value, max_age=cfg.state_ttl_seconds)
    except SignatureExpired:
        logger.debug("Request-token state expired")
        return None
    except (BadSignature, BadPayload):
        logger.debug("Request-token state has an invalid signature")
        return None
    if not isinstance(raw, str):
        return None
    try:
        data = b64url_decode(raw)
    except ValueError:
        logger.debug("Request-token state is not valid base64url")
        return None
    return _token_serializer.deserialize(data)

