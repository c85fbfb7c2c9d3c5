from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

DEFAULT_STATE_TTL_SECONDS = 900
MIN_STATE_TTL_SECONDS = 60


@dataclass(frozen=True)
class StateConfig:
    public_base_url: Optional[str]
    state_secret: Optional[str]  # Required for signing the request-token cookie
    state_ttl_seconds: int
    cookie_secure: bool

    @property
    def protection_enabled(self) -> bool:
        return bool(self.state_secret)


def _parse_bool(value: str) -> Optional[bool]:
    v = (value or "").strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    return None


def _parse_ttl(value: str) -> int:
    raw = (value or "").strip()
    if not raw:
        return DEFAULT_STATE_TTL_SECONDS
    try:
        ttl = int(float(raw))
    except ValueError:
        return DEFAULT_STATE_TTL_SECONDS
    return max(ttl, MIN_STATE_TTL_SECONDS)


@lru_cache(maxsize=1)
def load_state_config() -> StateConfig:
    """
    Load request-token state settings from environment variables.

    Without TRIPIT_STATE_SECRET the state cookie cannot be protected, and
    protect/unprotect return None.
    """
    public_base_url = (os.getenv("TRIPIT_PUBLIC_BASE_URL", "") or "").strip() or None
    cookie_secure = _parse_bool(os.getenv("TRIPIT_COOKIE_SECURE", ""))
    if cookie_secure is None:
        # Default: secure cookies when base URL is https; otherwise allow local dev.
        cookie_secure = (public_base_url or "").startswith("https://")

    return StateConfig(
        public_base_url=public_base_url,
        state_secret=(os.getenv("TRIPIT_STATE_SECRET", "") or "").strip() or None,
        state_ttl_seconds=_parse_ttl(os.getenv("TRIPIT_STATE_TTL_SECONDS", "")),
        cookie_secure=cookie_secure,
    )
