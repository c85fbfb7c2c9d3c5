from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class RequestToken:
    """
    OAuth request token (temporary credentials) plus the auth properties carried with it.

    `properties` is copied into a read-only mapping; insertion order is preserved.
    """

    token: str
    token_secret: str
    callback_confirmed: bool = False
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties or {})))

    def __hash__(self) -> int:
        # Equality ignores property order, so the hash must too.
        return hash((self.token, self.token_secret, self.callback_confirmed, frozenset(self.properties.items())))


class DecodeStatus(str, Enum):
    OK = "ok"
    UNSUPPORTED_VERSION = "unsupported_version"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class DecodeResult:
    status: DecodeStatus
    token: Optional[RequestToken] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status is DecodeStatus.OK
