from __future__ import annotations

from datetime import datetime, timezone

from tripit.auth.properties import (
    ALLOW_REFRESH_KEY,
    EXPIRES_UTC_KEY,
    IS_PERSISTENT_KEY,
    ISSUED_UTC_KEY,
    REDIRECT_URI_KEY,
    get_allow_refresh,
    get_expires_utc,
    get_issued_utc,
    get_redirect_uri,
    is_persistent,
    with_auth_properties,
)
from tripit.messages.models import RequestToken
from tripit.messages.serializer import RequestTokenSerializer


def _dt(y: int, m: int, d: int, hh: int, mm: int = 0, ss: int = 0) -> datetime:
    return datetime(y, m, d, hh, mm, ss, tzinfo=timezone.utc)


def test_timestamps_use_rfc1123_utc() -> None:
    props = with_auth_properties(issued_utc=_dt(2026, 10, 18, 19, 48), expires_utc=_dt(2026, 10, 18, 20, 3))
    assert props[ISSUED_UTC_KEY] == "Sun, 18 Oct 2026 19:48:00 GMT"
    assert props[EXPIRES_UTC_KEY] == "Sun, 18 Oct 2026 20:03:00 GMT"
    assert get_issued_utc(props) == _dt(2026, 10, 18, 19, 48)
    assert get_expires_utc(props) == _dt(2026, 10, 18, 20, 3)


def test_naive_datetime_is_treated_as_utc() -> None:
    props = with_auth_properties(issued_utc=datetime(2026, 1, 2, 4, 0, 0))
    assert get_issued_utc(props) == _dt(2026, 1, 2, 4)


def test_unparseable_timestamp_is_none() -> None:
    assert get_issued_utc({ISSUED_UTC_KEY: "not a date"}) is None
    assert get_expires_utc({}) is None


def test_redirect_persistent_and_refresh() -> None:
    props = with_auth_properties(redirect_uri="/trips", persistent=True, allow_refresh=False)
    assert props[REDIRECT_URI_KEY] == "/trips"
    assert props[IS_PERSISTENT_KEY] == ""
    assert props[ALLOW_REFRESH_KEY] == "False"
    assert get_redirect_uri(props) == "/trips"
    assert is_persistent(props) is True
    assert get_allow_refresh(props) is False

    cleared = with_auth_properties(props, persistent=False)
    assert is_persistent(cleared) is False
    assert get_allow_refresh({}) is None
    assert get_redirect_uri({}) is None


def test_input_is_not_modified_and_unknown_keys_pass_through() -> None:
    base = {"oauth_callback": "https://app.example.com/signin-tripit"}
    props = with_auth_properties(base, redirect_uri="/x")
    assert base == {"oauth_callback": "https://app.example.com/signin-tripit"}
    assert props["oauth_callback"] == "https://app.example.com/signin-tripit"


def test_well_known_properties_survive_the_token_codec() -> None:
    props = with_auth_properties(
        redirect_uri="/trips",
        issued_utc=_dt(2026, 10, 18, 19, 48),
        persistent=True,
        allow_refresh=True,
    )
    s = RequestTokenSerializer()
    got = s.deserialize(s.serialize(RequestToken("t", "s", True, props)))
    assert got is not None
    assert get_redirect_uri(got.properties) == "/trips"
    assert get_issued_utc(got.properties) == _dt(2026, 10, 18, 19, 48)
    assert is_persistent(got.properties) is True
    assert get_allow_refresh(got.properties) is True
