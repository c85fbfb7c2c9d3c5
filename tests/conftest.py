"""
Pytest config.

Local imports like `import tripit` rely on the repo root being on sys.path. When
invoking a global `pytest` entrypoint that doesn't always happen during collection,
so we pin it here.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_syspath() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


_ensure_repo_root_on_syspath()


@pytest.fixture(autouse=True)
def _isolate_state_config(monkeypatch: pytest.MonkeyPatch):
    """
    `load_state_config` is lru-cached and reads the process environment.

    Start every test from a clean TRIPIT_* environment and an empty cache so a
    secret set by one test never leaks into another.
    """
    from tripit.auth.config import load_state_config

    for name in ("TRIPIT_STATE_SECRET", "TRIPIT_STATE_TTL_SECONDS", "TRIPIT_COOKIE_SECURE", "TRIPIT_PUBLIC_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
    load_state_config.cache_clear()
    yield
    load_state_config.cache_clear()
