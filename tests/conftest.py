from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

import sys


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from paypal_rest.config import Settings, get_settings

_PAYPAL_ENV_VARS = (
    "PAYPAL_MODE",
    "PAYPAL_ENDPOINT",
    "PAYPAL_CLIENT_ID",
    "PAYPAL_CLIENT_SECRET",
    "PAYPAL_CONNECTION_TIMEOUT_MS",
    "PAYPAL_PROXY_ADDRESS",
    "PAYPAL_PROXY_CREDENTIALS",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep developer PAYPAL_* variables, .env files and cached settings out of tests."""
    for name in _PAYPAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setitem(Settings.model_config, "env_file", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Generator[Settings, None, None]:
    """Return a fresh Settings instance that ignores any local .env file."""

    yield Settings(_env_file=None)
