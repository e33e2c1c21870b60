from __future__ import annotations

import shutil
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the guitar_api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from guitar_api.app import create_app  # noqa: E402
from guitar_api.core import config as core_config  # noqa: E402

SHIPPED_DATA = ROOT / "guitar_api" / "data.json"


@pytest.fixture()
def data_file(tmp_path):
    """Copy of the shipped dataset so tests never touch the packaged file."""
    target = tmp_path / "guitars.json"
    shutil.copyfile(SHIPPED_DATA, target)
    return target


@pytest.fixture()
def settings_env(data_file, monkeypatch):
    """Point the settings at the temporary file in test (no-persist) mode."""
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("DATA_FILE", str(data_file))
    monkeypatch.delenv("NO_PERSIST", raising=False)
    monkeypatch.delenv("STRICT_LOAD", raising=False)
    core_config.get_settings.cache_clear()
    yield core_config.get_settings()
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(settings_env):
    with TestClient(create_app(settings_env)) as test_client:
        yield test_client


@pytest.fixture()
def persisting_client(data_file, monkeypatch):
    """Client whose mutations are written back to ``data_file``."""
    monkeypatch.setenv("APP_ENV", "dev")
    monkeypatch.setenv("DATA_FILE", str(data_file))
    monkeypatch.setenv("NO_PERSIST", "0")
    monkeypatch.delenv("STRICT_LOAD", raising=False)
    core_config.get_settings.cache_clear()
    with TestClient(create_app(core_config.get_settings())) as test_client:
        yield test_client
    core_config.get_settings.cache_clear()
