"""Shared test fixtures."""

import json
import sqlite3
from pathlib import Path

import pytest
import yaml

from bigrm.storage.credential_store import CredentialStore
from bigrm.storage.database import connect

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def forecast_no_alerts() -> dict:
    with open(FIXTURE_DIR / "onecall_no_alerts.json") as f:
        return json.load(f)


@pytest.fixture
def forecast_with_alert() -> dict:
    with open(FIXTURE_DIR / "onecall_with_alert.json") as f:
        return json.load(f)


@pytest.fixture
def db_conn(tmp_path: Path) -> sqlite3.Connection:
    conn = connect(tmp_path / "storage.db")
    yield conn
    conn.close()


@pytest.fixture
def store(db_conn: sqlite3.Connection) -> CredentialStore:
    return CredentialStore(db_conn)


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write a config YAML pointing at a temp DB and a test endpoint, and select it."""
    data = {
        "location": {"name": "Test Place", "latitude": 51.4192, "longitude": -3.2915},
        "api": {"base_url": "https://test-owm.example.com/onecall"},
        "storage": {"db_path": str(tmp_path / "cli" / "storage.db")},
    }
    path = tmp_path / "config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    monkeypatch.setenv("BIGRM_CONFIG", str(path))
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    return path
