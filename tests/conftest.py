from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote users_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from users_api.app import create_app  # noqa: E402
from users_api.core import config as core_config  # noqa: E402


@pytest.fixture()
def users_file(tmp_path, monkeypatch):
    """Point USERS_FILE at a temporary path and reset the cached settings."""
    path = tmp_path / "users.json"
    monkeypatch.setenv("USERS_FILE", str(path))
    core_config.get_settings.cache_clear()
    yield path
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(users_file):
    app = create_app(core_config.get_settings())
    with TestClient(app) as test_client:
        yield test_client
