# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Make the root-level modules (nursery_client, nursery_home, ...) importable
# without installing the project.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nursery_directory.app.core import db  # noqa: E402
from nursery_directory.app.core.config import settings  # noqa: E402


@pytest.fixture
def store(tmp_path, monkeypatch):
    """A fresh, migrated document store in a temporary SQLite file."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "directory.db"))
    db.init_db()
    return db


@pytest.fixture
def client(store):
    from fastapi.testclient import TestClient
    from nursery_directory.app.main import app

    return TestClient(app)
