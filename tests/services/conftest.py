"""Service test fixtures: snapshot files on disk + FastAPI test client.

Invariants:
    - Every test writes its own snapshot file under tmp_path
    - B2B_GATE_SNAPSHOT_PATH points at that file; get_settings cache is cleared
      before and after so no test sees another test's settings
"""

import json
import logging

import pytest
from httpx import ASGITransport, AsyncClient

from b2b_gate.config import get_settings


@pytest.fixture
def write_snapshot(tmp_path, monkeypatch):
    """Write a document to disk and point settings at it. Returns the path."""
    def _write(doc: dict) -> str:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(doc), encoding="utf-8")
        monkeypatch.setenv("B2B_GATE_SNAPSHOT_PATH", str(path))
        get_settings.cache_clear()
        return str(path)
    yield _write
    get_settings.cache_clear()


@pytest.fixture
async def client():
    from b2b_gate.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture(autouse=True)
def restore_root_logging():
    """CLI runs setup_logging; put root handlers back after each test."""
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
