"""
Test configuration and fixtures for the Menu Match backend test suite.

Provides:
- Catalog state pointed at the reference dataset (reset per test)
- FastAPI TestClient fixture
"""
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from backend.api.routers import menu_match as menu_match_router
from backend.core.config import settings


SAMPLE_DATA = Path(__file__).resolve().parents[2] / "menu_match" / "tests" / "fixtures" / "restaurant_data.csv"


# ---------------------------------------------------------------------------
# Catalog fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def data_paths(monkeypatch):
    """Point the backend at the reference catalog."""
    paths = [str(SAMPLE_DATA)]
    monkeypatch.setattr(settings, "DATA_PATHS", paths)
    monkeypatch.setattr(settings, "CONFIG_PATH", "")
    monkeypatch.setattr(settings, "API_KEY", "")
    menu_match_router.reset_menu_match()
    yield paths
    menu_match_router.reset_menu_match()


@pytest.fixture()
def client(data_paths):
    """Provide a FastAPI TestClient; the lifespan loads the catalog."""
    from backend.api.main import app

    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def write_catalog(tmp_path):
    """Factory: write catalog lines to a file and return its path."""
    def _write(lines: list, name: str = "catalog.csv") -> str:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return str(path)
    return _write
