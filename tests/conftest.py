# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from neighborfit.adapters.config import AppConfig
from neighborfit.api.http import create_app


@pytest.fixture
def client():
    # fresh stores per test; the seed catalog is loaded each time
    return TestClient(create_app(AppConfig(SEED_CATALOG=True)))
