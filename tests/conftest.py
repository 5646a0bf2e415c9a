"""
Shared fixtures: every test starts from a freshly seeded store.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the package importable without installing it
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from people_api.app.core import store as core_store
from people_api.app.main import app


@pytest.fixture(autouse=True)
def seeded_store():
    yield core_store.init_store(seed=True)


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def new_person():
    return {
        "identifier": "999",
        "name": "Teste Pessoa",
        "genre": "Feminino",
        "address": "Rua Nova, 1",
        "age": 40,
        "neighborhood": "Centro",
        "region": "Bahia",
    }
