# tests/conftest.py
import dataclasses
import os

import pytest

# must be set before thumbnail_studio.config is imported
os.environ["AI_GATEWAY_API_KEY"] = "test-key"
os.environ["MAX_WORKERS"] = "1"
os.environ["LOG_LEVEL"] = "INFO"

from fastapi.testclient import TestClient

from thumbnail_studio.lib import gateway
from thumbnail_studio.main import app
from fakes import FakeCompletions


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture(autouse=True)
def fake_gateway(monkeypatch):
    """
    Auto-mock the gateway client everywhere so tests don't hit the network.
    """
    fake = FakeCompletions()
    monkeypatch.setattr(gateway.client.chat.completions, "create", fake.create)
    return fake


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr(gateway, "config", dataclasses.replace(gateway.config, gateway_api_key=""))
