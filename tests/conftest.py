"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from api.app import create_app
from config import Config, GeneratorConfig
from generator.layout import TIME_STEP
from generator.suid import SUIDGenerator, landmark_millis
from tests.clock import LANDMARK_YEAR, START_PERIOD, FakeClock


@pytest.fixture
def landmark():
    return landmark_millis(LANDMARK_YEAR)


@pytest.fixture
def clock(landmark):
    """Clock parked at the first millisecond of START_PERIOD."""
    return FakeClock(landmark + START_PERIOD * TIME_STEP)


@pytest.fixture
def generator(clock):
    """Generator with instance id 42 driven by the fake clock."""
    return SUIDGenerator(LANDMARK_YEAR, 42, clock=clock)


@pytest.fixture
def no_host_ipv4(monkeypatch):
    """Keep clock outlier reports off the network."""
    monkeypatch.setattr("generator.suid._host_ipv4", lambda: "10.0.0.42")


@pytest.fixture
def app_config():
    return Config(generator=GeneratorConfig(landmark_year=LANDMARK_YEAR, instance_id=42))


@pytest.fixture
async def app(app_config):
    """Create test FastAPI app."""
    return create_app(app_config)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
