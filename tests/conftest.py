"""
Pytest configuration and shared fixtures.
"""
import pytest
from httpx import AsyncClient, ASGITransport

from src.api.main import app, get_snapshot_source
from src.infrastructure.gateways.synthetic_market import SyntheticMarketGateway
from tests.sample_data import FIXED_NOW_MS


@pytest.fixture
def gateway():
    """Synthetic gateway pinned to a fixed clock."""
    return SyntheticMarketGateway(clock=lambda: FIXED_NOW_MS)


@pytest.fixture
async def client(gateway):
    """Async HTTP client for testing FastAPI endpoints."""
    app.dependency_overrides[get_snapshot_source] = lambda: gateway
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
