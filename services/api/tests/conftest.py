"""Shared fixtures for API tests."""

from collections.abc import Callable, Iterator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from addon_api.main import app
from addon_api.services.bigcommerce_client import BigCommerceClient
from addon_api.stores.mappings import MappingStore, get_mapping_store


@pytest.fixture(autouse=True)
def mapping_store() -> Iterator[MappingStore]:
    """Process-wide mapping store, emptied around every test."""
    store = get_mapping_store()
    store.clear()
    yield store
    store.clear()


@pytest.fixture
async def client():
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def catalog_client():
    """Build a BigCommerceClient whose requests go to a mock handler."""
    created: list[BigCommerceClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> BigCommerceClient:
        kwargs.setdefault("store_hash", "abc123")
        kwargs.setdefault("token", "secret-token")
        bc = BigCommerceClient(transport=httpx.MockTransport(handler), **kwargs)
        created.append(bc)
        return bc

    yield _make

    for bc in created:
        await bc.close()
