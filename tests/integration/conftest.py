"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from laakhay.fedi import ClientConfig, InstanceClient


def pytest_collection_modifyitems(config, items):
    """Skip all integration tests unless RUN_LAAKHAY_NETWORK_TESTS=1."""
    if os.environ.get("RUN_LAAKHAY_NETWORK_TESTS") == "1":
        return
    skip = pytest.mark.skip(reason="Requires network access. Set RUN_LAAKHAY_NETWORK_TESTS=1 to run")
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(skip)


@pytest_asyncio.fixture
async def client():
    """Client for the instance named by FEDI_BASE / FEDI_TOKEN."""
    async with InstanceClient(ClientConfig.from_env()) as c:
        yield c
