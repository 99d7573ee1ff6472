import os

import pytest
from groww_connect.client import AsyncGrowwClient


def pytest_collection_modifyitems(items):
    """Skip all live tests if credentials are missing."""
    if not os.environ.get("GROWW_API_KEY"):
        skip = pytest.mark.skip(reason="GROWW_API_KEY not set, skipping live tests")
        for item in items:
            if "live" in item.keywords:
                item.add_marker(skip)


@pytest.fixture
async def groww():
    client = AsyncGrowwClient(os.environ["GROWW_API_KEY"])
    yield client
    await client.aclose()
