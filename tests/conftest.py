import asyncio
import json
from pathlib import Path

import pytest
import pytest_asyncio

from groww_connect.transport import Transport


class FakeClock:
    """Monotonic clock whose sleep advances time instantly and records waits.

    Sleeping still yields to the event loop so concurrent tasks interleave.
    """

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds
        await asyncio.sleep(0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest_asyncio.fixture
async def transport(clock):
    t = Transport("test-key", clock=clock, sleep=clock.sleep)
    yield t
    await t.aclose()


@pytest.fixture
def groww_response(request) -> dict:
    name = request.param  # e.g. "holdings", "api_error"
    path = Path(__file__).parent / f"fixtures/responses/groww/{name}.json"
    if not path.exists():
        pytest.fail(f"Fixture response file not found: {path}")
    return json.loads(path.read_text())
