"""Test fixtures for aiowithings."""

import pytest
import aiohttp
from aioresponses import aioresponses

from aiowithings import WithingsClient

ACCESS_TOKEN = "this_is_oauth2_token"


@pytest.fixture
def mock_aioresponse():
    """Mock aiohttp responses."""
    with aioresponses() as m:
        yield m


@pytest.fixture
async def session():
    """Create aiohttp ClientSession."""
    async with aiohttp.ClientSession() as session:
        yield session


@pytest.fixture
async def client(session):
    """Create WithingsClient sending a bearer token."""
    return WithingsClient(session, access_token=ACCESS_TOKEN)
