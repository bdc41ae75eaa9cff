"""Pytest configuration - loads .env and provides a stubbed OstrichDB client."""

from pathlib import Path

import httpx
import pytest
from dotenv import load_dotenv

from helpers import BASE_URL, TOKEN, stub
from ostrichdb import OstrichDB

# Load .env from project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)


@pytest.fixture
def sent() -> list[httpx.Request]:
    """Requests seen by the stub transport, in order."""
    return []


@pytest.fixture
async def make_db(sent):
    """
    Factory for clients answering every request with a fixed response.

    Usage: db = make_db(text="a\\nb") or make_db(status=404, text="missing")
    """
    clients: list[OstrichDB] = []

    def _make(status: int = 200, text: str = "", **kwargs) -> OstrichDB:
        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return httpx.Response(status, text=text)

        kwargs.setdefault("base_url", BASE_URL)
        kwargs.setdefault("token", TOKEN)
        db = stub(OstrichDB(**kwargs), handler)
        clients.append(db)
        return db

    yield _make

    for db in clients:
        await db.aclose()


@pytest.fixture
def db(make_db) -> OstrichDB:
    """Client answering 200 with an empty body."""
    return make_db()
