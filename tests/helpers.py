"""Shared test constants and the stub transport helper."""

from collections.abc import Callable

import httpx

from ostrichdb import OstrichDB

BASE_URL = "http://ostrich.test:8042"
TOKEN = "test-token"

Handler = Callable[[httpx.Request], httpx.Response]


def stub(db: OstrichDB, handler: Handler) -> OstrichDB:
    """Route all of db's requests through handler instead of the network."""
    db._client._client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return db
