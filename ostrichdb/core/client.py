"""
Core HTTP client for the OstrichDB API.

Handles authentication, request/response and error handling.
"""

import asyncio
import json
import os
import urllib.parse
from typing import Any

import httpx
from loguru import logger

# Configuration
DEFAULT_BASE_URL = "http://localhost:8042"
DEFAULT_TIMEOUT = 30


class OstrichDBError(Exception):
    """Error raised for every failed OstrichDB request."""

    def __init__(self, message: str, status_code: int | None = None, response: str | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for structured output."""
        result: dict[str, Any] = {"error": self.message}
        if self.status_code is not None:
            result["status"] = self.status_code
        if self.response:
            result["response"] = self.response
        return result


def quote_segment(segment: str | int) -> str:
    """Percent-encode a single path segment (slashes included)."""
    return urllib.parse.quote(str(segment), safe="")


class APIClient:
    """
    Low-level async HTTP client for the OstrichDB API.

    Handles:
    - Bearer token authentication
    - HTTP methods (GET, POST, DELETE)
    - A hard per-request timeout
    - Error normalization into OstrichDBError

    The token is plain mutable state. Changing it while requests are in
    flight may apply either the old or the new token to those requests.
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the API client.

        Args:
            base_url: API base URL (or OSTRICHDB_URL env var)
            token: Bearer token (or OSTRICHDB_TOKEN env var)
            timeout: Request timeout in seconds

        """
        self.base_url = (base_url or os.environ.get("OSTRICHDB_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.token = token or os.environ.get("OSTRICHDB_TOKEN")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None:
            # asyncio.wait_for in request() is the only timeout
            self._client = httpx.AsyncClient(timeout=None)
        return self._client

    def set_token(self, token: str | None) -> None:
        """Replace the bearer token used by subsequent requests."""
        self.token = token

    async def aclose(self) -> None:
        """Close the underlying httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _build_url(self, endpoint: str) -> str:
        """Build full URL from endpoint."""
        return f"{self.base_url}{endpoint}"

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def request(self, method: str, endpoint: str, data: Any = None) -> str:
        """
        Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, POST, DELETE)
            endpoint: API path including any query string
            data: JSON body, ignored for GET requests

        Returns:
            Raw response text

        Raises:
            OstrichDBError: On HTTP, connection or timeout errors

        """
        url = self._build_url(endpoint)
        body = json.dumps(data) if data and method != "GET" else None
        logger.debug(f"{method} {url}")

        try:
            response = await asyncio.wait_for(
                self.client.request(method, url, headers=self._headers(), content=body),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.debug(f"{method} {url} timed out after {self.timeout} seconds")
            raise OstrichDBError(f"Request failed: timed out after {self.timeout} seconds") from e
        except httpx.HTTPError as e:
            cause = str(e) or type(e).__name__
            logger.debug(f"{method} {url} failed: {cause}")
            raise OstrichDBError(f"Request failed: {cause}") from e

        text = response.text
        if not response.is_success:
            logger.debug(f"{method} {url} returned {response.status_code}")
            detail = f" - {text}" if text else ""
            raise OstrichDBError(
                f"HTTP {response.status_code}: {response.reason_phrase}{detail}",
                status_code=response.status_code,
                response=text,
            )
        return text

    # =========================================================================
    # HTTP Methods
    # =========================================================================

    async def get(self, path: str, params: dict[str, Any] | None = None) -> str:
        """Make a GET request."""
        return await self.request("GET", with_query(path, params))

    async def post(self, path: str, params: dict[str, Any] | None = None, data: Any = None) -> str:
        """Make a POST request."""
        return await self.request("POST", with_query(path, params), data)

    async def delete(self, path: str) -> str:
        """Make a DELETE request."""
        return await self.request("DELETE", path)


def with_query(path: str, params: dict[str, Any] | None) -> str:
    """Append URL-encoded params to path, skipping None values."""
    if params:
        filtered_params = {k: v for k, v in params.items() if v is not None}
        if filtered_params:
            query_string = urllib.parse.urlencode(filtered_params)
            separator = "&" if "?" in path else "?"
            path = f"{path}{separator}{query_string}"
    return path
