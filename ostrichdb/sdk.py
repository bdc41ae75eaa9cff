"""
OstrichDB SDK - High-level async client.

This layer maps each project, collection, cluster and record operation
onto one request against the OstrichDB REST API. Built on top of the core
APIClient.
"""

import json
from collections.abc import Mapping
from typing import Any

from ostrichdb.builders import ProjectBuilder
from ostrichdb.core.client import DEFAULT_TIMEOUT, APIClient, quote_segment
from ostrichdb.core.types import Record, SearchOptions

API_PREFIX = "/api/v1"

# Path segment naming each level of the resource hierarchy
RESOURCE_KINDS = ("projects", "collections", "clusters", "records")


def item_path(*names: str | int) -> str:
    """
    Build the endpoint for a single resource.

    Example:
        item_path("shop", "users") -> "/api/v1/projects/shop/collections/users"

    """
    parts = [f"/{kind}/{quote_segment(name)}" for kind, name in zip(RESOURCE_KINDS, names)]
    return API_PREFIX + "".join(parts)


def list_path(*parents: str | int) -> str:
    """Build the endpoint listing the children of the given parents."""
    return f"{item_path(*parents)}/{RESOURCE_KINDS[len(parents)]}"


def split_lines(text: str) -> list[str]:
    """Split a newline-delimited body into its non-blank lines."""
    return [line for line in text.split("\n") if line.strip()]


def parse_name_list(text: str, key: str) -> list[str]:
    """
    Parse a list response.

    Bodies shaped like {"<key>": [{"name": ...}, ...]} yield the names;
    anything else is treated as newline-delimited text.
    """
    if not text.strip():
        return []
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return split_lines(text)
    if isinstance(parsed, dict) and isinstance(parsed.get(key), list):
        return [entry["name"] for entry in parsed[key] if isinstance(entry, dict) and "name" in entry]
    return split_lines(text)


class OstrichDB:
    """
    Async OstrichDB API client.

    Example:
        async with OstrichDB(token="...") as db:
            await db.create_project("shop")
            await db.create_collection("shop", "users")
            await db.create_cluster("shop", "users", "active")
            await db.create_record("shop", "users", "active", "email", "string", "a@b.c")
            records = await db.list_records("shop", "users", "active")

            # Same thing through builders
            cluster = db.project("shop").collection("users").cluster("active")
            await cluster.record("age", "INTEGER", "28").create()

    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the OstrichDB client.

        Args:
            base_url: API base URL (or OSTRICHDB_URL env var, default http://localhost:8042)
            token: Bearer token (or OSTRICHDB_TOKEN env var)
            timeout: Request timeout in seconds

        """
        self._client = APIClient(base_url=base_url, token=token, timeout=timeout)

    async def __aenter__(self) -> "OstrichDB":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the underlying HTTP connections."""
        await self._client.aclose()

    @property
    def base_url(self) -> str:
        """Get the API base URL."""
        return self._client.base_url

    @property
    def timeout(self) -> float:
        """Get the per-request timeout in seconds."""
        return self._client.timeout

    @property
    def token(self) -> str | None:
        """Get the current bearer token."""
        return self._client.token

    @token.setter
    def token(self, value: str | None) -> None:
        """Set the bearer token."""
        self._client.set_token(value)

    def set_token(self, token: str | None) -> None:
        """Replace the bearer token for all subsequent requests."""
        self._client.set_token(token)

    def project(self, name: str, project_id: str = "") -> ProjectBuilder:
        """Start a builder chain at the given project."""
        return ProjectBuilder(self, name, project_id)

    # =========================================================================
    # Projects
    # =========================================================================

    async def list_projects(self) -> list[str]:
        """List the names of all projects."""
        return parse_name_list(await self._client.get(list_path()), "projects")

    async def create_project(self, name: str) -> None:
        """Create a project."""
        await self._client.post(item_path(name))

    async def delete_project(self, name: str) -> None:
        """Delete a project."""
        await self._client.delete(item_path(name))

    # =========================================================================
    # Collections
    # =========================================================================

    async def list_collections(self, project: str) -> list[str]:
        """List the names of all collections in a project."""
        return parse_name_list(await self._client.get(list_path(project)), "collections")

    async def create_collection(self, project: str, collection: str) -> None:
        """Create a collection in a project."""
        await self._client.post(item_path(project, collection))

    async def get_collection(self, project: str, collection: str) -> str:
        """Return the collection's contents as raw text."""
        return await self._client.get(item_path(project, collection))

    async def delete_collection(self, project: str, collection: str) -> None:
        """Delete a collection."""
        await self._client.delete(item_path(project, collection))

    # =========================================================================
    # Clusters
    # =========================================================================

    async def list_clusters(self, project: str, collection: str) -> list[str]:
        """List the names of all clusters in a collection."""
        return parse_name_list(await self._client.get(list_path(project, collection)), "clusters")

    async def create_cluster(self, project: str, collection: str, cluster: str) -> None:
        """Create a cluster in a collection."""
        await self._client.post(item_path(project, collection, cluster))

    async def get_cluster(self, project: str, collection: str, cluster: str) -> str:
        """Return the cluster's contents as raw text."""
        return await self._client.get(item_path(project, collection, cluster))

    async def delete_cluster(self, project: str, collection: str, cluster: str) -> None:
        """Delete a cluster."""
        await self._client.delete(item_path(project, collection, cluster))

    # =========================================================================
    # Records
    # =========================================================================

    async def list_records(self, project: str, collection: str, cluster: str) -> list[str]:
        """List the records in a cluster."""
        return parse_name_list(await self._client.get(list_path(project, collection, cluster)), "records")

    async def search_records(
        self,
        project: str,
        collection: str,
        cluster: str,
        options: SearchOptions | Mapping[str, Any] | None = None,
    ) -> list[str]:
        """
        Search the records in a cluster.

        Args:
            project: Project name
            collection: Collection name
            cluster: Cluster name
            options: SearchOptions, or a mapping keyed by query parameter name

        Returns:
            Matching records, one line each

        """
        if isinstance(options, SearchOptions):
            params = options.to_params()
        else:
            params = dict(options or {})
        text = await self._client.get(list_path(project, collection, cluster), params)
        return split_lines(text)

    async def create_record(
        self,
        project: str,
        collection: str,
        cluster: str,
        name: str,
        type: str,
        value: str,
    ) -> None:
        """
        Create a record.

        Type and value travel as query params; the type is upper-cased.

        Args:
            project: Project name
            collection: Collection name
            cluster: Cluster name
            name: Record name
            type: Type tag, e.g. "STRING", "INTEGER" or "[]STRING"
            value: Value as text

        """
        record = Record(name=name, type=type, value=value)
        await self._client.post(item_path(project, collection, cluster, name), record.to_params())

    async def get_record(self, project: str, collection: str, cluster: str, identifier: str | int) -> str:
        """
        Get a record by name or ID.

        Returns:
            The record text, "<name> :<TYPE>: <value>". Use Record.parse to decode it.

        """
        return await self._client.get(item_path(project, collection, cluster, identifier))

    async def delete_record(self, project: str, collection: str, cluster: str, name: str) -> None:
        """Delete a record."""
        await self._client.delete(item_path(project, collection, cluster, name))

    # =========================================================================
    # Utility
    # =========================================================================

    async def health_check(self) -> Any:
        """Check that the server is up. Returns parsed JSON, or raw text if not JSON."""
        text = await self._client.get("/health")
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text
