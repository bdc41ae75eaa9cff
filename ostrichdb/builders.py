"""
Builder chain over the OstrichDB client.

Each builder holds the names collected so far and a reference to the
client. Builders are immutable; descending returns a new builder and every
operation is a single call on the client.

Example:
    cluster = db.project("shop").collection("users").cluster("active")
    await cluster.create()
    await cluster.record("email", "STRING", "a@b.c").create()
    names = await cluster.list_records()

"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ostrichdb.core.types import SearchOptions

if TYPE_CHECKING:
    from ostrichdb.sdk import OstrichDB


@dataclass(frozen=True)
class ProjectBuilder:
    """Handle on a project."""

    client: "OstrichDB"
    project_name: str
    project_id: str = ""

    def collection(self, name: str) -> "CollectionBuilder":
        """Get a handle on a collection in this project."""
        return CollectionBuilder(self.client, self.project_name, name)

    async def create(self) -> None:
        """Create the project."""
        await self.client.create_project(self.project_name)

    async def delete(self) -> None:
        """Delete the project."""
        await self.client.delete_project(self.project_name)

    async def list_collections(self) -> list[str]:
        """List the names of the collections in this project."""
        return await self.client.list_collections(self.project_name)


@dataclass(frozen=True)
class CollectionBuilder:
    """Handle on a collection within a project."""

    client: "OstrichDB"
    project_name: str
    collection_name: str

    def cluster(self, name: str) -> "ClusterBuilder":
        """Get a handle on a cluster in this collection."""
        return ClusterBuilder(self.client, self.project_name, self.collection_name, name)

    async def create(self) -> None:
        """Create the collection."""
        await self.client.create_collection(self.project_name, self.collection_name)

    async def get(self) -> str:
        """Return the collection contents as raw text."""
        return await self.client.get_collection(self.project_name, self.collection_name)

    async def delete(self) -> None:
        """Delete the collection."""
        await self.client.delete_collection(self.project_name, self.collection_name)

    async def list_clusters(self) -> list[str]:
        """List the names of the clusters in this collection."""
        return await self.client.list_clusters(self.project_name, self.collection_name)


@dataclass(frozen=True)
class ClusterBuilder:
    """Handle on a cluster within a collection."""

    client: "OstrichDB"
    project_name: str
    collection_name: str
    cluster_name: str

    def record(self, name: str, type: str, value: str) -> "RecordBuilder":
        """Get a record handle. Nothing is sent until one of its methods is awaited."""
        return RecordBuilder(
            self.client,
            self.project_name,
            self.collection_name,
            self.cluster_name,
            name,
            type,
            value,
        )

    async def create(self) -> None:
        """Create the cluster."""
        await self.client.create_cluster(self.project_name, self.collection_name, self.cluster_name)

    async def get(self) -> str:
        """Return the cluster contents as raw text."""
        return await self.client.get_cluster(self.project_name, self.collection_name, self.cluster_name)

    async def delete(self) -> None:
        """Delete the cluster."""
        await self.client.delete_cluster(self.project_name, self.collection_name, self.cluster_name)

    async def list_records(self) -> list[str]:
        """List the records in this cluster."""
        return await self.client.list_records(self.project_name, self.collection_name, self.cluster_name)

    async def search_records(self, options: SearchOptions | Mapping[str, Any] | None = None) -> list[str]:
        """Search the records in this cluster."""
        return await self.client.search_records(
            self.project_name,
            self.collection_name,
            self.cluster_name,
            options,
        )


@dataclass(frozen=True)
class RecordBuilder:
    """
    Handle on a record within a cluster.

    The name, type and value given at construction are defaults: create(),
    get() and delete() use them for any argument not passed explicitly.
    """

    client: "OstrichDB"
    project_name: str
    collection_name: str
    cluster_name: str
    record_name: str
    record_type: str
    record_value: str

    async def create(self, name: str | None = None, type: str | None = None, value: str | None = None) -> None:
        """Create the record; omitted arguments default to this record's name, type and value."""
        await self.client.create_record(
            self.project_name,
            self.collection_name,
            self.cluster_name,
            self.record_name if name is None else name,
            self.record_type if type is None else type,
            self.record_value if value is None else value,
        )

    async def get(self, identifier: str | int | None = None) -> str:
        """Get a record by name or ID (defaults to this record's name)."""
        return await self.client.get_record(
            self.project_name,
            self.collection_name,
            self.cluster_name,
            self.record_name if identifier is None else identifier,
        )

    async def delete(self, name: str | None = None) -> None:
        """Delete a record by name (defaults to this record's name)."""
        await self.client.delete_record(
            self.project_name,
            self.collection_name,
            self.cluster_name,
            self.record_name if name is None else name,
        )
