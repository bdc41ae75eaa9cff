"""
OstrichDB - Async Python client for the OstrichDB REST API.

Layers:
- core: HTTP client, error type and data types
- sdk: OstrichDB client with one method per API operation
- builders: Chainable project -> collection -> cluster -> record handles
"""

from loguru import logger

from ostrichdb.builders import ClusterBuilder, CollectionBuilder, ProjectBuilder, RecordBuilder
from ostrichdb.core.client import OstrichDBError
from ostrichdb.core.types import RECORD_TYPES, Record, SearchOptions
from ostrichdb.sdk import OstrichDB

# Library logging is opt-in: logger.enable("ostrichdb")
logger.disable("ostrichdb")

__version__ = "0.1.0"
__all__ = [
    "ClusterBuilder",
    "CollectionBuilder",
    "OstrichDB",
    "OstrichDBError",
    "ProjectBuilder",
    "RECORD_TYPES",
    "Record",
    "RecordBuilder",
    "SearchOptions",
]
