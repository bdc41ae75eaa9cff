"""
Core layer - Raw types and HTTP client.

This layer provides:
- Low-level async HTTP client with auth, timeout and error handling
- Dataclasses for records and search options
"""

from ostrichdb.core.client import APIClient, OstrichDBError, quote_segment
from ostrichdb.core.types import RECORD_TYPES, Record, SearchOptions

__all__ = [
    "APIClient",
    "OstrichDBError",
    "RECORD_TYPES",
    "Record",
    "SearchOptions",
    "quote_segment",
]
