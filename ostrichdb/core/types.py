"""
Core types for the OstrichDB API.

These dataclasses describe what the client sends; the server owns
storage and type checking.
"""

from dataclasses import dataclass, fields
from typing import Any, Literal

# =============================================================================
# Record Types
# =============================================================================


RECORD_TYPES = ("STRING", "INTEGER", "FLOAT", "BOOLEAN", "DATETIME")

# Separator between name, type and value in a record's text form
RECORD_TYPE_DELIMITER = " :"


@dataclass
class Record:
    """A named, typed value within a cluster."""

    name: str
    type: str
    value: str
    id: int | None = None

    @property
    def is_array(self) -> bool:
        """Check if the type tag is an array tag such as []STRING."""
        return self.type.startswith("[]")

    def to_params(self) -> dict[str, str]:
        """Convert to query params for record creation."""
        return {"type": self.type.upper(), "value": self.value}

    @classmethod
    def parse(cls, text: str) -> "Record":
        """
        Create from the server's text form.

        Args:
            text: A record as returned by get_record, e.g. "age :INTEGER: 28"

        Returns:
            Record with name, type and value split out

        Raises:
            ValueError: If text is not in "<name> :<TYPE>: <value>" form

        """
        text = text.strip()
        name, sep, rest = text.partition(RECORD_TYPE_DELIMITER)
        record_type, type_end, value = rest.partition(":")
        if not sep or not type_end or not name or not record_type:
            raise ValueError(f"Not a record: {text!r}")
        return cls(name=name, type=record_type, value=value.removeprefix(" "))


# =============================================================================
# Search Types
# =============================================================================


# Python field name -> query parameter name
SEARCH_PARAM_NAMES = {
    "type": "type",
    "search": "search",
    "value_contains": "valueContains",
    "limit": "limit",
    "offset": "offset",
    "sort_by": "sortBy",
    "sort_order": "sortOrder",
    "min_value": "minValue",
    "max_value": "maxValue",
}


@dataclass
class SearchOptions:
    """Optional record search constraints. None fields are not sent."""

    type: str | None = None
    search: str | None = None
    value_contains: str | None = None
    limit: int | None = None
    offset: int | None = None
    sort_by: Literal["name", "value", "type", "id"] | None = None
    sort_order: Literal["asc", "desc"] | None = None
    min_value: str | None = None
    max_value: str | None = None

    def to_params(self) -> dict[str, Any]:
        """Convert to query params, dropping unset fields."""
        params = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                params[SEARCH_PARAM_NAMES[f.name]] = value
        return params
