"""Query-string encoding for filterable list and search endpoints.

The API expects nested search objects flattened into bracketed keys, for
example ``searchQuery[serviceDateRange][from]=2024-05-01`` and
``searchQuery[tags][0]=walking``. Null leaves are omitted.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

import pydantic


def _dump(value: Any) -> Any:
    if isinstance(value, pydantic.BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    return value


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten_query(value: Any, prefix: str | None = None) -> list[tuple[str, str]]:
    """Flatten a nested value into bracketed ``(key, value)`` pairs.

    Args:
        value: A pydantic model, mapping, list, or scalar.
        prefix: Key under which ``value`` is nested. Required for scalars
            and lists.

    Returns:
        Ordered list of key/value pairs, with None leaves skipped.
    """
    value = _dump(value)
    pairs: list[tuple[str, str]] = []

    if value is None:
        return pairs

    if isinstance(value, Mapping):
        for key, item in value.items():
            child = f"{prefix}[{key}]" if prefix is not None else str(key)
            pairs.extend(flatten_query(item, child))
        return pairs

    if prefix is None:
        msg = f"Cannot encode a top-level {type(value).__name__} without a key"
        raise ValueError(msg)

    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            pairs.extend(flatten_query(item, f"{prefix}[{index}]"))
        return pairs

    pairs.append((prefix, _scalar(value)))
    return pairs


def encode_query(value: Any, prefix: str | None = None) -> str:
    """Encode a nested value as a percent-encoded query string."""
    return urlencode(flatten_query(value, prefix), quote_via=quote)
