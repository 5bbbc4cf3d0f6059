"""Tests for bracketed query-string encoding."""

import re
from datetime import date
from urllib.parse import parse_qsl

import pytest

from tigerbay.models.departures import CacheSearchRequest, DateBounds, PriceBounds
from tigerbay.query import encode_query, flatten_query

KEY_PART = re.compile(r"[^\[\]]+")


def _decode(query: str) -> dict:
    """Minimal bracket-notation decoder: ``a[b][0]=x`` -> ``{"a": {"b": ["x"]}}``."""
    root: dict = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        parts = KEY_PART.findall(key)
        node = root
        for part in parts[:-1]:
            node = node.setdefault(part, {})
        node[parts[-1]] = value
    return _listify(root)


def _listify(node):
    if not isinstance(node, dict):
        return node
    items = {key: _listify(value) for key, value in node.items()}
    if items and all(key.isdigit() for key in items):
        return [items[str(index)] for index in range(len(items))]
    return items


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------


def test_nested_search_round_trips_through_decoder():
    """Nested date ranges and arrays survive encode -> decode, minus null leaves."""
    params = CacheSearchRequest(
        service_date_range=DateBounds(from_=date(2024, 5, 1), to=date(2024, 6, 30)),
        price_range=PriceBounds(to=1500.5),
        tags=["walking", "coastal"],
        months=[5, 6],
        currency_code="GBP",
        tour_name=None,
    )

    decoded = _decode(encode_query(params, "searchQuery"))

    assert decoded == {
        "searchQuery": {
            "serviceDateRange": {"from": "2024-05-01", "to": "2024-06-30"},
            "priceRange": {"to": "1500.5"},
            "tags": ["walking", "coastal"],
            "months": ["5", "6"],
            "currencyCode": "GBP",
        }
    }


# ---------------------------------------------------------------------------
# Flattening rules
# ---------------------------------------------------------------------------


def test_flatten_skips_none_leaves():
    """None values at any depth are omitted entirely."""
    pairs = flatten_query({"a": None, "b": {"c": None, "d": 1}}, "q")

    assert pairs == [("q[b][d]", "1")]


def test_flatten_indexes_lists():
    """List items get positional indices."""
    assert flatten_query({"ids": [3, 4]}) == [("ids[0]", "3"), ("ids[1]", "4")]


def test_flatten_renders_booleans_lowercase():
    """Booleans use JSON spelling."""
    assert flatten_query({"x": True, "y": False}) == [("x", "true"), ("y", "false")]


def test_flatten_uses_model_aliases():
    """Pydantic models are flattened by their camelCase aliases."""
    pairs = flatten_query(CacheSearchRequest(departure_setup_id=12, adult_count=2))

    assert pairs == [("departureSetupId", "12"), ("adultCount", "2")]


def test_flatten_top_level_scalar_requires_prefix():
    """A bare scalar has no key to encode under."""
    with pytest.raises(ValueError, match="without a key"):
        flatten_query("orphan")


def test_encode_percent_encodes_brackets_and_spaces():
    """Brackets and spaces are percent-encoded, spaces as %20."""
    assert encode_query({"search": {"surname": "de la Cruz"}}) == (
        "search%5Bsurname%5D=de%20la%20Cruz"
    )


def test_encode_empty_object():
    """An object with only null fields encodes to an empty string."""
    assert encode_query(CacheSearchRequest(), "searchQuery") == ""
