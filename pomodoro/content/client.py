"""HTTP contracts for the quote and date services.

Both services are tiny local JSON endpoints::

    GET /api/quote  ->  {"id": 3, "quote": "Well begun is half done."}
    GET /date       ->  {"date": "Monday, November 3"}

Every way a request can go wrong (connection refused, non-2xx status,
body that is not JSON, JSON of the wrong shape) surfaces as
:class:`ContentError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


class ContentError(Exception):
    """A quote or date could not be fetched or decoded."""


@dataclass(frozen=True)
class QuoteResponse:
    id: int
    quote: str

    @classmethod
    def from_json(cls, data: Any) -> QuoteResponse:
        if not isinstance(data, dict):
            raise ContentError(f"expected a JSON object, got {type(data).__name__}")
        quote_id = data.get("id")
        quote = data.get("quote")
        # bool is an int subclass but not a valid id
        if not isinstance(quote_id, int) or isinstance(quote_id, bool):
            raise ContentError("quote response is missing an integer 'id'")
        if not isinstance(quote, str):
            raise ContentError("quote response is missing a string 'quote'")
        return cls(id=quote_id, quote=quote)


@dataclass(frozen=True)
class DateResponse:
    date: str

    @classmethod
    def from_json(cls, data: Any) -> DateResponse:
        if not isinstance(data, dict):
            raise ContentError(f"expected a JSON object, got {type(data).__name__}")
        value = data.get("date")
        if not isinstance(value, str):
            raise ContentError("date response is missing a string 'date'")
        return cls(date=value)


def _get_json(client: httpx.Client, url: str) -> Any:
    try:
        response = client.get(url)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPError as e:
        raise ContentError(f"GET {url} failed: {e}") from e
    except ValueError as e:
        raise ContentError(f"GET {url} returned invalid JSON: {e}") from e


def fetch_quote(client: httpx.Client, url: str) -> QuoteResponse:
    """GET the quote endpoint and decode it."""
    return QuoteResponse.from_json(_get_json(client, url))


def fetch_date(client: httpx.Client, url: str) -> DateResponse:
    """GET the date endpoint and decode it."""
    return DateResponse.from_json(_get_json(client, url))
