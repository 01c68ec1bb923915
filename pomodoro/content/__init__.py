"""Quote and date content package."""

from .client import (
    ContentError,
    QuoteResponse,
    DateResponse,
    fetch_quote,
    fetch_date,
)
from .fetcher import ContentFetcher

__all__ = [
    "ContentError",
    "QuoteResponse",
    "DateResponse",
    "fetch_quote",
    "fetch_date",
    "ContentFetcher",
]
