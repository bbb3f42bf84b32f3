"""Wikipedia encyclopedia adapter."""

from __future__ import annotations

from .client import WikipediaAPIError, WikipediaClient
from .schema import ExtractResponse, OpenSearchResponse

__all__ = [
    "ExtractResponse",
    "OpenSearchResponse",
    "WikipediaAPIError",
    "WikipediaClient",
]
