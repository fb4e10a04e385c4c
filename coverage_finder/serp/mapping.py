from typing import Any

from ..exceptions import UpstreamResponseError
from ..models import SearchResult

MAX_RESULTS = 10


def transform_serp_results(data: Any, limit: int = MAX_RESULTS) -> list[SearchResult]:
    """Map a DataForSEO task response to the first ``limit`` organic results.

    Paid, knowledge-graph and other item types are dropped; missing fields
    fall back to placeholder text and positions are renumbered from 1.
    """
    tasks = data.get("tasks") if isinstance(data, dict) else None
    if not tasks or not tasks[0] or not tasks[0].get("result"):
        raise UpstreamResponseError("Invalid response from DataForSEO API")

    first_result = tasks[0]["result"][0] or {}
    items = first_result.get("items") or []

    organic = [item for item in items if item.get("type") == "organic"][:limit]
    return [
        SearchResult(
            title=item.get("title") or "No title available",
            url=item.get("url") or "#",
            description=item.get("description") or "No description available",
            position=index + 1,
        )
        for index, item in enumerate(organic)
    ]
