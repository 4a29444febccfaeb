"""
Elasticsearch query composition.
Builds request bodies only (no I/O); relevance, filtering and sorting run inside the engine.
"""

from copy import deepcopy
from typing import Any

from app.schemas.product import SearchFilters

# Default result window requested from the engine; pages beyond it are not reachable
DEFAULT_MAX_RESULTS = 100

TEXT_FIELDS = ["name^2", "description", "id"]

SEARCH_SORT = [
    {"_score": {"order": "desc"}},
    {"is_best_seller": {"order": "desc"}},
    {"rating": {"order": "desc"}},
    {"popularity": {"order": "desc"}},
]


def _flag(value: bool | str) -> bool:
    """Accept a bool or the literal string "true"."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


def build_text_clause(query: str) -> dict[str, Any]:
    """Fuzzy multi-field match on name (boosted), description and id; match_all for an empty query."""
    query = (query or "").strip()
    if not query:
        return {"match_all": {}}
    return {
        "multi_match": {
            "query": query,
            "fields": list(TEXT_FIELDS),
            "fuzziness": "AUTO",
            "operator": "or",
            # Keyword id field must not reject fuzzy text
            "lenient": True,
        }
    }


def build_filter_clauses(filters: SearchFilters | None) -> list[dict[str, Any]]:
    """Term and range clauses for the bool filter context (AND semantics, no scoring)."""
    if filters is None:
        return []
    clauses: list[dict[str, Any]] = []
    if filters.category is not None:
        clauses.append({"term": {"category": filters.category}})
    price_range: dict[str, float] = {}
    if filters.min_price is not None:
        price_range["gte"] = filters.min_price
    if filters.max_price is not None:
        price_range["lte"] = filters.max_price
    if price_range:
        clauses.append({"range": {"price": price_range}})
    if filters.min_rating is not None:
        clauses.append({"range": {"rating": {"gte": filters.min_rating}}})
    if filters.is_best_seller is not None:
        clauses.append({"term": {"is_best_seller": _flag(filters.is_best_seller)}})
    return clauses


def compose_search_body(
    query: str,
    filters: SearchFilters | None = None,
    size: int = DEFAULT_MAX_RESULTS,
) -> dict[str, Any]:
    """Full search request: bool(must=text, filter=clauses), fixed multi-key sort, result cap."""
    return {
        "query": {
            "bool": {
                "must": [build_text_clause(query)],
                "filter": build_filter_clauses(filters),
            }
        },
        "sort": deepcopy(SEARCH_SORT),
        "size": size,
    }


def compose_best_sellers_body(size: int) -> dict[str, Any]:
    """Best sellers ordered by popularity, then rating."""
    return {
        "query": {"term": {"is_best_seller": True}},
        "sort": [
            {"popularity": {"order": "desc"}},
            {"rating": {"order": "desc"}},
        ],
        "size": size,
    }
