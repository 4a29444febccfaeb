"""
Query composer tests - shape of the Elasticsearch request body.
"""

import pytest

from app.schemas.product import SearchFilters
from app.search.query_builder import (
    _flag,
    build_filter_clauses,
    build_text_clause,
    compose_best_sellers_body,
    compose_search_body,
)


def test_text_clause_is_fuzzy_multi_match():
    clause = build_text_clause("headphones")
    assert clause == {
        "multi_match": {
            "query": "headphones",
            "fields": ["name^2", "description", "id"],
            "fuzziness": "AUTO",
            "operator": "or",
            "lenient": True,
        }
    }


@pytest.mark.parametrize("query", ["", "   ", None])
def test_empty_query_matches_all(query):
    assert build_text_clause(query) == {"match_all": {}}


def test_no_filters_no_clauses():
    assert build_filter_clauses(None) == []
    assert build_filter_clauses(SearchFilters()) == []


def test_all_filters():
    filters = SearchFilters(category=104, min_price=50, max_price=200, min_rating=4, is_best_seller=True)
    assert build_filter_clauses(filters) == [
        {"term": {"category": 104}},
        {"range": {"price": {"gte": 50, "lte": 200}}},
        {"range": {"rating": {"gte": 4}}},
        {"term": {"is_best_seller": True}},
    ]


def test_single_price_bound():
    assert build_filter_clauses(SearchFilters(max_price=10)) == [{"range": {"price": {"lte": 10}}}]


@pytest.mark.parametrize(
    "raw, expected",
    [(True, True), (False, False), ("true", True), ("TRUE", True), ("false", False), ("yes", False)],
)
def test_best_seller_flag_accepts_bool_or_string(raw, expected):
    assert _flag(raw) is expected
    assert SearchFilters(is_best_seller=raw).is_best_seller is expected


def test_search_body_sort_and_cap():
    body = compose_search_body("watch", SearchFilters(category="Sports"))
    assert body["size"] == 100
    assert body["sort"] == [
        {"_score": {"order": "desc"}},
        {"is_best_seller": {"order": "desc"}},
        {"rating": {"order": "desc"}},
        {"popularity": {"order": "desc"}},
    ]
    assert body["query"]["bool"]["must"] == [build_text_clause("watch")]
    assert body["query"]["bool"]["filter"] == [{"term": {"category": "Sports"}}]


def test_search_body_is_fresh_each_call():
    first = compose_search_body("a")
    first["sort"][0]["_score"]["order"] = "asc"
    assert compose_search_body("a")["sort"][0] == {"_score": {"order": "desc"}}


def test_best_sellers_body():
    assert compose_best_sellers_body(5) == {
        "query": {"term": {"is_best_seller": True}},
        "sort": [{"popularity": {"order": "desc"}}, {"rating": {"order": "desc"}}],
        "size": 5,
    }
