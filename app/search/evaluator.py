"""
In-memory filter/sort evaluator - the fallback search path.
Pure functions over the catalog: no I/O, no mutation, deterministic for a fixed input.
"""

from collections.abc import Iterable

from app.schemas.product import Product, SearchFilters


def matches_query(product: Product, query: str) -> bool:
    """Case-insensitive substring match on name, description, or a string (SKU) id."""
    needle = query.strip().lower()
    if needle in product.name.lower():
        return True
    if product.description and needle in product.description.lower():
        return True
    return isinstance(product.id, str) and needle in product.id.lower()


def category_matches(actual: str | int, wanted: str | int) -> bool:
    """Labels compare case-insensitively; numeric ids compare by their text ("104" == 104)."""
    return str(actual).strip().lower() == str(wanted).strip().lower()


def satisfies_filters(product: Product, filters: SearchFilters) -> bool:
    """Every supplied filter must hold (logical AND); absent filters are ignored."""
    if filters.category is not None and not category_matches(product.category, filters.category):
        return False
    if filters.min_price is not None and product.price < filters.min_price:
        return False
    if filters.max_price is not None and product.price > filters.max_price:
        return False
    if filters.min_rating is not None and (product.rating is None or product.rating < filters.min_rating):
        return False
    if filters.is_best_seller is not None and bool(product.is_best_seller) != filters.is_best_seller:
        return False
    return True


def _has_ranking_fields(product: Product) -> bool:
    return product.is_best_seller is not None or product.popularity is not None


def ranking_key(product: Product) -> tuple:
    """Best sellers first, then rating, then popularity (all descending)."""
    return (
        -int(bool(product.is_best_seller)),
        -(product.rating or 0.0),
        -(product.popularity or 0),
    )


def evaluate(query: str, filters: SearchFilters | None, products: Iterable[Product]) -> list[Product]:
    """Select and order catalog products for a query and filter set.

    Catalogs without ranking fields (no best-seller flag, no popularity) keep
    insertion order; otherwise a stable sort by ``ranking_key`` is applied.
    """
    filters = filters or SearchFilters()
    results = [p for p in products if matches_query(p, query) and satisfies_filters(p, filters)]
    if any(_has_ranking_fields(p) for p in results):
        results.sort(key=ranking_key)
    return results


def best_sellers(products: Iterable[Product], limit: int) -> list[Product]:
    """Best-seller listing: most purchased first, rating as tiebreak."""
    ranked = sorted(
        (p for p in products if p.is_best_seller),
        key=lambda p: (-(p.popularity or 0), -(p.rating or 0.0)),
    )
    return ranked[:limit]
