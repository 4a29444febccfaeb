"""Category service - static category list (read-only)."""

import logging
from collections.abc import Iterable

from app.catalog.seed import CATEGORIES
from app.schemas.category import Category

logger = logging.getLogger(__name__)


class CategoryService:
    """Serves the seeded categories. Counts are static seed values."""

    def __init__(self, categories: Iterable[dict] = CATEGORIES):
        self.categories: tuple[Category, ...] = tuple(Category.model_validate(c) for c in categories)

    def get_all(self) -> list[Category]:
        logger.debug("Categories list requested")
        return list(self.categories)

    def get_by_id(self, category_id: int) -> Category | None:
        return next((c for c in self.categories if c.id == category_id), None)
