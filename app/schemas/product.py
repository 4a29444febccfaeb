"""Product request/response schemas - REST API contract and catalog record type."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Product(BaseModel):
    """One catalog record. Fields a catalog variant does not carry stay None and are omitted from JSON."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int | str
    name: str
    category: str | int
    price: float = Field(..., ge=0)
    description: str | None = None
    in_stock: bool | None = None
    is_best_seller: bool | None = None
    rating: float | None = Field(None, ge=0, le=5)
    review_count: int | None = Field(None, ge=0)
    popularity: int | None = Field(None, ge=0)
    list_price: float | None = Field(None, ge=0)
    image_url: str | None = None
    product_url: str | None = None
    score: float | None = None  # Relevance score, set only on Elasticsearch hits

    @property
    def key(self) -> str:
        """Lookup key for path parameters (ids arrive as strings)."""
        return str(self.id)

    def to_document(self) -> dict:
        """Snake-case document for the search index (no relevance score).

        ``is_best_seller`` is always present; the index maps null to false so that
        a missing flag filters as False, like the in-memory evaluator.
        """
        document = self.model_dump(exclude_none=True, exclude={"score"})
        document.setdefault("is_best_seller", None)
        return document


class SearchFilters(BaseModel):
    """Optional narrowing filters; absent filters impose no constraint."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    category: str | int | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_rating: float | None = None
    is_best_seller: bool | None = None

    @field_validator("is_best_seller", mode="before")
    @classmethod
    def _parse_flag(cls, value):
        # Query strings carry "true"/"false"; anything but "true" means False
        if value is None or isinstance(value, bool):
            return value
        return str(value).strip().lower() == "true"


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class SearchResponse(BaseModel):
    query: str
    filters: SearchFilters
    pagination: Pagination
    results: list[Product]


class ProductListResponse(BaseModel):
    results: list[Product]
