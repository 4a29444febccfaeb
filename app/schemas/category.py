"""Category response schemas - REST API contract."""

from pydantic import BaseModel, ConfigDict, Field


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    count: int = Field(..., gt=0)  # Static seed value, not recomputed from the catalog


class CategoryListResponse(BaseModel):
    categories: list[Category]
