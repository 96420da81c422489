"""Common Pydantic schemas and field normalizers."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _to_trimmed(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


def _to_trimmed_or_none(value: Any) -> Any:
    if isinstance(value, str):
        trimmed = value.strip()
        return trimmed or None
    return value


def _to_trimmed_lower(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


TrimmedStr = Annotated[str, BeforeValidator(_to_trimmed)]
OptionalTrimmedStr = Annotated[str | None, BeforeValidator(_to_trimmed_or_none)]
LowerTrimmedStr = Annotated[str, BeforeValidator(_to_trimmed_lower)]
PositiveId = Annotated[int, Field(gt=0)]


class DeletedResponse(BaseModel):
    deleted: bool = True


class PaginationMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    limit: int
    total_pages: int = Field(serialization_alias="totalPages")
    has_next_page: bool = Field(serialization_alias="hasNextPage")
    has_prev_page: bool = Field(serialization_alias="hasPrevPage")
