"""Shared model base and the response envelopes every endpoint uses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


def to_kebab(name: str) -> str:
    """Map a snake_case field name to the API's kebab-case key."""
    return name.replace("_", "-")


class TastyModel(BaseModel):
    """Base for all API models.

    The API uses kebab-case keys (``session-token``); fields are declared
    in snake_case and accept either spelling on input.
    """

    model_config = ConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        extra="ignore",
        validate_assignment=True,
    )


class Pagination(TastyModel):
    """Pagination metadata attached to paginated list responses."""

    per_page: int | None = None
    page_offset: int | None = None
    item_offset: int | None = None
    total_items: int | None = None
    total_pages: int | None = None
    current_item_count: int | None = None
    previous_link: str | None = None
    next_link: str | None = None
    paging_link_template: str | None = None


class DataEnvelope(TastyModel, Generic[T]):
    """``{"data": <payload>, "context": "..."}``"""

    data: T
    context: str | None = None


class ItemList(TastyModel, Generic[T]):
    """The ``data`` object of a list response."""

    items: list[T] = Field(default_factory=list)


class ListEnvelope(TastyModel, Generic[T]):
    """``{"data": {"items": [...]}, "pagination": {...}, "context": "..."}``"""

    data: ItemList[T] = Field(default_factory=ItemList)
    pagination: Pagination | None = None
    context: str | None = None

    @property
    def items(self) -> list[T]:
        return self.data.items
